APP_ORG = "SoftCircuits"
APP_NAME = "PyDataFileManager"
APP_TITLE = "Test App"

DEFAULT_EXT = "dat"
DEFAULT_FILTER = "All Files (*.*)|*.*"
DEFAULT_SAVE_PROMPT = "File has been modified. Save changes?"
DEFAULT_SAVE_TITLE = "Save Changes"

ERROR_TITLE = "Error"
OPEN_CAPTION = "Open"
SAVE_AS_CAPTION = "Save As"

LOG_LEVEL_ENV = "PYDFM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
