# pydfm/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from pydfm.domain.interfaces import IConfigService
from pydfm.utils.constants import APP_NAME

log = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PyDataFileManager/config.ini or
         %LOCALAPPDATA%\PyDataFileManager\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)
    """

    DEFAULT_APP_DIR = APP_NAME
    DEFAULT_FILE = "config.ini"

    def __init__(
        self,
        explicit_path: Optional[Path] = None,
        project_root: Optional[Path] = None,
        *,
        use_user_dir: bool = True,
    ):
        self._parser = configparser.ConfigParser(interpolation=None)

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(Path(explicit_path))
        if use_user_dir:
            candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(Path(project_root) / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.exists():
                continue
            try:
                with path.open("r", encoding="utf-8") as fh:
                    self._parser.read_file(fh)
            except (OSError, configparser.Error) as e:
                # Malformed config never stops the app; defaults apply.
                log.warning("Ignoring unreadable config %s: %s", path, e)
                self._parser = configparser.ConfigParser(interpolation=None)
                continue
            log.debug("Loaded config from %s", path)
            break

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)
