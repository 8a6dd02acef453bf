"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    APP_TITLE,
    DEFAULT_EXT,
    DEFAULT_FILTER,
    DEFAULT_SAVE_PROMPT,
    DEFAULT_SAVE_TITLE,
    ERROR_TITLE,
)
from .filters import to_qt_filter

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "APP_TITLE",
    "DEFAULT_EXT",
    "DEFAULT_FILTER",
    "DEFAULT_SAVE_PROMPT",
    "DEFAULT_SAVE_TITLE",
    "ERROR_TITLE",
    "to_qt_filter",
]
