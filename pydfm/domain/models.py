from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import PureWindowsPath

UNTITLED = "Untitled"


def is_file_name(path: str | None) -> bool:
    """True if ``path`` is neither None nor blank."""
    return path is not None and path.strip() != ""


def get_file_title(path: str | None) -> str:
    """Name portion of ``path`` or "Untitled" when the document has no name."""
    if not is_file_name(path):
        return UNTITLED
    # PureWindowsPath splits on both "/" and "\"
    return PureWindowsPath(path).name


class OperationOutcome(Enum):
    SUCCESS = auto()
    CANCELLED = auto()
    FAILED = auto()


@dataclass
class FileEvent:
    """Request record handed to every notification handler.

    Handlers may rewrite ``file_path`` (e.g. to normalise it); the controller
    adopts whatever path the record holds once all handlers have run.
    """

    file_path: str | None = None

    @property
    def file_title(self) -> str:
        return get_file_title(self.file_path)


@dataclass
class DocumentState:
    file_path: str | None = None
    is_modified: bool = False

    @property
    def has_file_name(self) -> bool:
        return is_file_name(self.file_path)

    @property
    def file_title(self) -> str:
        return get_file_title(self.file_path)
