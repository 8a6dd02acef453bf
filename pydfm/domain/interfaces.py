from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to sectioned string settings (INI style)."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
