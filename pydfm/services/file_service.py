from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pydfm.domain.interfaces import IFileService

log = logging.getLogger(__name__)


class FileService(IFileService):
    """Text file I/O for the demo editor. Writes go through QSaveFile so a failed
    save never leaves a half-written file behind."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        log.debug("Reading %s", path)
        return Path(path).read_text(encoding=self.encoding)

    def write_text_atomic(self, path: Path, text: str) -> None:
        log.debug("Writing %s (%d chars)", path, len(text))
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode(self.encoding))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
