from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    Abstract UI port for modal file dialogs. Keeps the controller decoupled from Qt.

    ``filter_str`` uses pipe-separated description/pattern pairs,
    e.g. ``"Text Files (*.txt)|*.txt|All Files (*.*)|*.*"``.
    """

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str,
        *,
        default_ext: str | None = None,
        must_exist: bool = True,
    ) -> Path | None:
        """Return a selected file path or None if cancelled."""
        ...

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str,
        *,
        default_ext: str | None = None,
        confirm_overwrite: bool = True,
    ) -> Path | None:
        """Return a selected destination path or None if cancelled."""
        ...
