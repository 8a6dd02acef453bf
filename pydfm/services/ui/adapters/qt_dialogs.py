from __future__ import annotations

from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QDialog, QFileDialog

from pydfm.services.ui.ports.dialogs import IFileDialogService
from pydfm.utils.filters import to_qt_filter


class QtFileDialogService(IFileDialogService):
    """Qt-backed implementation of file dialogs.

    A QFileDialog instance is used instead of the static helpers because those
    cannot set a default suffix.
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
        dlg = self._make_dialog(parent, caption, start_dir, filter_str, default_ext)
        dlg.setAcceptMode(QFileDialog.AcceptMode.AcceptOpen)
        dlg.setFileMode(
            QFileDialog.FileMode.ExistingFile if must_exist else QFileDialog.FileMode.AnyFile
        )
        return self._run(dlg)

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
        dlg = self._make_dialog(parent, caption, start_path, filter_str, default_ext)
        dlg.setAcceptMode(QFileDialog.AcceptMode.AcceptSave)
        dlg.setFileMode(QFileDialog.FileMode.AnyFile)
        dlg.setOption(QFileDialog.Option.DontConfirmOverwrite, not confirm_overwrite)
        if start_path:
            dlg.selectFile(start_path)
        return self._run(dlg)

    # ---------- Helpers ----------

    @staticmethod
    def _make_dialog(
        parent: Any | None,
        caption: str,
        start: str | None,
        filter_str: str,
        default_ext: str | None,
    ) -> QFileDialog:
        dlg = QFileDialog(parent, caption, start or "")
        qt_filter = to_qt_filter(filter_str)
        if qt_filter:
            dlg.setNameFilter(qt_filter)
        if default_ext:
            dlg.setDefaultSuffix(default_ext.lstrip("."))
        return dlg

    @staticmethod
    def _run(dlg: QFileDialog) -> Path | None:
        if dlg.exec() != QDialog.DialogCode.Accepted.value:
            return None
        files = dlg.selectedFiles()
        return Path(files[0]) if files else None
