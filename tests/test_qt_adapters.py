from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtWidgets import QDialog, QFileDialog, QMessageBox

from pydfm.services.ui.adapters import QtFileDialogService, QtMessageService
from pydfm.services.ui.ports import Answer, IFileDialogService, IMessageService


def test_adapters_satisfy_ports():
    assert isinstance(QtFileDialogService(), IFileDialogService)
    assert isinstance(QtMessageService(), IMessageService)


# ------------------------------
# Messages
# ------------------------------


@pytest.mark.parametrize(
    "button,expected",
    [
        (QMessageBox.StandardButton.Yes, Answer.YES),
        (QMessageBox.StandardButton.No, Answer.NO),
        (QMessageBox.StandardButton.Cancel, Answer.CANCEL),
        (QMessageBox.StandardButton.NoButton, Answer.CANCEL),
    ],
)
def test_confirm_maps_buttons(monkeypatch, button, expected):
    seen = {}

    def fake_question(parent, title, text, buttons, default=None):
        seen["title"], seen["text"] = title, text
        return button

    monkeypatch.setattr(QMessageBox, "question", fake_question)
    assert QtMessageService().confirm(None, "Save Changes", "Save?") is expected
    assert seen == {"title": "Save Changes", "text": "Save?"}


def test_error_uses_critical(monkeypatch):
    calls = []
    monkeypatch.setattr(QMessageBox, "critical", lambda *a, **k: calls.append(a))
    QtMessageService().error(None, "Error", "boom")
    assert calls == [(None, "Error", "boom")]


# ------------------------------
# File dialogs
# ------------------------------


@pytest.fixture()
def fake_exec(monkeypatch):
    """Replace QFileDialog.exec; records dialog settings and returns ``state['result']``."""
    state: dict = {"result": QDialog.DialogCode.Accepted.value, "files": []}

    def exec_(self):
        state["suffix"] = self.defaultSuffix()
        state["accept_mode"] = self.acceptMode()
        state["file_mode"] = self.fileMode()
        state["filters"] = self.nameFilters()
        state["no_overwrite_prompt"] = self.testOption(QFileDialog.Option.DontConfirmOverwrite)
        return state["result"]

    monkeypatch.setattr(QFileDialog, "exec", exec_)
    monkeypatch.setattr(QFileDialog, "selectedFiles", lambda self: state["files"])
    return state


def test_open_dialog_configuration(qapp, fake_exec, tmp_path: Path):
    target = tmp_path / "a.dat"
    fake_exec["files"] = [str(target)]

    got = QtFileDialogService().get_open_file(
        None, "Open", None, "All Files (*.*)|*.*", default_ext="dat", must_exist=True
    )
    assert got == target
    assert fake_exec["suffix"] == "dat"
    assert fake_exec["accept_mode"] == QFileDialog.AcceptMode.AcceptOpen
    assert fake_exec["file_mode"] == QFileDialog.FileMode.ExistingFile
    assert fake_exec["filters"] == ["All Files (*)"]


def test_save_dialog_configuration(qapp, fake_exec, tmp_path: Path):
    target = tmp_path / "b.txt"
    fake_exec["files"] = [str(target)]

    got = QtFileDialogService().get_save_file(
        None,
        "Save As",
        None,
        "Text (*.txt)|*.txt|All Files (*.*)|*.*",
        default_ext=".txt",
        confirm_overwrite=True,
    )
    assert got == target
    assert fake_exec["suffix"] == "txt"
    assert fake_exec["accept_mode"] == QFileDialog.AcceptMode.AcceptSave
    assert fake_exec["no_overwrite_prompt"] is False
    assert fake_exec["filters"] == ["Text (*.txt)", "All Files (*)"]


def test_dialog_cancel_returns_none(qapp, fake_exec):
    fake_exec["result"] = QDialog.DialogCode.Rejected.value
    assert QtFileDialogService().get_open_file(None, "Open", None, "All Files (*.*)|*.*") is None
    assert QtFileDialogService().get_save_file(None, "Save", None, "All Files (*.*)|*.*") is None
