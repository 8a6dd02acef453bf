from __future__ import annotations

from typing import Any

from PyQt6.QtWidgets import QMessageBox

from pydfm.services.ui.ports.messages import Answer, IMessageService

_ANSWERS = {
    QMessageBox.StandardButton.Yes: Answer.YES,
    QMessageBox.StandardButton.No: Answer.NO,
    QMessageBox.StandardButton.Cancel: Answer.CANCEL,
}


class QtMessageService(IMessageService):
    """Qt-backed implementation for message dialogs."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        QMessageBox.critical(parent, title, text)

    def confirm(self, parent: Any | None, title: str, text: str) -> Answer:
        resp = QMessageBox.question(
            parent,
            title,
            text,
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Yes,
        )
        # Escape / closing the box maps to Cancel
        return _ANSWERS.get(resp, Answer.CANCEL)
