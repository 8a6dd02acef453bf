from __future__ import annotations

from pathlib import Path

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QPlainTextEdit, QStatusBar

from pydfm.domain.interfaces import IFileService
from pydfm.services.document_controller import DocumentStateController
from pydfm.services.ui.presenters.editor_presenter import EditorPresenter
from pydfm.utils.constants import APP_TITLE


class EditorWindow(QMainWindow):
    """Minimal text editor whose File menu is driven by a DocumentStateController."""

    def __init__(
        self,
        controller: DocumentStateController,
        file_service: IFileService,
        *,
        start_path: Path | None = None,
        app_title: str = APP_TITLE,
    ) -> None:
        super().__init__()
        self.resize(800, 600)

        self.controller = controller
        self.controller.parent = self
        self.file_service = file_service

        self.editor = QPlainTextEdit(self)
        self.setCentralWidget(self.editor)
        self.setStatusBar(QStatusBar(self))

        self.presenter = EditorPresenter(
            self, controller, file_service, app_title=app_title
        )
        self.editor.textChanged.connect(self.presenter.text_edited)

        self._build_actions()
        self._build_menu()

        # Initial document
        if start_path is None or not self.controller.open(str(start_path)):
            self.controller.new_document()

    # ---------- IEditorView ----------
    def get_editor_text(self) -> str:
        return self.editor.toPlainText()

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction(
            "&New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "&Open…", self, shortcut=QKeySequence.StandardKey.Open, triggered=self._open
        )
        self.act_save = QAction(
            "&Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save &As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_exit = QAction(
            "E&xit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )

    def _build_menu(self):
        filem = self.menuBar().addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addSeparator()
        filem.addAction(self.act_exit)

    # ---------- Actions ----------
    def _new_file(self):
        self.controller.new_document()

    def _open(self):
        if self.controller.open():
            self.statusBar().showMessage(f"Opened: {self.controller.file_path}", 3000)

    def _save(self):
        if self.controller.save():
            self.statusBar().showMessage(f"Saved: {self.controller.file_path}", 3000)

    def _save_as(self):
        if self.controller.save_as():
            self.statusBar().showMessage(f"Saved: {self.controller.file_path}", 3000)

    # ---------- Close ----------
    def closeEvent(self, event: QCloseEvent):
        if not self.presenter.can_close():
            event.ignore()
            return
        super().closeEvent(event)
