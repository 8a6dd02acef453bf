from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pydfm.domain.interfaces import IFileService
from pydfm.domain.models import FileEvent
from pydfm.services.document_controller import DocumentStateController


@runtime_checkable
class IEditorView(Protocol):
    """Very small surface for a passive view (implemented by the Qt EditorWindow)."""

    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_title(self, title: str) -> None: ...


class EditorPresenter:
    """
    Connects a DocumentStateController to a text view.

    The controller decides *when* to new/open/save; the presenter does the
    actual work against the view and the file service. Errors from the file
    service propagate so the controller can report them.
    """

    def __init__(
        self,
        view: IEditorView,
        controller: DocumentStateController,
        files: IFileService,
        *,
        app_title: str,
    ) -> None:
        self.view = view
        self.controller = controller
        self.files = files
        self.app_title = app_title

        controller.new_requested.subscribe(self.on_new_requested)
        controller.open_requested.subscribe(self.on_open_requested)
        controller.save_requested.subscribe(self.on_save_requested)
        controller.state_changed.subscribe(self.on_state_changed)

    # ---------- Controller handlers ----------

    def on_new_requested(self, event: FileEvent) -> None:
        self.view.set_editor_text("")

    def on_open_requested(self, event: FileEvent) -> None:
        self.view.set_editor_text(self.files.read_text(Path(event.file_path)))

    def on_save_requested(self, event: FileEvent) -> None:
        self.files.write_text_atomic(Path(event.file_path), self.view.get_editor_text())

    def on_state_changed(self, event: FileEvent) -> None:
        self.view.set_title(self.window_title(event.file_title))

    # ---------- View callbacks ----------

    def text_edited(self) -> None:
        self.controller.is_modified = True

    def can_close(self) -> bool:
        return self.controller.prompt_save_if_modified()

    def window_title(self, file_title: str) -> str:
        return f"{file_title} - {self.app_title}"
