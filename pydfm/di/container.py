from __future__ import annotations

from pathlib import Path

from pydfm.domain.interfaces import IFileService
from pydfm.services.config.app_config import AppConfig, build_app_config
from pydfm.services.document_controller import ControllerOptions, DocumentStateController
from pydfm.services.file_service import FileService
from pydfm.services.ui.adapters import QtFileDialogService, QtMessageService
from pydfm.services.ui.main_window import EditorWindow
from pydfm.services.ui.ports.dialogs import IFileDialogService
from pydfm.services.ui.ports.messages import IMessageService


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Reads controller options from the app config
      - Builds the controller and the demo editor window
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- Factories ----------

    def controller_options(self) -> ControllerOptions:
        return self.config.document_options()

    def build_controller(self) -> DocumentStateController:
        return DocumentStateController(
            self.dialogs,
            self.messages,
            options=self.controller_options(),
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str | None = None,
    ) -> EditorWindow:
        """Create the editor window wired to a fresh controller."""
        return EditorWindow(
            self.build_controller(),
            self.file_service,
            start_path=start_path,
            app_title=app_title or self.config.app_title(),
        )


def build_main_window(
    *,
    start_path: Path | None = None,
    explicit_ini: Path | None = None,
) -> EditorWindow:
    """One-call convenience for a ready-to-use window."""
    return Container.default(explicit_ini).build_main_window(start_path=start_path)
