"""Concrete service implementations: the document controller and file I/O."""

from .document_controller import ControllerOptions, DocumentStateController, Notification
from .file_service import FileService

__all__ = ["ControllerOptions", "DocumentStateController", "FileService", "Notification"]
