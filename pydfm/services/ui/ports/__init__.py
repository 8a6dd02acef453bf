from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import Answer, IMessageService

__all__ = [
    "Answer",
    "IFileDialogService",
    "IMessageService",
]
