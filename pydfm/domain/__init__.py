"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IConfigService, IFileService
from .models import (
    UNTITLED,
    DocumentState,
    FileEvent,
    OperationOutcome,
    get_file_title,
    is_file_name,
)

__all__ = [
    "IConfigService",
    "IFileService",
    "UNTITLED",
    "DocumentState",
    "FileEvent",
    "OperationOutcome",
    "get_file_title",
    "is_file_name",
]
