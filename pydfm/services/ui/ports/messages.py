from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class Answer(Enum):
    """Button chosen in a confirmation dialog."""

    YES = auto()
    NO = auto()
    CANCEL = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def confirm(self, parent: Any | None, title: str, text: str) -> Answer:
        """Three-way Yes/No/Cancel question. Closing the dialog counts as Cancel."""
        ...
