from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydfm.domain.models import (
    DocumentState,
    FileEvent,
    OperationOutcome,
    is_file_name,
)
from pydfm.services.ui.ports.dialogs import IFileDialogService
from pydfm.services.ui.ports.messages import Answer, IMessageService
from pydfm.utils.constants import (
    DEFAULT_EXT,
    DEFAULT_FILTER,
    DEFAULT_SAVE_PROMPT,
    DEFAULT_SAVE_TITLE,
    ERROR_TITLE,
    OPEN_CAPTION,
    SAVE_AS_CAPTION,
)

log = logging.getLogger(__name__)

_UNSET: Any = object()


def _as_str_path(path: Any) -> str | None:
    return os.fspath(path) if path is not None else None


# A handler may return a replacement path (str or path-like); None keeps the event's path.
FileHandler = Callable[[FileEvent], "str | os.PathLike[str] | None"]


class Notification:
    """Ordered list of handlers fired synchronously with a shared FileEvent."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[FileHandler] = []

    def subscribe(self, handler: FileHandler) -> None:
        self._handlers.append(handler)
        log.debug("Subscribed to '%s': %r", self.name, handler)

    # Qt-style alias
    connect = subscribe

    def unsubscribe(self, handler: FileHandler) -> None:
        self._handlers = [h for h in self._handlers if h is not handler]

    def __len__(self) -> int:
        return len(self._handlers)

    def fire(self, event: FileEvent) -> FileEvent:
        for handler in list(self._handlers):
            result = handler(event)
            if result is not None:
                event.file_path = result
            event.file_path = _as_str_path(event.file_path)
        return event


@dataclass
class ControllerOptions:
    default_ext: str = DEFAULT_EXT
    filter: str = DEFAULT_FILTER
    save_prompt: str = DEFAULT_SAVE_PROMPT
    save_title: str = DEFAULT_SAVE_TITLE


class DocumentStateController:
    """
    Tracks the current document's file name and modified flag and drives the
    New / Open / Save / Save As protocol.

    Actual I/O belongs to the host: subscribe to ``new_requested``,
    ``open_requested`` and ``save_requested`` and raise to report a failure.
    ``state_changed`` fires once the path and flag have settled.

    Every public operation returns True on success. ``last_outcome`` tells a
    cancelled dialog apart from a failed handler.
    """

    def __init__(
        self,
        dialogs: IFileDialogService,
        messages: IMessageService,
        *,
        options: ControllerOptions | None = None,
        parent: Any | None = None,
    ) -> None:
        self.dialogs = dialogs
        self.messages = messages
        self.parent = parent

        opts = options or ControllerOptions()
        self.default_ext = opts.default_ext
        self.filter = opts.filter
        self.save_prompt = opts.save_prompt
        self.save_title = opts.save_title

        self.state = DocumentState()
        self.last_outcome: OperationOutcome | None = None
        self.last_error: Exception | None = None

        self.new_requested = Notification("new_requested")
        self.open_requested = Notification("open_requested")
        self.save_requested = Notification("save_requested")
        self.state_changed = Notification("state_changed")

    # ---------- Read state ----------

    @property
    def file_path(self) -> str | None:
        return self.state.file_path

    @property
    def is_modified(self) -> bool:
        return self.state.is_modified

    @is_modified.setter
    def is_modified(self, value: bool) -> None:
        self.state.is_modified = bool(value)

    @property
    def has_file_name(self) -> bool:
        return self.state.has_file_name

    @property
    def file_title(self) -> str:
        return self.state.file_title

    # ---------- Public operations ----------

    def new_document(self) -> bool:
        """Clear the current document, prompting to save pending changes first."""
        if not self.prompt_save_if_modified():
            return False
        return self._run_protocol(self.new_requested, None)

    def open(self, path: str | None = _UNSET) -> bool:
        """
        Without arguments: prompt to save, then let the user pick a file.
        With ``path``: load it directly, bypassing the prompt and the dialog.
        """
        if path is not _UNSET:
            return self._run_protocol(self.open_requested, self._require_path(path))

        if not self.prompt_save_if_modified():
            return False
        chosen = self.dialogs.get_open_file(
            self.parent,
            OPEN_CAPTION,
            None,
            self.filter,
            default_ext=self.default_ext,
            must_exist=True,
        )
        if chosen is None:
            return self._cancelled("open")
        return self._run_protocol(self.open_requested, str(chosen))

    def save(self) -> bool:
        """Save under the current name, or ask for one if the document is unnamed."""
        if self.has_file_name:
            return self._run_protocol(self.save_requested, self.file_path)
        return self.save_as()

    def save_as(self, path: str | None = _UNSET) -> bool:
        """
        Without arguments: ask for a destination (overwrite is confirmed).
        With ``path``: save there directly.
        """
        if path is not _UNSET:
            return self._run_protocol(self.save_requested, self._require_path(path))

        chosen = self.dialogs.get_save_file(
            self.parent,
            SAVE_AS_CAPTION,
            self.file_path,
            self.filter,
            default_ext=self.default_ext,
            confirm_overwrite=True,
        )
        if chosen is None:
            return self._cancelled("save_as")
        return self._run_protocol(self.save_requested, str(chosen))

    def prompt_save_if_modified(self) -> bool:
        """
        True when it is fine to discard the current content: the document is
        unmodified, the user chose No, or the user chose Yes and saving worked.
        """
        if not self.is_modified:
            return True

        answer = self.messages.confirm(self.parent, self.save_title, self.save_prompt)
        log.debug("Save prompt answered %s", answer.name)
        if answer is Answer.YES:
            return self.save()
        if answer is Answer.CANCEL:
            return self._cancelled("prompt")
        return True

    # ---------- Protocol ----------

    def _run_protocol(self, notification: Notification, path: str | None) -> bool:
        event = FileEvent(path)
        try:
            notification.fire(event)
        except Exception as e:
            log.debug("%s handler failed for %r", notification.name, path, exc_info=True)
            self.last_outcome = OperationOutcome.FAILED
            self.last_error = e
            self.messages.error(self.parent, ERROR_TITLE, self._error_text(notification, path, e))
            return False

        event.file_path = _as_str_path(event.file_path)
        self.state.file_path = event.file_path
        self.state.is_modified = False
        self.last_outcome = OperationOutcome.SUCCESS
        self.last_error = None
        log.debug("%s completed: %r", notification.name, event.file_path)
        self.state_changed.fire(event)
        return True

    def _error_text(self, notification: Notification, path: str | None, e: Exception) -> str:
        if notification is self.new_requested:
            return f"Error creating new file : {e}"
        if notification is self.open_requested:
            return f"Error loading '{path}' : {e}"
        return f"Error saving '{path}' : {e}"

    def _cancelled(self, step: str) -> bool:
        log.debug("Cancelled by user at %s", step)
        self.last_outcome = OperationOutcome.CANCELLED
        self.last_error = None
        return False

    @staticmethod
    def _require_path(path: str | os.PathLike[str] | None) -> str:
        p = os.fspath(path) if path is not None else None
        if not is_file_name(p):
            raise ValueError("path must be a non-empty file name")
        return p  # type: ignore[return-value]
