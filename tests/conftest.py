from __future__ import annotations

import os
from pathlib import Path

import pytest

# Qt must not try to open a real display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pydfm.services.document_controller import DocumentStateController  # noqa: E402
from pydfm.services.file_service import FileService  # noqa: E402
from pydfm.services.ui.ports.messages import Answer  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Port fakes ---


class FakeDialogs:
    """Records every dialog request and answers with queued paths (None = cancel)."""

    def __init__(self) -> None:
        self.open_result: Path | None = None
        self.save_result: Path | None = None
        self.open_calls: list[dict] = []
        self.save_calls: list[dict] = []

    def get_open_file(self, parent, caption, start_dir, filter_str, *, default_ext=None, must_exist=True):
        self.open_calls.append(
            dict(
                caption=caption,
                start_dir=start_dir,
                filter_str=filter_str,
                default_ext=default_ext,
                must_exist=must_exist,
            )
        )
        return self.open_result

    def get_save_file(
        self, parent, caption, start_path, filter_str, *, default_ext=None, confirm_overwrite=True
    ):
        self.save_calls.append(
            dict(
                caption=caption,
                start_path=start_path,
                filter_str=filter_str,
                default_ext=default_ext,
                confirm_overwrite=confirm_overwrite,
            )
        )
        return self.save_result


class FakeMessages:
    """Captures messages; ``answer`` is returned from confirm()."""

    def __init__(self) -> None:
        self.answer = Answer.CANCEL
        self.confirms: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def error(self, parent, title, text):
        self.errors.append((title, text))

    def confirm(self, parent, title, text):
        self.confirms.append((title, text))
        return self.answer


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def controller(dialogs: FakeDialogs, messages: FakeMessages) -> DocumentStateController:
    return DocumentStateController(dialogs, messages)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()
