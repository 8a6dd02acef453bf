from __future__ import annotations

from .editor_presenter import EditorPresenter, IEditorView

__all__ = ["EditorPresenter", "IEditorView"]
