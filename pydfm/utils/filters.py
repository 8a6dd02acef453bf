from __future__ import annotations

import re

_PARENS_RE = re.compile(r"\s*\([^)]*\)\s*$")


def to_qt_filter(filter_str: str) -> str:
    """
    Convert a pipe-separated filter ("Text (*.txt)|*.txt|All Files (*.*)|*.*")
    into Qt name filters ("Text (*.txt);;All Files (*)").

    Qt reads the patterns from the parentheses, so any pattern list already
    embedded in the description is replaced by the real one. ``*.*`` becomes
    ``*`` because Qt would otherwise hide files without an extension.
    """
    parts = [p.strip() for p in filter_str.split("|")] if filter_str else []
    if len(parts) % 2:
        raise ValueError(f"Filter must hold description/pattern pairs: {filter_str!r}")

    out: list[str] = []
    for label, patterns in zip(parts[0::2], parts[1::2]):
        globs = ["*" if g == "*.*" else g for g in re.split(r"[;\s]+", patterns) if g]
        name = _PARENS_RE.sub("", label) or label
        out.append(f"{name} ({' '.join(globs) or '*'})")
    return ";;".join(out)
