from __future__ import annotations

from pathlib import Path

from .errors import WriteError


def ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc


def write_text(path: Path, text: str) -> Path:
    ensure_dir(path.parent)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc
    return path
