from __future__ import annotations

import datetime as dt
import json
import re
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InputError, ParseError

REQUIRED_FIELDS = ("id", "title", "date", "summary")
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    date: str
    summary: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def published(self) -> dt.date:
        return dt.date.fromisoformat(self.date)


def parse_post(data: object, index: int) -> Post:
    if not isinstance(data, dict):
        raise InputError(f"expected an object, got {type(data).__name__}", index=index)
    values = {}
    for key in REQUIRED_FIELDS:
        value = data.get(key)
        if value is None:
            raise InputError("missing required field", field=key, index=index)
        if not isinstance(value, str):
            raise InputError(f"expected a string, got {type(value).__name__}", field=key, index=index)
        values[key] = value
    if not values["id"].strip():
        raise InputError("must not be empty", field="id", index=index)
    date_error = InputError(f"not a YYYY-MM-DD date: {values['date']!r}", field="date", index=index)
    if not DATE_RE.fullmatch(values["date"]):
        raise date_error
    try:
        dt.date.fromisoformat(values["date"])
    except ValueError:
        raise date_error from None

    tags = data.get("tags")
    if tags is None:
        tags = []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise InputError("expected a list of strings", field="tags", index=index)
    return Post(tags=tuple(tags), **values)


def parse_posts(text: str) -> list[Post]:
    """Parse a JSON array of post objects, keeping source order.

    The first malformed post aborts the whole parse; nothing is skipped.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON in post list: {exc}") from exc
    if not isinstance(data, list):
        raise ParseError(f"Post list must be a JSON array, got {type(data).__name__}")
    return [parse_post(item, index) for index, item in enumerate(data)]


def load_posts(path: Path) -> list[Post]:
    if not path.exists():
        raise InputError(f"Posts file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read posts file {path}: {exc}") from exc
    return parse_posts(text)
