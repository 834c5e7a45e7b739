from __future__ import annotations

import datetime as dt
import enum
from email.utils import format_datetime
from typing import Union
from urllib.parse import urlparse

MONTHS_ES = ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sep", "oct", "nov", "dic")
MAX_LINES = 3

DateLike = Union[str, dt.date]


class Markup(enum.Enum):
    """Special-character tables, applied in order so ``&`` never double-escapes."""

    HTML = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"))
    XML = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"), ('"', "&quot;"), ("'", "&apos;"))


def escape_markup(text: str, mode: Markup = Markup.HTML) -> str:
    for char, entity in mode.value:
        text = text.replace(char, entity)
    return text


def parse_iso_date(value: DateLike) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(value)


def format_date_es(value: DateLike) -> str:
    date = parse_iso_date(value)
    return f"{date.day} {MONTHS_ES[date.month - 1]} {date.year}"


def to_rfc822(value: DateLike) -> str:
    # Pinned to noon UTC so every timezone within +/-12h sees the same day.
    date = parse_iso_date(value)
    noon = dt.datetime.combine(date, dt.time(12, 0), tzinfo=dt.timezone.utc)
    return format_datetime(noon, usegmt=True)


def wrap_text(text: str, max_width: int) -> list[str]:
    """Greedy word wrap by character count, keeping at most ``MAX_LINES`` lines.

    A word longer than ``max_width`` is never split; it gets a line of its own.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(f"{current} {word}") <= max_width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines[:MAX_LINES]


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"


def site_domain(site_url: str) -> str:
    parsed = urlparse(site_url)
    return parsed.netloc or site_url.rstrip("/")


def utc_today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()
