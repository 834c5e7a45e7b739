"""Social-preview SVG cards, one per post.

Text is measured by character count, not font metrics: the title wraps at
``TITLE_WIDTH`` characters and a tag chip is ``len(label) * CHIP_CHAR_WIDTH +
CHIP_PADDING`` pixels wide.
"""

from __future__ import annotations

from pathlib import Path

from .config import SiteConfig
from .content import Post
from .pages import OG_DIR
from .render import write_text
from .utils import Markup, escape_markup, format_date_es, site_domain, wrap_text

WIDTH = 1200
HEIGHT = 630
GRID_STEP = 60
MARGIN_X = 100

TITLE_WIDTH = 28
TITLE_TOP = 280
TITLE_LINE_HEIGHT = 60

MAX_TAGS = 3
CHIP_CHAR_WIDTH = 9
CHIP_PADDING = 30
CHIP_GUTTER = 12
CHIP_HEIGHT = 28
CHIP_OFFSET = 30

SANS = "system-ui, -apple-system, 'Segoe UI', sans-serif"
MONO = "'SF Mono', 'Fira Code', monospace"


def xml(text: str) -> str:
    return escape_markup(text, Markup.XML)


def build_grid() -> str:
    lines = [
        f'<line x1="{x}" y1="0" x2="{x}" y2="{HEIGHT}"/>' for x in range(0, WIDTH, GRID_STEP)
    ]
    lines.extend(
        f'<line x1="0" y1="{y}" x2="{WIDTH}" y2="{y}"/>' for y in range(GRID_STEP, HEIGHT, GRID_STEP)
    )
    return (
        '<g opacity="0.04" stroke="#818cf8" stroke-width="0.5">\n    '
        + "\n    ".join(lines)
        + "\n  </g>"
    )


def build_title(title: str) -> tuple[str, int]:
    # Wrapped after escaping, so entities count toward the line budget.
    lines = wrap_text(xml(title), TITLE_WIDTH)
    parts = []
    for i, line in enumerate(lines):
        parts.append(
            f'<text x="{MARGIN_X}" y="{TITLE_TOP + i * TITLE_LINE_HEIGHT}" font-family="{SANS}" '
            f'font-size="48" font-weight="700" fill="#f0f0f5" letter-spacing="-1">{line}</text>'
        )
    return "\n  ".join(parts), len(lines)


def build_tag_chips(tags: tuple[str, ...], top: int) -> str:
    chips = []
    x = MARGIN_X
    for tag in tags[:MAX_TAGS]:
        label = f"#{tag}"
        width = len(label) * CHIP_CHAR_WIDTH + CHIP_PADDING
        chips.append(
            f'<rect x="{x}" y="{top}" width="{width}" height="{CHIP_HEIGHT}" rx="14" fill="#6366f1" '
            'fill-opacity="0.15" stroke="#6366f1" stroke-opacity="0.3" stroke-width="1"/>\n  '
            f'<text x="{x + width / 2:g}" y="{top + 19}" font-family="system-ui, sans-serif" '
            f'font-size="12" fill="#a5b4fc" text-anchor="middle">{xml(label)}</text>'
        )
        x += width + CHIP_GUTTER
    return "\n  ".join(chips)


def build_og_svg(config: SiteConfig, post: Post) -> str:
    date = format_date_es(post.date).upper()
    title_svg, line_count = build_title(post.title)
    tags_svg = build_tag_chips(post.tags, TITLE_TOP + line_count * TITLE_LINE_HEIGHT + CHIP_OFFSET)
    return "\n".join(
        [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" '
            f'viewBox="0 0 {WIDTH} {HEIGHT}">',
            "  <defs>",
            '    <linearGradient id="bg" x1="0%" y1="0%" x2="100%" y2="100%">',
            '      <stop offset="0%" stop-color="#0a0a0f"/>',
            '      <stop offset="50%" stop-color="#111118"/>',
            '      <stop offset="100%" stop-color="#0d0d14"/>',
            "    </linearGradient>",
            '    <linearGradient id="accent" x1="0%" y1="0%" x2="100%" y2="0%">',
            '      <stop offset="0%" stop-color="#6366f1"/>',
            '      <stop offset="100%" stop-color="#818cf8"/>',
            "    </linearGradient>",
            "  </defs>",
            f'  <rect width="{WIDTH}" height="{HEIGHT}" fill="url(#bg)"/>',
            f"  {build_grid()}",
            f'  <rect x="{MARGIN_X}" y="160" width="60" height="3" rx="1.5" fill="url(#accent)"/>',
            f'  <text x="{MARGIN_X}" y="210" font-family="{MONO}" font-size="14" fill="#6366f1" opacity="0.8">'
            f"DIARIO DE CAMPO — {xml(date)}</text>",
            f"  {title_svg}",
            f"  {tags_svg}",
            f'  <text x="{MARGIN_X}" y="560" font-family="system-ui, -apple-system, sans-serif" font-size="20" '
            f'font-weight="700" fill="#f0f0f5" opacity="0.6">{xml(config.site_name)}</text>',
            f'  <text x="{MARGIN_X}" y="585" font-family="{MONO}" font-size="14" fill="#4f46e5" opacity="0.7">'
            f"{xml(site_domain(config.site_url))}</text>",
            f'  <rect x="0" y="{HEIGHT - 5}" width="{WIDTH}" height="5" fill="url(#accent)" opacity="0.6"/>',
            "</svg>",
        ]
    )


def build_og_image(config: SiteConfig, output_dir: Path, post: Post) -> Path:
    return write_text(output_dir / OG_DIR / f"{post.id}.svg", build_og_svg(config, post))
