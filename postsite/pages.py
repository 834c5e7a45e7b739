from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

from .config import SiteConfig
from .content import Post
from .render import write_text
from .utils import Markup, escape_markup, format_date_es, join_url, to_rfc822, utc_today

BLOG_DIR = "blog"
OG_DIR = "assets/og"
FEED_FILE = "feed.xml"
SITEMAP_FILE = "sitemap.xml"
HTML_EXT = ".html"

BLOG_LABEL = "Diario de Campo"
LANGUAGE = "es"
OG_LOCALE = "es_ES"
FAVICON = (
    "data:image/svg+xml,<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>"
    "<text y='.9em' font-size='90'>🪶</text></svg>"
)
RSS_ICON = (
    '<svg width="16" height="16" viewBox="0 0 24 24" fill="currentColor" aria-hidden="true">'
    '<circle cx="6.18" cy="17.82" r="2.18"/>'
    '<path d="M4 4.44v2.83c7.03 0 12.73 5.7 12.73 12.73h2.83c0-8.59-6.97-15.56-15.56-15.56zm0 '
    '5.66v2.83c3.9 0 7.07 3.17 7.07 7.07h2.83c0-5.47-4.43-9.9-9.9-9.9z"/>'
    "</svg>"
)
FONTS_URL = (
    "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700"
    "&family=JetBrains+Mono:wght@400;500;700&display=swap"
)


def post_url(config: SiteConfig, post: Post) -> str:
    return join_url(config.site_url, f"{BLOG_DIR}/{post.id}")


def og_image_url(config: SiteConfig, post: Post) -> str:
    return join_url(config.site_url, f"{OG_DIR}/{post.id}.svg")


def build_nav(config: SiteConfig) -> str:
    site_name = escape_markup(config.site_name)
    return "\n".join(
        [
            '  <nav class="nav" id="nav" role="navigation" aria-label="Navegación principal">',
            '    <div class="container nav__inner">',
            f'      <a href="/" class="nav__logo" aria-label="{site_name} inicio">{site_name}</a>',
            '      <div class="nav__links" id="navLinks" role="menubar">',
            '        <a href="/#metodo" class="nav__link" role="menuitem">Método</a>',
            '        <a href="/#stack" class="nav__link" role="menuitem">Stack</a>',
            '        <a href="/blog" class="nav__link nav__link--active" role="menuitem">Diario</a>',
            '        <a href="/#contacto" class="nav__link" role="menuitem">Contacto</a>',
            "      </div>",
            '      <button class="nav__toggle" id="navToggle" aria-label="Abrir menú" aria-expanded="false">',
            "        &#9776;",
            "      </button>",
            "    </div>",
            '    <div class="nav__overlay" id="navOverlay"></div>',
            "  </nav>",
        ]
    )


def build_footer(config: SiteConfig) -> str:
    site_name = escape_markup(config.site_name)
    return "\n".join(
        [
            '  <footer class="footer">',
            '    <div class="container footer__inner">',
            f'      <p class="footer__text">{site_name} &mdash; {escape_markup(config.site_description)}</p>',
            f'      <a href="/{FEED_FILE}" class="footer__rss" aria-label="RSS Feed" title="RSS Feed">',
            f"        {RSS_ICON}",
            "      </a>",
            "    </div>",
            "  </footer>",
        ]
    )


def html_shell(
    config: SiteConfig,
    *,
    title: str,
    description: str,
    canonical: str,
    og_image: str,
    body: str,
) -> str:
    """Wrap page-specific ``body`` markup in the shared document skeleton.

    ``title`` and ``description`` are raw text and get escaped here. URLs are
    built from the configured site URL and URL-safe post ids, so they are
    embedded as-is.
    """
    title = escape_markup(title)
    description = escape_markup(description)
    site_name = escape_markup(config.site_name)
    feed_url = join_url(config.site_url, FEED_FILE)
    head = "\n".join(
        [
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            "",
            f"  <title>{title}</title>",
            f'  <meta name="description" content="{description}">',
            '  <meta name="robots" content="index, follow">',
            f'  <link rel="canonical" href="{canonical}">',
            '  <meta name="theme-color" content="#6366f1">',
            f'  <meta name="author" content="{site_name}">',
            "",
            '  <meta property="og:type" content="article">',
            f'  <meta property="og:title" content="{title}">',
            f'  <meta property="og:description" content="{description}">',
            f'  <meta property="og:url" content="{canonical}">',
            f'  <meta property="og:image" content="{og_image}">',
            '  <meta property="og:image:width" content="1200">',
            '  <meta property="og:image:height" content="630">',
            f'  <meta property="og:locale" content="{OG_LOCALE}">',
            f'  <meta property="og:site_name" content="{site_name}">',
            "",
            '  <meta name="twitter:card" content="summary_large_image">',
            f'  <meta name="twitter:title" content="{title}">',
            f'  <meta name="twitter:description" content="{description}">',
            f'  <meta name="twitter:image" content="{og_image}">',
            "",
            f'  <link rel="icon" href="{FAVICON}">',
            '  <link rel="manifest" href="/site.webmanifest">',
            f'  <link rel="alternate" type="application/rss+xml" title="{site_name} &mdash; {BLOG_LABEL}" '
            f'href="{feed_url}">',
            "",
            '  <link rel="stylesheet" href="/styles/base.css">',
            '  <link rel="stylesheet" href="/styles/layout.css">',
            '  <link rel="stylesheet" href="/styles/components.css">',
            "",
            '  <link rel="preconnect" href="https://fonts.googleapis.com">',
            '  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
            f'  <link rel="stylesheet" href="{escape_markup(FONTS_URL)}">',
        ]
    )
    return "\n".join(
        [
            "<!DOCTYPE html>",
            f'<html lang="{LANGUAGE}" dir="ltr">',
            "<head>",
            head,
            "</head>",
            "<body>",
            "",
            build_nav(config),
            "",
            body,
            "",
            build_footer(config),
            "",
            '  <script src="/scripts/main.js" defer></script>',
            "</body>",
            "</html>",
        ]
    )


def build_tag_list(tags: tuple[str, ...]) -> str:
    return "".join(f'<span class="tag">#{escape_markup(tag)}</span>' for tag in tags)


def build_post_cards(posts: list[Post]) -> str:
    cards = []
    for post in posts:
        cards.append(
            '        <article class="post-card fade-in">'
            f'<p class="post-card__date">{format_date_es(post.date)}</p>'
            '<h3 class="post-card__title">'
            f'<a href="/{BLOG_DIR}/{post.id}" class="post-card__link">{escape_markup(post.title)}</a>'
            "</h3>"
            f'<p class="post-card__summary">{escape_markup(post.summary)}</p>'
            f'<div class="post-card__tags">{build_tag_list(post.tags)}</div>'
            "</article>"
        )
    return "\n".join(cards)


def build_blog_index(config: SiteConfig, output_dir: Path, posts: list[Post]) -> Path:
    body = "\n".join(
        [
            '  <main class="blog-page">',
            '    <section class="section blog-header">',
            '      <div class="container">',
            f'        <span class="section-label fade-in">{BLOG_LABEL}</span>',
            '        <h1 class="section-title fade-in">Historia real, sesión por sesión.</h1>',
            '        <p class="section-intro fade-in">',
            "          Esto no es marketing: es un registro de decisiones, fricción y resultados. "
            "Cada entrada marca una sesión concreta del proceso.",
            "        </p>",
            '        <div class="grid grid--2">',
            build_post_cards(posts),
            "        </div>",
            "      </div>",
            "    </section>",
            "  </main>",
        ]
    )
    html_doc = html_shell(
        config,
        title=f"{BLOG_LABEL} — {config.site_name}",
        description=config.site_description,
        canonical=join_url(config.site_url, BLOG_DIR),
        og_image=join_url(config.site_url, "assets/og-cover.svg"),
        body=body,
    )
    return write_text(output_dir / BLOG_DIR / "index.html", html_doc)


def build_post_page(config: SiteConfig, output_dir: Path, post: Post) -> Path:
    title = escape_markup(post.title)
    body = "\n".join(
        [
            '  <main class="blog-page">',
            '    <article class="section post-detail">',
            '      <div class="container post-detail__container">',
            '        <nav class="breadcrumb fade-in" aria-label="Breadcrumb">',
            '          <a href="/">Inicio</a>',
            '          <span aria-hidden="true">/</span>',
            f'          <a href="/{BLOG_DIR}">Diario</a>',
            '          <span aria-hidden="true">/</span>',
            f'          <span aria-current="page">{title}</span>',
            "        </nav>",
            "",
            '        <header class="post-detail__header fade-in">',
            f'          <time class="post-card__date" datetime="{post.date}">{format_date_es(post.date)}</time>',
            f'          <h1 class="post-detail__title">{title}</h1>',
            f'          <div class="post-card__tags">{build_tag_list(post.tags)}</div>',
            "        </header>",
            "",
            '        <div class="post-detail__body fade-in">',
            f"          <p>{escape_markup(post.summary)}</p>",
            "        </div>",
            "",
            '        <footer class="post-detail__footer fade-in">',
            f'          <a href="/{BLOG_DIR}" class="btn btn--ghost">&larr; Volver al Diario</a>',
            "        </footer>",
            "      </div>",
            "    </article>",
            "  </main>",
        ]
    )
    html_doc = html_shell(
        config,
        title=f"{post.title} — {config.site_name}",
        description=post.summary,
        canonical=post_url(config, post),
        og_image=og_image_url(config, post),
        body=body,
    )
    return write_text(output_dir / BLOG_DIR / f"{post.id}{HTML_EXT}", html_doc)


def build_rss(
    config: SiteConfig, output_dir: Path, posts: list[Post], today: Optional[dt.date] = None
) -> Path:
    items = []
    for post in posts:
        link = post_url(config, post)
        lines = [
            "    <item>",
            f"      <title>{escape_markup(post.title, Markup.XML)}</title>",
            f"      <link>{link}</link>",
            f'      <guid isPermaLink="true">{link}</guid>',
            f"      <description>{escape_markup(post.summary, Markup.XML)}</description>",
            f"      <pubDate>{to_rfc822(post.date)}</pubDate>",
        ]
        lines.extend(f"      <category>{escape_markup(tag, Markup.XML)}</category>" for tag in post.tags)
        lines.append("    </item>")
        items.append("\n".join(lines))
    last_build = to_rfc822(posts[0].date) if posts else to_rfc822(today or utc_today())
    site_name = escape_markup(config.site_name, Markup.XML)
    rss = "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
            "  <channel>",
            f"    <title>{site_name} — {BLOG_LABEL}</title>",
            f"    <link>{join_url(config.site_url, BLOG_DIR)}</link>",
            f"    <description>{escape_markup(config.site_description, Markup.XML)}</description>",
            f"    <language>{LANGUAGE}</language>",
            f"    <lastBuildDate>{last_build}</lastBuildDate>",
            f'    <atom:link href="{join_url(config.site_url, FEED_FILE)}" rel="self" type="application/rss+xml"/>',
            *items,
            "  </channel>",
            "</rss>",
        ]
    )
    return write_text(output_dir / FEED_FILE, rss)


def build_sitemap(
    config: SiteConfig, output_dir: Path, posts: list[Post], today: Optional[dt.date] = None
) -> Path:
    build_date = (today or utc_today()).isoformat()
    urls = [
        (config.site_url + "/", build_date, "monthly", "1.0"),
        (join_url(config.site_url, BLOG_DIR), build_date, "weekly", "0.8"),
    ]
    for post in posts:
        urls.append((post_url(config, post), post.date, "monthly", "0.7"))
    items = []
    for loc, lastmod, changefreq, priority in urls:
        items.append(
            "\n".join(
                [
                    "  <url>",
                    f"    <loc>{loc}</loc>",
                    f"    <lastmod>{lastmod}</lastmod>",
                    f"    <changefreq>{changefreq}</changefreq>",
                    f"    <priority>{priority}</priority>",
                    "  </url>",
                ]
            )
        )
    sitemap = "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            *items,
            "</urlset>",
        ]
    )
    return write_text(output_dir / SITEMAP_FILE, sitemap)
