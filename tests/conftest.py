import datetime as dt

import pytest

from postsite.config import SiteConfig
from postsite.content import Post


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig(
        site_url="https://virgilio.dev/",
        site_name="VirgilIO",
        site_description="Diario de campo: decisiones & resultados.",
    )


@pytest.fixture
def build_day() -> dt.date:
    return dt.date(2026, 1, 2)


@pytest.fixture
def example_post() -> Post:
    return Post(
        id="a",
        title="Hello & Goodbye",
        date="2025-03-09",
        summary="A <test>",
        tags=("x", "y"),
    )


@pytest.fixture
def sample_posts(example_post: Post) -> list[Post]:
    return [
        Post(
            id="sesion-03",
            title="It's a long title that needs wrapping across several lines of the card",
            date="2025-03-23",
            summary='Quotes "inside" the summary.',
            tags=("build", "rss", "seo", "svg"),
        ),
        Post(id="sesion-02", title="Sin etiquetas", date="2025-03-16", summary="Nada que etiquetar."),
        example_post,
    ]
