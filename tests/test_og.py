"""Tests for the social-preview SVG cards."""

import xml.etree.ElementTree as ET
from pathlib import Path

from postsite.content import Post
from postsite.og import build_og_image, build_og_svg

SVG = "{http://www.w3.org/2000/svg}"


def chip_rects(root: ET.Element) -> list[ET.Element]:
    return [rect for rect in root.iter(f"{SVG}rect") if rect.get("rx") == "14"]


def title_texts(root: ET.Element) -> list[ET.Element]:
    return [text for text in root.iter(f"{SVG}text") if text.get("font-size") == "48"]


def test_og_image_written_per_post(tmp_path: Path, site_config, example_post):
    path = build_og_image(site_config, tmp_path, example_post)
    assert path == tmp_path / "assets" / "og" / "a.svg"
    root = ET.parse(path).getroot()
    assert root.get("width") == "1200"
    assert root.get("height") == "630"


def test_og_text_is_xml_escaped(site_config):
    post = Post(id="q", title="It's <here> & now", date="2025-03-09", summary="s", tags=("a'b",))
    svg = build_og_svg(site_config, post)
    assert ">It&apos;s &lt;here&gt; &amp;</text>" in svg
    assert ">now</text>" in svg
    assert "#a&apos;b" in svg
    assert "DIARIO DE CAMPO — 9 MAR 2025" in svg
    root = ET.fromstring(svg)
    assert [t.text for t in title_texts(root)] == ["It's <here> &", "now"]


def test_og_entities_count_toward_title_width(site_config):
    post = Post(id="t", title="Tom & Jerry & Spike & Tyke & Nibbles", date="2025-03-09", summary="s")
    svg = build_og_svg(site_config, post)
    assert ">Tom &amp; Jerry &amp; Spike</text>" in svg
    assert ">&amp; Tyke &amp; Nibbles</text>" in svg
    root = ET.fromstring(svg)
    titles = title_texts(root)
    assert [t.text for t in titles] == ["Tom & Jerry & Spike", "& Tyke & Nibbles"]
    assert [t.get("y") for t in titles] == ["280", "340"]


def test_og_title_lines_and_chip_layout(site_config, example_post):
    root = ET.fromstring(build_og_svg(site_config, example_post))
    titles = title_texts(root)
    assert [t.text for t in titles] == ["Hello & Goodbye"]
    assert titles[0].get("y") == "280"
    chips = chip_rects(root)
    # "#x" and "#y": 2 chars * 9 + 30 = 48 wide, 12px gutter.
    assert [(c.get("x"), c.get("width"), c.get("y")) for c in chips] == [
        ("100", "48", "370"),
        ("160", "48", "370"),
    ]
    labels = [t for t in root.iter(f"{SVG}text") if t.get("text-anchor") == "middle"]
    assert [(t.get("x"), t.text) for t in labels] == [("124", "#x"), ("184", "#y")]


def test_og_caps_title_lines_and_tags(site_config, sample_posts):
    post = sample_posts[0]
    root = ET.fromstring(build_og_svg(site_config, post))
    titles = title_texts(root)
    assert len(titles) == 3
    assert [t.get("y") for t in titles] == ["280", "340", "400"]
    chips = chip_rects(root)
    assert len(chips) == 3
    assert {c.get("y") for c in chips} == {"490"}


def test_og_without_tags(site_config, sample_posts):
    root = ET.fromstring(build_og_svg(site_config, sample_posts[1]))
    assert chip_rects(root) == []


def test_og_footer_uses_site_config(site_config, example_post):
    svg = build_og_svg(site_config, example_post)
    assert ">VirgilIO</text>" in svg
    assert ">virgilio.dev</text>" in svg
