"""
Tests for stylesheet, JSON, HTML, PNG and report exports.
"""

import json

import pytest
from PIL import Image

from colored_tags import TagColorEngine
from colored_tags.export import (
    build_stylesheet,
    build_tag_css,
    create_html_preview,
    create_swatch,
    export_json,
    generate_contrast_report,
)
from colored_tags.export.css_export import escape_tag, flatten_tag, tag_selectors
from colored_tags.tags import TagColors


@pytest.fixture(scope="module")
def engine():
    engine = TagColorEngine()
    engine.ensure_tags_known(["project/front-end", "todo", "日本"])
    return engine


class TestCss:
    """Selectors and rule text."""

    def test_escape_and_flatten(self):
        assert escape_tag("a/b/c") == "a\\/b\\/c"
        assert flatten_tag("Project/Front_End-2") == "projectfrontend-2"
        assert flatten_tag("日本") == ""

    def test_selectors(self):
        selectors = tag_selectors("a/B")
        assert selectors == [
            'a.tag[href="#a\\/B"]',
            ".cm-s-obsidian .cm-line span.cm-hashtag.colored-tag-a\\/B",
            ".cm-s-obsidian .cm-line span.cm-tag-ab.cm-hashtag",
        ]

    def test_flat_selector_skipped_when_empty(self):
        assert len(tag_selectors("日本")) == 2

    def test_rule_per_theme(self):
        css = build_tag_css(
            "todo",
            TagColors("#eeeeee", "#111111"),
            TagColors("#333333", "#fafafa"),
        )
        assert 'body a.tag[href="#todo"]' in css
        assert 'body.theme-dark a.tag[href="#todo"]' in css
        assert "background-color: #eeeeee;" in css
        assert "color: #fafafa;" in css

    def test_hex_format(self, engine):
        css = build_stylesheet(engine, ["todo"], color_format="hex")
        assert "lch(" not in css
        assert css.count("background-color: #") == 2

    def test_lch_format(self, engine):
        css = build_stylesheet(engine, ["todo"])
        assert "background-color: lch(" in css

    def test_unknown_format(self, engine):
        with pytest.raises(ValueError):
            build_stylesheet(engine, ["todo"], color_format="cmyk")

    def test_empty(self, engine):
        assert build_stylesheet(engine, []) == ""


class TestFiles:
    """File exports."""

    def test_json(self, engine, tmp_path):
        path = tmp_path / "tags.json"
        export_json(engine, str(path))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data["light"]) == 16
        assert data["light"][0]["hex"].startswith("#")
        assert set(data["tags"]) == set(engine.known_tags())
        assert data["tags"]["project/front-end"]["slot"] == 1
        assert data["_hue_offset"] == engine.hue_offset

    def test_html(self, engine, tmp_path):
        path = tmp_path / "preview.html"
        create_html_preview(engine, str(path))
        html = path.read_text(encoding="utf-8")
        assert "#project/front-end" in html
        assert "{light_tags}" not in html
        assert "Light Palette" in html

    def test_swatch(self, engine, tmp_path):
        path = tmp_path / "palette.png"
        create_swatch(engine.palettes, str(path), chip_size=10, spacing=2, padding=5)
        with Image.open(path) as image:
            assert image.size == (16 * 10 + 15 * 2 + 10, 2 * 10 + 3 * 5)

    def test_report(self, engine):
        report, issues = generate_contrast_report(engine)
        assert "TAG CONTRAST REPORT" in report
        assert "LIGHT THEME" in report and "DARK THEME" in report
        assert isinstance(issues, list)
