"""
Tests for background blending and foreground search.
"""

import pytest
from coloraide import Color

from colored_tags.color import apca_contrast, lch_coords, mix_lch, wcag_contrast
from colored_tags.palette import generate_color_palette
from colored_tags.tags import ForegroundResolver, TagColorResolver, TagRegistry, find_foreground
from colored_tags.tags.resolver import (
    FALLBACK_FOREGROUND,
    MIN_APCA_CONTRAST,
    MIN_WCAG_CONTRAST,
    blend_background,
    palette_color,
    resolve_background,
)


@pytest.fixture
def palette():
    # 4 evenly spaced hues: 0, 90, 180, 270
    return generate_color_palette(4, 16, 87)


def passes_thresholds(foreground, background):
    fg = Color(foreground)
    bg = Color(background)
    wcag = wcag_contrast(fg, bg)
    apca = apca_contrast(fg, bg)
    light_ok = apca >= MIN_APCA_CONTRAST - 0.1 and wcag >= MIN_WCAG_CONTRAST - 0.01
    dark_ok = apca <= -MIN_APCA_CONTRAST + 0.1 and wcag >= MIN_WCAG_CONTRAST - 0.01
    return light_ok or dark_ok


class TestBackground:
    """Depth weighted blending along the ancestor chain."""

    def test_same_slot_chain_keeps_color(self, palette):
        registry = TagRegistry({"x": 1, "x/y": 1, "x/y/z": 1})
        coords = lch_coords(blend_background("x/y/z", registry, palette))
        assert coords == pytest.approx((87, 16, 0), abs=1e-3)

    def test_chain_blends_each_level(self, palette):
        registry = TagRegistry({"x": 1, "x/y": 2, "x/y/z": 3})
        coords = lch_coords(blend_background("x/y/z", registry, palette))
        # 0 -> 90 at 40% gives 36, then 36 -> 180 at 40% gives 93.6
        assert coords == pytest.approx((87, 16, 93.6), abs=1e-3)

    def test_matches_nested_mix(self, palette):
        registry = TagRegistry({"x": 2, "x/y": 4, "x/y/z": 3})
        expected = mix_lch(mix_lch(palette[1], palette[3], 0.4), palette[2], 0.4)
        actual = blend_background("x/y/z", registry, palette)
        assert lch_coords(actual) == pytest.approx(lch_coords(expected), abs=1e-3)

    def test_string_form_parses_back(self, palette):
        registry = TagRegistry({"x": 1, "x/y": 2, "x/y/z": 3})
        background = resolve_background("x/y/z", registry, palette)
        assert isinstance(background, str)
        assert lch_coords(Color(background)) == pytest.approx((87, 16, 93.6), abs=1e-3)

    def test_slots_wrap_around_palette(self, palette):
        assert palette_color(palette, 5) is palette[0]
        assert palette_color(palette, 4) is palette[3]

    def test_unregistered_tag_uses_first_color(self, palette):
        coords = lch_coords(blend_background("never/seen", TagRegistry(), palette))
        assert coords == pytest.approx((87, 16, 0), abs=1e-3)

    def test_root_tag_is_palette_color(self, palette):
        registry = TagRegistry({"a": 3})
        assert lch_coords(blend_background("a", registry, palette)) == pytest.approx(
            (87, 16, 180), abs=1e-3
        )


class TestForeground:
    """Readable text color search."""

    def test_light_background_gets_dark_text(self, palette):
        background = resolve_background("a", TagRegistry(), palette)
        foreground = find_foreground(background)
        assert foreground != FALLBACK_FOREGROUND
        assert lch_coords(Color(foreground))[0] < 87
        assert passes_thresholds(foreground, background)

    def test_dark_background_gets_light_text(self):
        dark = generate_color_palette(4, 16, 87, is_dark=True)
        background = resolve_background("a", TagRegistry(), dark)
        foreground = find_foreground(background)
        assert foreground != FALLBACK_FOREGROUND
        assert lch_coords(Color(foreground))[0] > 35
        assert passes_thresholds(foreground, background)

    def test_deterministic(self, palette):
        background = resolve_background("a", TagRegistry(), palette)
        assert find_foreground(background) == find_foreground(background)

    def test_fallback_when_no_candidate_passes(self):
        # Mid gray: white misses 4.5:1 and black misses APCA 60
        assert find_foreground("#777777") == FALLBACK_FOREGROUND

    def test_memoized(self, palette):
        resolver = ForegroundResolver()
        background = resolve_background("a", TagRegistry(), palette)
        first = resolver.resolve(background)
        second = resolver.resolve(background)
        assert first == second
        assert len(resolver) == 1


class TestTagColorResolver:
    """Per (tag, theme) caching."""

    def test_caches_until_cleared(self, palette):
        registry = TagRegistry({"a": 1})
        resolver = TagColorResolver(registry, {"light": palette, "dark": palette})
        first = resolver.resolve("a", "light")
        assert resolver.resolve("a", "light") is first
        resolver.clear()
        again = resolver.resolve("a", "light")
        assert again is not first
        assert again == first

    def test_shares_foreground_memo(self, palette):
        foregrounds = ForegroundResolver()
        resolver = TagColorResolver(TagRegistry(), {"light": palette}, foregrounds)
        resolver.resolve("a", "light")
        resolver.resolve("b", "light")
        # Both tags default to slot 1, so they share a background
        assert len(foregrounds) == 1
