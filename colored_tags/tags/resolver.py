import logging
from collections import namedtuple

from ..color import apca_contrast, lch_color, mix_lch, to_css, to_lch, wcag_contrast
from .normalize import tag_prefixes

logger = logging.getLogger(__name__)

TagColors = namedtuple("TagColors", ["background", "foreground"])

# Each deeper level pulls the accumulated color this far toward its own
DEPTH_MIX_WEIGHT = 0.4

# Contrast requirements for tag text
MIN_WCAG_CONTRAST = 4.5
MIN_APCA_CONTRAST = 60

LIGHT_CANDIDATE_CHROMA_BOOST = 3
DARK_CANDIDATE_CHROMA_BOOST = 20
MAX_FOREGROUND_ITERATIONS = 100

FALLBACK_FOREGROUND = "#ffffff"


def palette_color(palette, slot):
    """Palette entry for a 1-based slot, wrapping around the palette."""
    return palette[(slot - 1) % len(palette)]


def blend_background(tag, registry, palette):
    """
    Blend the palette colors of a tag and each of its ancestors.

    Returns:
        coloraide Color in lch
    """
    combined = None
    for prefix in tag_prefixes(tag):
        color = palette_color(palette, registry.slot(prefix))
        if combined is None:
            combined = to_lch(color)
        else:
            combined = mix_lch(combined, color, DEPTH_MIX_WEIGHT)
    return combined


def resolve_background(tag, registry, palette):
    """Background color of a tag as a CSS color string."""
    return to_css(blend_background(tag, registry, palette))


def _adjusted(base, lightness_delta, chroma_boost):
    lightness, chroma, hue = base.coords(nans=False)
    candidate = lch_color(lightness + lightness_delta, chroma + chroma_boost, hue)
    # Measure what will actually be displayed
    return candidate.fit("srgb")


def find_foreground(background):
    """Search for a readable foreground for the given background.

    Two candidates start from the background itself: one gets lighter, one
    gets darker, one lightness unit per iteration. The first candidate that
    passes both the APCA and the WCAG 2.1 threshold wins.

    Args:
        background: CSS color string or Color

    Returns:
        CSS color string, FALLBACK_FOREGROUND when nothing passes
    """
    base = to_lch(background)

    for step in range(MAX_FOREGROUND_ITERATIONS):
        lighter = _adjusted(base, step, LIGHT_CANDIDATE_CHROMA_BOOST)
        if (
            apca_contrast(lighter, base) >= MIN_APCA_CONTRAST
            and wcag_contrast(lighter, base) >= MIN_WCAG_CONTRAST
        ):
            return to_css(lighter)

        darker = _adjusted(base, -step, DARK_CANDIDATE_CHROMA_BOOST)
        if (
            apca_contrast(darker, base) <= -MIN_APCA_CONTRAST
            and wcag_contrast(darker, base) >= MIN_WCAG_CONTRAST
        ):
            return to_css(darker)

    logger.debug("No readable foreground found for %s, using fallback", background)
    return FALLBACK_FOREGROUND


class ForegroundResolver:
    """Memoized find_foreground. Entries never go stale."""

    def __init__(self):
        self._memo = {}

    def __len__(self):
        return len(self._memo)

    def resolve(self, background):
        key = background if isinstance(background, str) else to_css(background)
        if key not in self._memo:
            self._memo[key] = find_foreground(background)
        return self._memo[key]


class TagColorResolver:
    """Resolves tag colors against a registry and a set of theme palettes.

    Results are cached per (tag, theme) until clear() is called.
    """

    def __init__(self, registry, palettes, foregrounds=None):
        self.registry = registry
        self.palettes = palettes
        self.foregrounds = foregrounds if foregrounds is not None else ForegroundResolver()
        self._cache = {}

    def clear(self):
        self._cache.clear()

    def resolve(self, tag, theme):
        key = (tag, theme)
        if key not in self._cache:
            background = resolve_background(tag, self.registry, self.palettes[theme])
            self._cache[key] = TagColors(
                background=background,
                foreground=self.foregrounds.resolve(background),
            )
        return self._cache[key]
