"""
Tag color engine.

Owns the tag registry and the light/dark palettes, and maps tag paths to
readable background/foreground pairs for either theme.
"""

import dataclasses
import logging

from .palette import find_palette_offset, generate_color_palette, load_custom_palette
from .settings import Settings, load_settings
from .tags import ForegroundResolver, TagColorResolver, TagRegistry, normalize_tag

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)


def generate_palettes(settings):
    """Build the light and dark palettes for a configuration.

    Returns:
        tuple: (dict theme -> list of Color, hue offset or None for custom colors)
    """
    if settings.enable_custom_colors:
        custom = load_custom_palette(settings.custom_colors)
        if custom:
            return {LIGHT: custom, DARK: list(custom)}, None
        logger.warning("Custom colors enabled but none are valid, generating palette")

    offset = find_palette_offset(
        settings.palette, settings.chroma, settings.lightness, is_dark=False
    )
    palettes = {}
    for theme in THEMES:
        palettes[theme] = generate_color_palette(
            settings.palette,
            settings.chroma,
            settings.lightness,
            is_dark=theme == DARK,
            hue_offset=offset,
            shuffle=True,
            seed=settings.seed,
        )
    return palettes, offset


class TagColorEngine:
    """Computes tag colors. One instance per settings record.

    Args:
        settings: Settings, defaults when omitted
        store: Optional object with save(dict), used to persist registry growth
    """

    def __init__(self, settings=None, store=None):
        self.settings = settings if settings is not None else Settings()
        self.store = store
        self.registry = TagRegistry(self.settings.known_tags)
        self.foregrounds = ForegroundResolver()
        self.palettes = {LIGHT: [], DARK: []}
        self.hue_offset = None
        self._resolver = TagColorResolver(self.registry, self.palettes, self.foregrounds)
        self.configure(self.settings)

    @classmethod
    def from_store(cls, store):
        """Load settings from a store, migrating and re-saving them if needed."""
        settings, needs_save = load_settings(store.load())
        engine = cls(settings, store=store)
        if needs_save:
            engine.persist()
        return engine

    def configure(self, settings):
        """Apply new settings and regenerate both palettes.

        The registry is kept: tags keep their slots across configurations.
        The engine works on a copy; the caller's settings are not modified.
        """
        self.settings = dataclasses.replace(settings, known_tags=self.registry.as_dict())
        palettes, self.hue_offset = generate_palettes(self.settings)
        self.palettes.clear()
        self.palettes.update(palettes)
        self._resolver.clear()
        logger.info(
            "Generated %d color palettes (offset %s)",
            len(self.palettes[LIGHT]),
            self.hue_offset,
        )

    def ensure_tags_known(self, tag_paths):
        """Register tags and their ancestors. Returns True when the registry grew."""
        changed = self.registry.ensure(tag_paths)
        if changed:
            self.settings.known_tags = self.registry.as_dict()
            self._resolver.clear()
            self.persist()
        return changed

    def get_colors_for(self, tag, theme=LIGHT):
        """Return TagColors(background, foreground) for a tag in a theme."""
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}, expected one of {THEMES}")
        return self._resolver.resolve(normalize_tag(tag) or tag, theme)

    def known_tags(self):
        return sorted(self.registry)

    def persist(self):
        """Hand the current settings to the store. Failures are only logged."""
        if self.store is None:
            return
        try:
            self.store.save(self.settings.to_dict())
        except OSError as e:
            logger.error("Could not save settings: %s", e)
