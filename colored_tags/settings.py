import json
import logging
import os
from dataclasses import dataclass, field

from .palette.loader import filter_custom_colors

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 2

DEFAULT_CHROMA = 16
DEFAULT_LIGHTNESS = 87
DEFAULT_PALETTE_SIZE = 16
DEFAULT_SEED = 0

# Ranges offered by the settings UI
PALETTE_SIZE_CHOICES = (8, 16, 24, 32)
SEED_RANGE = (0, 10)

SATURATION_PRESETS = {
    "faded": 5,
    "default": DEFAULT_CHROMA,
    "moderate": 32,
    "vivid": 64,
    "excessive": 128,
}

LIGHTNESS_PRESETS = {
    "dark": 0,
    "medium-dark": 32,
    "medium": 64,
    "default": DEFAULT_LIGHTNESS,
    "light": 90,
    "bleach": 100,
}


@dataclass
class Settings:
    chroma: float = DEFAULT_CHROMA
    lightness: float = DEFAULT_LIGHTNESS
    palette: int = DEFAULT_PALETTE_SIZE
    seed: int = DEFAULT_SEED
    enable_custom_colors: bool = False
    custom_colors: list = field(default_factory=list)
    known_tags: dict = field(default_factory=dict)
    version: int = SCHEMA_VERSION

    def to_dict(self):
        """Serialize using the persisted (camelCase) field names."""
        return {
            "chroma": self.chroma,
            "lightness": self.lightness,
            "palette": self.palette,
            "seed": self.seed,
            "knownTags": dict(self.known_tags),
            "_version": self.version,
            "enableCustomColors": self.enable_custom_colors,
            "customColors": list(self.custom_colors),
        }


def _migrate_v1(data):
    # v2 introduced the configurable palette size
    data["palette"] = DEFAULT_PALETTE_SIZE
    return data


# version -> function upgrading a record from that version to the next one
MIGRATIONS = {
    1: _migrate_v1,
}


def migrate(data):
    """Run the migration chain on a raw persisted record.

    Records without a usable version are treated as current.

    Returns:
        tuple: (migrated dict, whether anything changed)
    """
    data = dict(data)
    version = _coerce(data, "_version", int, SCHEMA_VERSION)
    if version >= SCHEMA_VERSION:
        return data, False

    while version < SCHEMA_VERSION:
        step = MIGRATIONS.get(version)
        if step is not None:
            data = step(data)
            logger.info("Migrated settings from version %d", version)
        version += 1
    data["_version"] = SCHEMA_VERSION
    return data, True


def _coerce(data, key, convert, default):
    if key not in data or data[key] is None:
        return default
    try:
        return convert(data[key])
    except (TypeError, ValueError):
        logger.warning("Invalid value %r for %s, using %r", data[key], key, default)
        return default


def _flag(data, key, default):
    value = data.get(key, default)
    if not isinstance(value, bool):
        logger.warning("Invalid value %r for %s, using %r", value, key, default)
        return default
    return value


def load_settings(data):
    """Build Settings from a raw persisted record.

    Invalid custom colors are dropped and malformed numbers fall back to
    their defaults; nothing in a stored record can make loading fail.

    Args:
        data: Decoded JSON object, or None when nothing was stored

    Returns:
        tuple: (Settings, needs_save bool)
    """
    if not isinstance(data, dict):
        return Settings(), False

    data, needs_save = migrate(data)

    known_tags = data.get("knownTags")
    if not isinstance(known_tags, dict):
        known_tags = {}

    custom_colors = data.get("customColors")
    if not isinstance(custom_colors, list):
        custom_colors = []

    palette = _coerce(data, "palette", int, DEFAULT_PALETTE_SIZE)
    if palette < 1:
        logger.warning("Invalid palette size %r, using %d", palette, DEFAULT_PALETTE_SIZE)
        palette = DEFAULT_PALETTE_SIZE

    settings = Settings(
        chroma=_coerce(data, "chroma", float, DEFAULT_CHROMA),
        lightness=_coerce(data, "lightness", float, DEFAULT_LIGHTNESS),
        palette=palette,
        seed=_coerce(data, "seed", int, DEFAULT_SEED),
        enable_custom_colors=_flag(data, "enableCustomColors", False),
        custom_colors=filter_custom_colors(custom_colors),
        known_tags=known_tags,
        version=_coerce(data, "_version", int, SCHEMA_VERSION),
    )
    return settings, needs_save


class JsonStateStore:
    """Persists the settings record (registry included) as a JSON file."""

    def __init__(self, path):
        self.path = path

    def load(self):
        """Return the stored record, or None if there is nothing usable."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read state file %s: %s", self.path, e)
            return None

    def save(self, data):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
