import logging

from ..color import is_valid_hex_color, to_color

logger = logging.getLogger(__name__)


def filter_custom_colors(values):
    """Drop every entry that is not a strict hex color.

    Args:
        values: Iterable of candidate color strings (may be None)

    Returns:
        list of the valid hex strings, in their original order
    """
    if not values:
        return []

    valid = []
    for value in values:
        if is_valid_hex_color(value):
            valid.append(value)
        else:
            logger.warning("Ignoring invalid custom color %r", value)
    return valid


def parse_custom_colors(text):
    """Parse the comma separated form, e.g. "#FF5733, #33D2FF"."""
    if not text:
        return []
    entries = [entry.strip() for entry in text.split(",")]
    return filter_custom_colors(entry for entry in entries if entry)


def load_custom_palette(values):
    """Convert validated hex strings into Color objects for use as a palette."""
    return [to_color(value) for value in filter_custom_colors(values)]
