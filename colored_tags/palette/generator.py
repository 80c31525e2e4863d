import math

from ..color import lch_color

# Dark backgrounds need more vivid but darker chips
DARK_CHROMA_SCALE = 1.8
DARK_LIGHTNESS_DIVISOR = 2.5


def round_half_up(value):
    """Round .5 away from zero for positive values, matching Math.round."""
    return int(math.floor(value + 0.5))


def palette_base(base_chroma, base_lightness, is_dark):
    """Return (chroma, lightness) used for every color of a palette variant."""
    if is_dark:
        return (
            round_half_up(base_chroma * DARK_CHROMA_SCALE),
            round_half_up(base_lightness / DARK_LIGHTNESS_DIVISOR),
        )
    return base_chroma, base_lightness


def palette_hues(size, hue_offset=0):
    """Evenly spaced hues around the circle, rotated by hue_offset."""
    step = 360 / size
    return [(i * step + hue_offset) % 360 for i in range(size)]


def interleave(colors):
    """
    Reorder colors so that neighbours in hue order end up far apart.

    The cursor jumps roughly a third of the remaining pool each time, so
    consecutive slots rarely land on adjacent hues.
    """
    pool = list(colors)
    result = []
    cursor = 0
    while pool:
        result.append(pool.pop(cursor))
        if not pool:
            break
        cursor = round_half_up(cursor + len(pool) / 3) % len(pool)
    return result


def shift(colors, seed):
    """Move the last `seed` colors to the front."""
    if seed <= 0 or seed >= len(colors):
        return list(colors)
    return colors[-seed:] + colors[:-seed]


def generate_color_palette(
    size,
    base_chroma,
    base_lightness,
    is_dark=False,
    hue_offset=0,
    shuffle=False,
    seed=0,
):
    """Generate an LCh palette evenly spaced around the hue circle.

    Args:
        size: Number of colors, at least 1
        base_chroma: Chroma for the light variant
        base_lightness: Lightness (0-100) for the light variant
        is_dark: Generate the dark theme variant
        hue_offset: Rotation applied to every hue, in degrees
        shuffle: Interleave colors instead of returning them in hue order
        seed: Palette shift applied after interleaving

    Returns:
        list of coloraide Color objects in lch
    """
    chroma, lightness = palette_base(base_chroma, base_lightness, is_dark)
    colors = [lch_color(lightness, chroma, hue) for hue in palette_hues(size, hue_offset)]

    if not shuffle:
        return colors

    return shift(interleave(colors), seed)
