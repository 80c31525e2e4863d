import logging

import numpy as np

from ..color import weber_contrast
from .generator import generate_color_palette

logger = logging.getLogger(__name__)

OFFSET_RANGE = 180


def score_palette(palette):
    """Sum of Weber contrast between each consecutive pair of colors."""
    return sum(
        weber_contrast(current, previous)
        for previous, current in zip(palette, palette[1:])
    )


def score_offsets(size, base_chroma, base_lightness, is_dark=False):
    """Score every candidate offset in [0, OFFSET_RANGE).

    Returns:
        numpy array of scores indexed by offset
    """
    scores = np.zeros(OFFSET_RANGE)
    for offset in range(OFFSET_RANGE):
        palette = generate_color_palette(
            size,
            base_chroma,
            base_lightness,
            is_dark=is_dark,
            hue_offset=offset,
            shuffle=False,
            seed=0,
        )
        scores[offset] = score_palette(palette)
    return scores


def find_palette_offset(size, base_chroma, base_lightness, is_dark=False):
    """
    Find the hue rotation that maximizes contrast between neighbouring colors.

    Ties go to the highest offset among the equally scored ones.
    """
    scores = score_offsets(size, base_chroma, base_lightness, is_dark=is_dark)

    # argmax returns the first maximum; scan reversed for the last one
    offset = OFFSET_RANGE - 1 - int(np.argmax(scores[::-1]))

    logger.debug(
        "Palette offset %d (score %.4f) for size=%s chroma=%s lightness=%s",
        offset,
        scores[offset],
        size,
        base_chroma,
        base_lightness,
    )
    return offset
