from .generator import generate_color_palette
from .loader import filter_custom_colors, load_custom_palette, parse_custom_colors
from .offset import find_palette_offset, score_palette

__all__ = [
    "generate_color_palette",
    "find_palette_offset",
    "score_palette",
    "filter_custom_colors",
    "parse_custom_colors",
    "load_custom_palette",
]
