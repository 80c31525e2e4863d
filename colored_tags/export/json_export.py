import json

from ..color import lch_coords, to_css, to_hex


def palette_data(palette):
    """Describe each palette color by its CSS form, hex form and LCh coordinates."""
    data = []
    for color in palette:
        lightness, chroma, hue = lch_coords(color)
        data.append(
            {
                "css": to_css(color),
                "hex": to_hex(color),
                "lch": [round(lightness, 3), round(chroma, 3), round(hue, 3)],
            }
        )
    return data


def export_json(engine, filepath, tags=None):
    """Export palettes and resolved tag colors as JSON.

    Args:
        engine: The TagColorEngine
        filepath: Output file path
        tags: Tags to include, every known tag when None
    """
    if tags is None:
        tags = engine.known_tags()

    data = {
        "light": palette_data(engine.palettes["light"]),
        "dark": palette_data(engine.palettes["dark"]),
        "tags": {},
    }

    for tag in tags:
        entry = {"slot": engine.registry.slot(tag)}
        for theme in ("light", "dark"):
            colors = engine.get_colors_for(tag, theme)
            entry[theme] = {
                "background": colors.background,
                "foreground": colors.foreground,
            }
        data["tags"][tag] = entry

    data["_hue_offset"] = engine.hue_offset
    data["_custom_colors"] = engine.hue_offset is None

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
