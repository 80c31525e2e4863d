import re

from ..color import to_hex

LIGHT_THEME_PREFIX = "body "
DARK_THEME_PREFIX = "body.theme-dark "

COLOR_FORMATS = ("lch", "hex")


def escape_tag(tag):
    """Escape the hierarchy delimiter for use inside a CSS selector."""
    return tag.replace("/", "\\/")


def flatten_tag(tag):
    """Class name form used by the editor: only [0-9a-z-], lowercased."""
    return re.sub(r"[^0-9a-z-]", "", tag, flags=re.IGNORECASE).lower()


def tag_selectors(tag):
    """Selectors matching every rendering of a tag, without theme prefix."""
    escaped = escape_tag(tag)
    selectors = [
        f'a.tag[href="#{escaped}"]',
        f".cm-s-obsidian .cm-line span.cm-hashtag.colored-tag-{escaped}",
    ]
    flat = flatten_tag(tag)
    if flat:
        selectors.append(f".cm-s-obsidian .cm-line span.cm-tag-{flat}.cm-hashtag")
    return selectors


def format_color(value, color_format="lch"):
    if color_format == "hex":
        return to_hex(value)
    return value


def build_tag_css(tag, light_colors, dark_colors, color_format="lch"):
    """CSS rules for one tag in both themes.

    Args:
        tag: Normalized tag path
        light_colors: TagColors for the light theme
        dark_colors: TagColors for the dark theme
        color_format: "lch" keeps the computed strings, "hex" gamut maps to sRGB

    Returns:
        CSS text
    """
    selectors = tag_selectors(tag)
    blocks = []
    for prefix, colors in (
        (LIGHT_THEME_PREFIX, light_colors),
        (DARK_THEME_PREFIX, dark_colors),
    ):
        themed = ", ".join(prefix + selector for selector in selectors)
        blocks.append(
            f"{themed} {{\n"
            f"  background-color: {format_color(colors.background, color_format)};\n"
            f"  color: {format_color(colors.foreground, color_format)};\n"
            "}"
        )
    return "\n".join(blocks)


def build_stylesheet(engine, tags, color_format="lch"):
    """Concatenate the rules of several tags into one stylesheet."""
    if color_format not in COLOR_FORMATS:
        raise ValueError(f"Unknown color format {color_format!r}")
    rules = []
    for tag in tags:
        rules.append(
            build_tag_css(
                tag,
                engine.get_colors_for(tag, "light"),
                engine.get_colors_for(tag, "dark"),
                color_format=color_format,
            )
        )
    return "\n".join(rules) + ("\n" if rules else "")
