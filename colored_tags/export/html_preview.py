import html as html_lib

from ..color import relative_luminance, to_hex

TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Tag Color Preview</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            padding: 40px;
            min-height: 100vh;
        }
        .theme {
            padding: 30px;
            border-radius: 12px;
            margin-bottom: 30px;
        }
        .theme-light { background: #ffffff; color: #222222; }
        .theme-dark { background: #1e1e1e; color: #dddddd; }
        h1 { margin-bottom: 10px; font-weight: 400; }
        h2 {
            margin: 0 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
        }
        .palette {
            display: flex;
            align-items: stretch;
            margin-bottom: 20px;
        }
        .palette-color {
            flex: 1;
            height: 40px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 10px;
        }
        .tags {
            display: flex;
            flex-wrap: wrap;
            gap: 10px;
        }
        .tag {
            padding: 2px 10px;
            border-radius: 12px;
            font-size: 13px;
        }
        .meta { opacity: 0.7; font-size: 12px; margin-bottom: 30px; }
    </style>
</head>
<body>
    <h1>Tag Colors</h1>
    <div class="meta">{meta}</div>

    <div class="theme theme-light">
        <h2>Light Palette</h2>
        <div class="palette">
            {light_palette}
        </div>
        <div class="tags">
            {light_tags}
        </div>
    </div>

    <div class="theme theme-dark">
        <h2>Dark Palette</h2>
        <div class="palette">
            {dark_palette}
        </div>
        <div class="tags">
            {dark_tags}
        </div>
    </div>
</body>
</html>"""


def make_palette_color(index, color):
    text_color = "#ffffff" if relative_luminance(color) < 0.5 else "#000000"
    return (
        f'<div class="palette-color" style="background: {to_hex(color)}; '
        f'color: {text_color}">{index + 1}</div>'
    )


def make_tag_chip(tag, colors):
    return (
        f'<span class="tag" style="background-color: {colors.background}; '
        f'color: {colors.foreground}">#{html_lib.escape(tag)}</span>'
    )


def create_html_preview(engine, output_path, tags=None):
    """Create an HTML page showing both palettes and the colored tags"""
    if tags is None:
        tags = engine.known_tags()

    if engine.hue_offset is None:
        meta = f"{len(engine.palettes['light'])} custom colors"
    else:
        meta = (
            f"{len(engine.palettes['light'])} colors, hue offset {engine.hue_offset}, "
            f"shift {engine.settings.seed}"
        )

    replacements = {"{meta}": meta}
    for theme in ("light", "dark"):
        replacements[f"{{{theme}_palette}}"] = "\n".join(
            make_palette_color(i, color) for i, color in enumerate(engine.palettes[theme])
        )
        replacements[f"{{{theme}_tags}}"] = "\n".join(
            make_tag_chip(tag, engine.get_colors_for(tag, theme)) for tag in tags
        )

    html = TEMPLATE
    for old, new in replacements.items():
        html = html.replace(old, new)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
