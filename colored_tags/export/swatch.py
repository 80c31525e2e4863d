from PIL import Image, ImageDraw

from ..color import to_rgb


def create_palette_row(palette, chip_size=40, spacing=2):
    """Create a horizontal strip of palette chips.

    Args:
        palette: List of colors
        chip_size: Size of each square chip in pixels
        spacing: Gap between chips in pixels

    Returns:
        PIL Image of the row
    """
    if not palette:
        return Image.new("RGB", (1, chip_size), (0, 0, 0))

    width = len(palette) * chip_size + (len(palette) - 1) * spacing
    row = Image.new("RGB", (width, chip_size), (0, 0, 0))
    draw = ImageDraw.Draw(row)

    x = 0
    for color in palette:
        draw.rectangle([x, 0, x + chip_size - 1, chip_size - 1], fill=to_rgb(color))
        x += chip_size + spacing
    return row


def create_swatch(palettes, output_path, chip_size=40, spacing=2, padding=10):
    """Save a PNG with the light palette on top and the dark palette below."""
    rows = [
        create_palette_row(palettes["light"], chip_size, spacing),
        create_palette_row(palettes["dark"], chip_size, spacing),
    ]
    width = max(row.width for row in rows) + 2 * padding
    height = sum(row.height for row in rows) + padding * (len(rows) + 1)

    image = Image.new("RGB", (width, height), (128, 128, 128))
    y = padding
    for row in rows:
        image.paste(row, (padding, y))
        y += row.height + padding

    image.save(output_path, "PNG")
    return image
