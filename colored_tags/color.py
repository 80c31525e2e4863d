import re

from coloraide import Color

# Working space for palettes and blending (CIE LCh, D50)
LCH = "lch"

HEX_COLOR_RE = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

# APCA 0.0.98G constants
APCA_NORM_BG = 0.56
APCA_NORM_TXT = 0.57
APCA_REV_TXT = 0.62
APCA_REV_BG = 0.65
APCA_BLACK_THRESHOLD = 0.022
APCA_BLACK_CLAMP = 1.414
APCA_LO_CLIP = 0.1
APCA_DELTA_Y_MIN = 0.0005
APCA_SCALE_BOW = 1.14
APCA_SCALE_WOB = 1.14
APCA_LO_BOW_OFFSET = 0.027
APCA_LO_WOB_OFFSET = 0.027

# Weber contrast is unbounded when the darker color is pure black
WEBER_MAX = 50000


def is_valid_hex_color(value):
    """Check for a strict #rgb or #rrggbb string."""
    return isinstance(value, str) and HEX_COLOR_RE.match(value) is not None


def to_color(value):
    """Accept a CSS color string or a Color and return a Color."""
    if isinstance(value, Color):
        return value
    return Color(value)


def to_lch(value):
    """Convert any color into the LCh working space."""
    return to_color(value).convert(LCH)


def lch_color(lightness, chroma, hue):
    return Color(LCH, [lightness, chroma, hue])


def lch_coords(value):
    """Return (lightness, chroma, hue) with undefined hue reported as 0."""
    lightness, chroma, hue = to_lch(value).coords(nans=False)
    return lightness, chroma, hue % 360


def mix_lch(color1, color2, weight):
    """Blend two colors in LCh. weight=0 returns color1, weight=1 returns color2."""
    return to_lch(color1).mix(to_color(color2), weight, space=LCH)


def to_css(value):
    """Serialize a color the way it is written into stylesheets.

    Coordinates are written at full precision so the string parses back
    to the same color.
    """
    return to_color(value).to_string(precision=-1)


def to_hex(value):
    """Gamut map a color into sRGB and return #rrggbb."""
    return to_color(value).convert("srgb").to_string(hex=True, fit=True)


def to_rgb(value):
    """Gamut map a color into sRGB and return 0-255 channels."""
    srgb = to_color(value).convert("srgb").fit()
    return tuple(int(round(channel * 255)) for channel in srgb.coords(nans=False))


def relative_luminance(value):
    """CIE Y of the color (xyz-d65), clamped at 0 as WCAG 2.1 expects."""
    return max(to_color(value).luminance(), 0.0)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_contrast(color1, color2):
    return contrast_ratio(relative_luminance(color1), relative_luminance(color2))


def weber_contrast(color1, color2):
    """Weber contrast (Ymax - Ymin) / Ymin between two colors."""
    lighter = relative_luminance(color1)
    darker = relative_luminance(color2)
    if darker > lighter:
        lighter, darker = darker, lighter
    if darker == 0:
        return WEBER_MAX
    return (lighter - darker) / darker


def _linearize(channel):
    sign = -1 if channel < 0 else 1
    return sign * abs(channel) ** 2.4


def _apca_luminance(value):
    r, g, b = to_color(value).convert("srgb").coords(nans=False)
    y = _linearize(r) * 0.2126729 + _linearize(g) * 0.7151522 + _linearize(b) * 0.0721750
    # Out of gamut colors can go negative
    return max(y, 0.0)


def _soft_clamp_black(y):
    if y >= APCA_BLACK_THRESHOLD:
        return y
    return y + (APCA_BLACK_THRESHOLD - y) ** APCA_BLACK_CLAMP


def apca_contrast(background, text):
    """
    APCA lightness contrast of text over background.

    Positive values mean dark text on a lighter background, negative values
    light text on a darker background. |Lc| >= 60 is the usual body text floor.
    """
    y_text = _soft_clamp_black(_apca_luminance(text))
    y_bg = _soft_clamp_black(_apca_luminance(background))

    if abs(y_bg - y_text) < APCA_DELTA_Y_MIN:
        return 0.0

    if y_bg > y_text:
        contrast = (y_bg**APCA_NORM_BG - y_text**APCA_NORM_TXT) * APCA_SCALE_BOW
    else:
        contrast = (y_bg**APCA_REV_BG - y_text**APCA_REV_TXT) * APCA_SCALE_WOB

    if abs(contrast) < APCA_LO_CLIP:
        return 0.0
    if contrast > 0:
        return (contrast - APCA_LO_BOW_OFFSET) * 100
    return (contrast + APCA_LO_WOB_OFFSET) * 100
