from .css_export import build_stylesheet, build_tag_css
from .html_preview import create_html_preview
from .json_export import export_json
from .report import generate_contrast_report
from .swatch import create_swatch

__all__ = [
    "build_stylesheet",
    "build_tag_css",
    "create_html_preview",
    "export_json",
    "generate_contrast_report",
    "create_swatch",
]
