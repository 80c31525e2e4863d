from .normalize import normalize_tag, normalize_tags, tag_prefixes
from .registry import TagRegistry, ensure_known_tags
from .resolver import (
    ForegroundResolver,
    TagColorResolver,
    TagColors,
    find_foreground,
    resolve_background,
)

__all__ = [
    "normalize_tag",
    "normalize_tags",
    "tag_prefixes",
    "TagRegistry",
    "ensure_known_tags",
    "ForegroundResolver",
    "TagColorResolver",
    "TagColors",
    "find_foreground",
    "resolve_background",
]
