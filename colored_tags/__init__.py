from .engine import DARK, LIGHT, TagColorEngine
from .session import StaticHost, TagColorSession
from .settings import JsonStateStore, Settings, load_settings
from .tags import TagColors

__version__ = "0.1.0"

__all__ = [
    "TagColorEngine",
    "TagColorSession",
    "StaticHost",
    "Settings",
    "JsonStateStore",
    "TagColors",
    "load_settings",
    "LIGHT",
    "DARK",
]
