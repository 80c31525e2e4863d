"""
Drives a TagColorEngine on behalf of a host application.

The host is any object providing:

    discover_tags()      -> iterable of raw tag strings
    inject_style(css)    -> make a block of CSS rules effective
    remove_style()       -> drop every block injected so far

The host decides when to call on_content_changed() and
on_active_view_changed(); debouncing those triggers is up to the host.
"""

import logging

from .engine import TagColorEngine
from .export.css_export import build_stylesheet
from .tags import normalize_tags

logger = logging.getLogger(__name__)


class TagColorSession:
    def __init__(self, host, engine=None, store=None, color_format="lch"):
        self.host = host
        if engine is None:
            engine = TagColorEngine.from_store(store) if store is not None else TagColorEngine()
        self.engine = engine
        self.color_format = color_format
        self.rendered = set()

    def start(self):
        """Register every tag the host knows about and render them all."""
        self.register_tags()
        self.reload()

    def register_tags(self):
        return self.engine.ensure_tags_known(self.host.discover_tags())

    def update(self):
        """Inject rules for registered tags that have not been rendered yet.

        Returns:
            list of newly rendered tags
        """
        pending = [tag for tag in self.engine.known_tags() if tag not in self.rendered]
        if not pending:
            return []
        self.host.inject_style(
            build_stylesheet(self.engine, pending, color_format=self.color_format)
        )
        self.rendered.update(pending)
        logger.debug("Rendered %d tags", len(pending))
        return pending

    def reload(self):
        """Drop all injected rules, regenerate the palettes and render again."""
        self.unload()
        self.engine.configure(self.engine.settings)
        return self.update()

    def unload(self):
        self.rendered.clear()
        self.host.remove_style()

    def save_settings(self, settings):
        """Adopt new settings, persist them and re-render every tag."""
        self.unload()
        self.engine.configure(settings)
        self.engine.persist()
        return self.update()

    def refresh(self):
        self.register_tags()
        return self.update()

    def on_content_changed(self):
        return self.refresh()

    def on_active_view_changed(self):
        return self.refresh()


class StaticHost:
    """Host backed by a fixed tag list that collects injected CSS in memory."""

    def __init__(self, tags=()):
        self.tags = list(tags)
        self.styles = []

    def discover_tags(self):
        return normalize_tags(self.tags)

    def inject_style(self, css_text):
        self.styles.append(css_text)

    def remove_style(self):
        self.styles = []

    @property
    def stylesheet(self):
        return "\n".join(self.styles)
