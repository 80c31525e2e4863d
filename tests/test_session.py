"""
Tests for the host session: rendered tag tracking and lifecycle.
"""

import pytest

from colored_tags import Settings, StaticHost, TagColorEngine, TagColorSession


class FakeStore:
    def __init__(self, data=None):
        self.data = data
        self.saved = []

    def load(self):
        return self.data

    def save(self, data):
        self.saved.append(data)


@pytest.fixture
def host():
    return StaticHost(["#project/frontend", "personal", "archive/"])


class TestSession:
    """start/update/reload behaviour."""

    def test_start_renders_all_known_tags(self, host):
        session = TagColorSession(host, engine=TagColorEngine())
        session.start()
        assert session.rendered == {"project", "project/frontend", "personal"}
        assert "project\\/frontend" in host.stylesheet
        assert "archive" not in host.stylesheet

    def test_update_only_renders_new_tags(self, host):
        session = TagColorSession(host, engine=TagColorEngine())
        session.start()
        assert session.update() == []

        host.tags.append("project/backend")
        assert session.on_content_changed() == ["project/backend"]
        assert len(host.styles) == 2

    def test_active_view_trigger_is_idempotent(self, host):
        session = TagColorSession(host, engine=TagColorEngine())
        session.start()
        assert session.on_active_view_changed() == []
        assert session.on_active_view_changed() == []

    def test_reload_rerenders(self, host):
        session = TagColorSession(host, engine=TagColorEngine())
        session.start()
        rendered = session.reload()
        assert sorted(rendered) == ["personal", "project", "project/frontend"]
        assert len(host.styles) == 1

    def test_unload(self, host):
        session = TagColorSession(host, engine=TagColorEngine())
        session.start()
        session.unload()
        assert session.rendered == set()
        assert host.stylesheet == ""

    def test_save_settings_persists_and_rerenders(self, host):
        store = FakeStore()
        session = TagColorSession(host, store=store)
        session.start()
        saves = len(store.saved)

        session.save_settings(Settings(palette=8))
        assert len(store.saved) == saves + 1
        assert store.saved[-1]["palette"] == 8
        assert store.saved[-1]["knownTags"]["project/frontend"] == 1
        assert len(session.engine.palettes["light"]) == 8
        assert len(host.styles) == 1
