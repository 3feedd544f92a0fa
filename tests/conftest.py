"""
Pytest configuration and shared fixtures for meta manager tests.

This module provides test fixtures for:
- In-memory page views and configured managers
- Fake request contexts (AJAX / PJAX)
- Real image files generated with Pillow
"""
from typing import Optional, Tuple

import pytest
from PIL import Image

from metamanager.adapters.paths import BaseUrlBuilder, PathAliasResolver
from metamanager.adapters.view import PageView
from metamanager.config import MetaManagerConfig
from metamanager.manager import MetaManager


# ==============================================================================
# FAKE COLLABORATORS
# ==============================================================================

class FakeRequest:
    """Request context with fixed AJAX / PJAX flags."""

    def __init__(self, is_ajax: bool = False, is_pjax: bool = False):
        self.is_ajax = is_ajax
        self.is_pjax = is_pjax


class FixedImageInspector:
    """Image inspector returning a fixed size and recording the paths it saw."""

    def __init__(self, size: Optional[Tuple[int, int]] = (1200, 630)):
        self._size = size
        self.paths = []

    def size(self, path: str) -> Optional[Tuple[int, int]]:
        self.paths.append(path)
        return self._size


@pytest.fixture
def fake_request():
    """Factory for request contexts: fake_request(is_ajax=True)."""
    return FakeRequest


@pytest.fixture
def image_inspector() -> FixedImageInspector:
    """Inspector reporting 1200x630 for every file."""
    return FixedImageInspector()


# ==============================================================================
# MANAGER FIXTURES
# ==============================================================================

@pytest.fixture
def view() -> PageView:
    """Create an empty page view."""
    return PageView()


@pytest.fixture
def url_builder() -> BaseUrlBuilder:
    """URL builder for https://example.com with the webroot served under /static."""
    return BaseUrlBuilder("https://example.com", {"@webroot": "/static"})


@pytest.fixture
def make_manager(view, url_builder):
    """Factory creating managers bound to the shared view.

    Keyword arguments override the defaults (config, request, collaborators).
    """

    def factory(**kwargs) -> MetaManager:
        kwargs.setdefault("config", MetaManagerConfig())
        kwargs.setdefault("url_builder", url_builder)
        kwargs.setdefault("alias_resolver", PathAliasResolver({}))
        return MetaManager(kwargs.pop("view", view), **kwargs)

    return factory


@pytest.fixture
def manager(make_manager) -> MetaManager:
    """Manager with every tag family enabled and no request."""
    return make_manager()


@pytest.fixture
def content(view):
    """Return the content attribute of a registered meta tag."""

    def lookup(key):
        return view.meta_tags[key].attributes["content"]

    return lookup


# ==============================================================================
# IMAGE FIXTURES
# ==============================================================================

@pytest.fixture
def webroot(tmp_path):
    """Temporary webroot containing a 120x80 PNG and a broken image file."""
    Image.new("RGB", (120, 80), color=(200, 40, 40)).save(tmp_path / "hero.png")
    (tmp_path / "broken.jpg").write_bytes(b"this is not an image")
    (tmp_path / "images").mkdir()
    return tmp_path
