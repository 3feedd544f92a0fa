"""Collaborator interfaces for the meta manager.

The manager only talks to these protocols; the adapters package ships
implementations for Starlette/FastAPI, Pillow and an in-memory page view.
"""
from typing import Any, Dict, Hashable, MutableMapping, Optional, Protocol, Tuple

from metamanager.models import LinkTagEntry, MetaTagEntry


class View(Protocol):
    """Page being rendered: holds the tag collections, title and params."""

    meta_tags: MutableMapping[Hashable, MetaTagEntry]
    link_tags: MutableMapping[Hashable, LinkTagEntry]
    title: Optional[str]
    params: Dict[str, Any]

    def register_meta_tag(self, options: Dict[str, Any], key: Optional[Hashable] = None) -> None:
        """Store a meta tag under ``key``, or append it when key is None."""

    def register_link_tag(self, options: Dict[str, Any], key: Optional[Hashable] = None) -> None:
        """Store a link tag under ``key``, or append it when key is None."""


class RequestContext(Protocol):
    @property
    def is_ajax(self) -> bool:
        """True for XMLHttpRequest calls."""

    @property
    def is_pjax(self) -> bool:
        """True for PJAX partial page loads."""


class UrlBuilder(Protocol):
    def to(self, url: str, scheme: bool = True) -> str:
        """Return the URL of ``url``, absolute when ``scheme`` is set."""


class AliasResolver(Protocol):
    def resolve(self, path: str) -> str:
        """Translate a logical path (e.g. "@webroot/img/a.png") to a filesystem path."""


class ImageInspector(Protocol):
    def size(self, path: str) -> Optional[Tuple[int, int]]:
        """Return (width, height) in pixels, or None when the file is not a readable image."""
