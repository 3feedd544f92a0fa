"""Data models for meta manager."""
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional, Sequence, Union

from markupsafe import Markup, escape


def _render_attributes(attributes: Dict[str, Any]) -> str:
    """Render HTML attributes, skipping None values."""
    return "".join(
        f' {escape(name)}="{escape(value)}"'
        for name, value in attributes.items()
        if value is not None
    )


@dataclass
class MetaTagEntry:
    """Represents a single <meta> element registered for the current page.

    Attributes:
        key: Unique identifier used for replacement, or None for key-less entries
        attributes: HTML attributes of the element (name, property, content...)
    """
    key: Optional[Hashable]
    attributes: Dict[str, Any] = field(default_factory=dict)

    tag_name = "meta"

    def __html__(self) -> str:
        return Markup(f"<{self.tag_name}{_render_attributes(self.attributes)}>")

    def to_dict(self) -> dict:
        """Convert entry to dictionary."""
        return {"key": self.key, "attributes": dict(self.attributes)}


@dataclass
class LinkTagEntry(MetaTagEntry):
    """Represents a single <link> element registered for the current page."""

    tag_name = "link"


@dataclass
class Breadcrumb:
    """A linked breadcrumb item."""
    label: str
    url: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {"label": self.label}
        if self.url is not None:
            result["url"] = self.url
        return result


@dataclass(frozen=True)
class MetaDescriptor:
    """Meta values a model supplies up front instead of being probed.

    Any field left as None is skipped during registration.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[Union[str, Sequence[str]]] = None
    image_url: Optional[str] = None
    image_alt: Optional[str] = None

    def is_empty(self) -> bool:
        """Check whether the descriptor carries any value."""
        return not any((self.title, self.description, self.keywords, self.image_url))


BreadcrumbItem = Union[str, Breadcrumb, Dict[str, Any]]
