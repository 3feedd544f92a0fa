"""In-memory page view that collects tags and renders them as HTML."""
from typing import Any, Dict, Hashable, List, Optional

from markupsafe import Markup

from metamanager.constants import META_CONSTANTS
from metamanager.models import BreadcrumbItem, LinkTagEntry, MetaTagEntry


def _next_index(collection: Dict[Hashable, Any]) -> int:
    """Next free integer key, like appending to a list."""
    indexes = [key for key in collection if isinstance(key, int) and not isinstance(key, bool)]
    return max(indexes, default=-1) + 1


class PageView:
    """Collects the title, meta tags, link tags and params of one page render."""

    def __init__(self, title: Optional[str] = None):
        self.title = title
        self.meta_tags: Dict[Hashable, MetaTagEntry] = {}
        self.link_tags: Dict[Hashable, LinkTagEntry] = {}
        self.params: Dict[str, Any] = {}

    def register_meta_tag(self, options: Dict[str, Any], key: Optional[Hashable] = None) -> None:
        slot = _next_index(self.meta_tags) if key is None else key
        self.meta_tags[slot] = MetaTagEntry(key=key, attributes=dict(options))

    def register_link_tag(self, options: Dict[str, Any], key: Optional[Hashable] = None) -> None:
        slot = _next_index(self.link_tags) if key is None else key
        self.link_tags[slot] = LinkTagEntry(key=key, attributes=dict(options))

    @property
    def breadcrumbs(self) -> List[BreadcrumbItem]:
        return self.params.get(META_CONSTANTS.BREADCRUMBS_PARAM, [])

    def render_meta_tags(self) -> Markup:
        return Markup("\n").join(self.meta_tags.values())

    def render_link_tags(self) -> Markup:
        return Markup("\n").join(self.link_tags.values())

    def render_head(self) -> Markup:
        """Render the <title>, meta and link tags for the <head> element."""
        parts = []
        if self.title:
            parts.append(Markup("<title>%s</title>") % self.title)
        if self.meta_tags:
            parts.append(self.render_meta_tags())
        if self.link_tags:
            parts.append(self.render_link_tags())
        return Markup("\n").join(parts)
