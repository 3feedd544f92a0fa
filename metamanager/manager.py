"""Meta manager: registers SEO meta tags and link tags on the page being rendered."""
import logging
import re
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, Mapping, MutableMapping, Optional, Sequence, Tuple, Union

from metamanager.adapters.images import PillowImageInspector
from metamanager.adapters.paths import BaseUrlBuilder, PathAliasResolver
from metamanager.attributes import Extractor, MetaAttributes
from metamanager.config import MetaManagerConfig
from metamanager.constants import META_CONSTANTS
from metamanager.conventions import describe
from metamanager.errors import UnknownTagError
from metamanager.models import BreadcrumbItem
from metamanager.ports import AliasResolver, ImageInspector, RequestContext, UrlBuilder, View
from metamanager.text import truncate_description

logger = logging.getLogger(__name__)

TagOptions = Dict[str, Any]
TagSource = Union[Mapping[Hashable, TagOptions], Sequence[TagOptions]]

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def handler_name(tag: str) -> str:
    """Name of the register_* method for a logical tag name.

    "title" -> "register_title", "imageUrl" -> "register_image_url".
    """
    return META_CONSTANTS.HANDLER_PREFIX + _CAMEL_BOUNDARY_RE.sub("_", tag).lower()


def _is_numeric(key: Hashable) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and key.isdigit()


def _iter_tags(tags: TagSource) -> Iterable[Tuple[Optional[Hashable], TagOptions]]:
    """Yield (key, options) pairs; numeric keys and list items are key-less."""
    items = tags.items() if isinstance(tags, Mapping) else enumerate(tags)
    for key, options in items:
        yield (None if _is_numeric(key) else key), options


def _sort_tags(collection: MutableMapping[Hashable, Any]) -> None:
    """Order named tags alphabetically, followed by key-less tags in insertion order."""
    ordered = sorted(
        collection.items(),
        key=lambda item: (0, item[0]) if isinstance(item[0], str) else (1, ""),
    )
    collection.clear()
    collection.update(ordered)


class MetaManager:
    """Request-scoped helper that attaches meta and link tags to a view.

    Tags come from explicit calls (register_title, register_og, ...), from a
    per-model attribute configuration, or from conventional getters on a model
    (see register_model). Every register_* and clear_* method returns the
    manager so calls can be chained.
    """

    def __init__(
        self,
        view: View,
        request: Optional[RequestContext] = None,
        url_builder: Optional[UrlBuilder] = None,
        alias_resolver: Optional[AliasResolver] = None,
        image_inspector: Optional[ImageInspector] = None,
        config: Optional[MetaManagerConfig] = None,
    ):
        """Initialize the manager and register the configured default tags.

        Args:
            view: Page receiving the tags
            request: Current request, used to skip AJAX/PJAX requests. None disables the check.
            url_builder: Builds absolute image URLs. Defaults to the configured SITE_URL.
            alias_resolver: Maps aliased image paths to files. Defaults to PATH_ALIASES.
            image_inspector: Reads image dimensions. Defaults to Pillow.
            config: Per-instance switches. Defaults to the environment settings.
        """
        self.config = config or MetaManagerConfig.from_settings()
        self.request = request
        self.url_builder = url_builder or BaseUrlBuilder.from_settings()
        self.alias_resolver = alias_resolver or PathAliasResolver.from_settings()
        self.image_inspector = image_inspector or PillowImageInspector()
        self._view = view
        self._title: Optional[str] = None

        self._register_default_meta_datas()

    # ------------------------------------------------------------------
    # Base
    # ------------------------------------------------------------------

    @property
    def view(self) -> View:
        return self._view

    @view.setter
    def view(self, view: View) -> None:
        self._view = view

    @property
    def meta_attributes(self) -> MetaAttributes:
        return self.config.meta_attributes

    @property
    def title(self) -> Optional[str]:
        """The most recently registered title."""
        return self._title

    def _register_default_meta_datas(self) -> None:
        for key, meta_tag in self.config.default_meta_datas.items():
            if not isinstance(key, str):
                if isinstance(meta_tag, Mapping):
                    self.register_meta_tag(dict(meta_tag))
                else:
                    logger.warning(f"Ignored default meta tag {key!r}: key-less defaults need attributes")
                continue

            handler = getattr(self, handler_name(key), None)
            if callable(handler):
                if isinstance(meta_tag, Mapping) and "content" in meta_tag:
                    meta_tag = meta_tag["content"]
                handler(meta_tag)
                continue

            if meta_tag is None:
                logger.debug(f"Skipped empty default meta tag {key!r}")
                continue

            # a bare value is the tag's content
            options = dict(meta_tag) if isinstance(meta_tag, Mapping) else {"content": meta_tag}
            if "name" not in options and "property" not in options:
                options["name"] = key
            self.register_meta_tag(options, key)

    def _is_suppressed(self) -> bool:
        """Check whether the current request must not receive tags."""
        if self.request is None:
            return False
        return (
            (self.config.disabled_on_ajax and self.request.is_ajax)
            or (self.config.disabled_on_pjax and self.request.is_pjax)
        )

    # ------------------------------------------------------------------
    # Tag registry
    # ------------------------------------------------------------------

    def register_meta_tag(self, options: TagOptions, key: Optional[Hashable] = None) -> "MetaManager":
        """Register a single meta tag, replacing any tag with the same key."""
        if self._is_suppressed():
            logger.debug(f"Skipped meta tag {key!r} on partial request")
            return self

        self.view.register_meta_tag(options, key)
        _sort_tags(self.view.meta_tags)
        return self

    def clear_meta_tag(self, key: Hashable) -> "MetaManager":
        """Unregister a specific meta tag."""
        self.view.meta_tags.pop(key, None)
        return self

    def register_meta_tags(self, tags: TagSource) -> "MetaManager":
        """Register multiple meta tags; numeric keys register key-less tags."""
        for key, options in _iter_tags(tags):
            self.register_meta_tag(options, key)
        return self

    def register_link_tag(self, options: TagOptions, key: Optional[Hashable] = None) -> "MetaManager":
        """Register a link tag, replacing any link tag with the same key."""
        if self._is_suppressed():
            logger.debug(f"Skipped link tag {key!r} on partial request")
            return self

        self.view.register_link_tag(options, key)
        _sort_tags(self.view.link_tags)
        return self

    def clear_link_tag(self, key: Hashable) -> "MetaManager":
        """Unregister a link tag."""
        self.view.link_tags.pop(key, None)
        return self

    def register_link_tags(self, links: TagSource) -> "MetaManager":
        """Register multiple link tags; numeric keys register key-less tags."""
        for key, options in _iter_tags(links):
            self.register_link_tag(options, key)
        return self

    # ------------------------------------------------------------------
    # Social registration
    # ------------------------------------------------------------------

    def register_ogs(self, ogs: Mapping[str, Any]) -> "MetaManager":
        """Register several OpenGraph tags at once.

        ``register_ogs({"title": "My OG title"})`` produces
        ``<meta property="og:title" content="My OG title">``.
        """
        if self.config.register_ogs:
            for prop, content in ogs.items():
                self.register_og(prop, content)
        return self

    def register_og(self, prop: str, content: Any) -> "MetaManager":
        """Register an OpenGraph tag; None content removes it.

        og:locale:alternate may appear several times and is never replaced.
        """
        if not self.config.register_ogs:
            return self

        key = META_CONSTANTS.OG_PREFIX + prop
        options = {"property": key, "content": content}
        if content is None:
            self.clear_meta_tag(key)
        elif key in META_CONSTANTS.UNKEYED_OG_PROPERTIES:
            self.register_meta_tag(options)
        else:
            self.register_meta_tag(options, key)
        return self

    def register_twitters(self, twitters: Mapping[str, Any]) -> "MetaManager":
        """Register several Twitter Card tags at once."""
        if self.config.register_twitters:
            for name, content in twitters.items():
                self.register_twitter(name, content)
        return self

    def register_twitter(self, name: str, content: Any) -> "MetaManager":
        """Register a Twitter Card tag; None content removes it."""
        if not self.config.register_twitters:
            return self

        key = META_CONSTANTS.TWITTER_PREFIX + name
        if content is None:
            self.clear_meta_tag(key)
        else:
            self.register_meta_tag({"name": key, "content": content}, key)
        return self

    def register_dcs(self, dcs: Mapping[str, Any]) -> "MetaManager":
        """Register several Dublin Core tags at once."""
        if self.config.register_dcs:
            for name, content in dcs.items():
                self.register_dc(name, content)
        return self

    def register_dc(self, name: str, content: Any) -> "MetaManager":
        """Register a Dublin Core tag; None content removes it."""
        if not self.config.register_dcs:
            return self

        key = META_CONSTANTS.DC_PREFIX + name
        if content is None:
            self.clear_meta_tag(key)
        else:
            self.register_meta_tag({"name": key, "content": content}, key)
        return self

    def add_breadcrumbs(self, breadcrumb: BreadcrumbItem) -> "MetaManager":
        """Append a label, or a {"label": ..., "url": ...} item, to the breadcrumb trail."""
        self.view.params.setdefault(META_CONSTANTS.BREADCRUMBS_PARAM, []).append(breadcrumb)
        return self

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def register_title(self, title: Optional[str] = None, add_breadcrumb: bool = True) -> "MetaManager":
        """Set the page title and the OG, Twitter and DC titles.

        An empty title clears the social title tags.
        """
        social_title = title or None
        self.view.title = title
        self.register_og("title", social_title)
        self.register_twitter("title", social_title)
        self.register_dc("title", social_title)

        if add_breadcrumb and title:
            self.add_breadcrumbs(title)

        self._title = title
        return self

    def register_description(self, description: Optional[str], length: Optional[int] = None) -> "MetaManager":
        """Set the description, OG, Twitter and DC description tags.

        Whitespace is collapsed and descriptions longer than ``length``
        characters are cut on a word boundary with an ellipsis.
        """
        if not description:
            return self

        if length is None:
            length = self.config.description_length
        description = truncate_description(description, length)

        self.register_meta_tag({"name": "description", "content": description}, "description")
        self.register_og("description", description)
        self.register_twitter("description", description)
        self.register_dc("description", description)
        return self

    def register_keywords(self, keywords: Union[str, Sequence[str], None]) -> "MetaManager":
        """Set the keywords meta tag from a string or a list of keywords."""
        if not self.config.register_meta_keywords or not keywords:
            return self

        if not isinstance(keywords, str):
            keywords = META_CONSTANTS.KEYWORD_SEPARATOR.join(str(keyword) for keyword in keywords)
        self.register_meta_tag({"name": "keywords", "content": keywords}, "keywords")
        return self

    def register_image(self, url: str, alt: Optional[str] = None) -> "MetaManager":
        """Register the OG and Twitter image tags for a local file or a url.

        When ``url`` resolves to a readable image file, the tags get its
        absolute URL and pixel size; otherwise ``url`` is used as is and the
        size tags are left out.
        """
        image, width, height = url, None, None

        filename = self.alias_resolver.resolve(url)
        if Path(filename).is_file():
            size = self.image_inspector.size(filename)
            if size is not None:
                image = self.url_builder.to(url, scheme=True)
                width, height = size
            else:
                logger.warning(f"Could not read image size of {filename}, using {url} as is")

        return self.register_image_url(image, alt, width, height)

    def register_image_url(
        self,
        url: str,
        alt: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "MetaManager":
        """Register the OG and Twitter image tags with caller supplied dimensions."""
        self.register_ogs({
            "image": url,
            "image:secure_url": url,
            "image:width": width,
            "image:height": height,
            "image:alt": alt,
        })
        self.register_twitters({
            "image": url,
            "image:alt": alt,
        })
        return self

    # ------------------------------------------------------------------
    # Model / attribute registration
    # ------------------------------------------------------------------

    def register_meta_attributes(
        self,
        meta_attributes: Mapping[Hashable, Mapping[str, Any]],
        drop_old_attributes: bool = False,
    ) -> "MetaManager":
        """Extend (or replace) the attribute configuration used by register_model."""
        self.config = self.config.with_meta_attributes(meta_attributes, drop_old=drop_old_attributes)
        return self

    def register_model(self, model: Any) -> "MetaManager":
        """Register the meta tags of a model.

        A model-specific attribute set wins over the global (wildcard) one and
        the two are never combined. Models without a matching set fall back to
        their conventional getters.

        Raises:
            UnknownTagError: A configured tag has no register_* handler, or its
                extractor names an attribute the model does not define
        """
        model_attributes, global_attributes = (None, None)
        if self.meta_attributes:
            model_attributes, global_attributes = self.meta_attributes.select(model)

        if model_attributes:
            return self._register_with_attributes(model, model_attributes)
        if global_attributes:
            return self._register_with_attributes(model, global_attributes)
        return self._register_with_conventions(model)

    def _register_with_attributes(self, model: Any, attributes: Mapping[str, Extractor]) -> "MetaManager":
        for tag, extractor in attributes.items():
            value = extractor.extract(model, self, tag)
            if not value:
                continue

            handler = getattr(self, handler_name(tag), None)
            if not callable(handler):
                raise UnknownTagError(tag)
            handler(value)
        return self

    def _register_with_conventions(self, model: Any) -> "MetaManager":
        descriptor = describe(model)
        if descriptor.is_empty():
            logger.debug(f"No conventional meta values found on {type(model).__name__}")
            return self

        if descriptor.title is not None:
            self.register_title(descriptor.title)
        if descriptor.description is not None:
            self.register_description(descriptor.description)
        if descriptor.keywords is not None:
            self.register_keywords(descriptor.keywords)
        if descriptor.image_url:
            alt = descriptor.image_alt if descriptor.image_alt is not None else self._title
            self.register_image(descriptor.image_url, alt)
        return self
