"""Convention-based meta values for models without an attribute configuration."""
from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from metamanager.constants import META_CONSTANTS
from metamanager.models import MetaDescriptor

_MISSING = object()


@runtime_checkable
class MetaSource(Protocol):
    """Getters a model can implement to feed the meta manager directly.

    When you don't want keywords, return an empty string from get_meta_keywords.
    """

    def get_meta_title(self) -> Optional[str]:
        """Title for the title, og:title, twitter:title and DC.title tags."""

    def get_meta_description(self) -> Optional[str]:
        """Description, truncated before registration."""

    def get_meta_image_url(self) -> Optional[str]:
        """Any url or aliased path that leads to an image."""

    def get_meta_image_alt(self) -> Optional[str]:
        """Alt text of the meta image."""

    def get_meta_keywords(self) -> Optional[Union[str, Sequence[str]]]:
        """Comma separated keywords or a list of keywords."""


def probe(model, sources: Sequence[str]) -> Any:
    """Return the value of the first source the model defines.

    Callables are invoked without arguments; a source the model does not define
    is skipped. Returns None when no source is defined.
    """
    for name in sources:
        value = getattr(model, name, _MISSING)
        if value is _MISSING:
            continue
        return value() if callable(value) else value
    return None


def describe(model) -> MetaDescriptor:
    """Collect the conventional meta values of ``model``.

    A model providing ``meta_descriptor()`` is trusted as is, and a full
    MetaSource is read through its getters; every other model is probed getter
    by getter. The image alt text is only looked up when an image was found.
    """
    descriptor_method = getattr(model, META_CONSTANTS.DESCRIPTOR_METHOD, None)
    if callable(descriptor_method):
        descriptor = descriptor_method()
        if isinstance(descriptor, MetaDescriptor):
            return descriptor

    if isinstance(model, MetaSource):
        image_url = model.get_meta_image_url()
        return MetaDescriptor(
            title=model.get_meta_title(),
            description=model.get_meta_description(),
            keywords=model.get_meta_keywords(),
            image_url=image_url,
            image_alt=model.get_meta_image_alt() if image_url else None,
        )

    image_url = probe(model, META_CONSTANTS.IMAGE_URL_SOURCES)
    return MetaDescriptor(
        title=probe(model, META_CONSTANTS.TITLE_SOURCES),
        description=probe(model, META_CONSTANTS.DESCRIPTION_SOURCES),
        keywords=probe(model, META_CONSTANTS.KEYWORDS_SOURCES),
        image_url=image_url,
        image_alt=probe(model, META_CONSTANTS.IMAGE_ALT_SOURCES) if image_url else None,
    )
