"""Model attribute configuration for the meta manager.

A configuration maps a selector to a set of logical tag names and the
extractor that produces each value, for example::

    MetaAttributes({
        Blog: {
            "title": "headline",
            "description": PropertyRef("summary"),
            "keywords": Callback(lambda: ["travel", "guides"]),
        },
        ANY_MODEL: {"title": "name"},
    })

A selector is a class, a class name ("Blog" or "blog.models.Blog"), or a
wildcard (``ANY_MODEL`` or any other non-string key) matching every model.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Iterator, Mapping, Optional, Tuple, Union

from metamanager.errors import UnknownAttributeError

logger = logging.getLogger(__name__)

_MISSING = object()


class _AnyModel:
    def __repr__(self) -> str:
        return "ANY_MODEL"


ANY_MODEL = _AnyModel()


@dataclass(frozen=True)
class Constant:
    """A fixed value."""
    value: Any

    def extract(self, model, manager, tag: str) -> Any:
        return self.value


@dataclass(frozen=True)
class Callback:
    """A zero-argument function evaluated at registration time."""
    function: Callable[[], Any]

    def extract(self, model, manager, tag: str) -> Any:
        return self.function()


@dataclass(frozen=True)
class MethodRef:
    """A model method, called with the manager so it can register further tags."""
    name: str

    def extract(self, model, manager, tag: str) -> Any:
        method = getattr(model, self.name, None)
        if not callable(method):
            raise UnknownAttributeError(tag, self.name, model)
        return method(manager)


@dataclass(frozen=True)
class PropertyRef:
    """A model attribute or property, read as is."""
    name: str

    def extract(self, model, manager, tag: str) -> Any:
        value = getattr(model, self.name, _MISSING)
        if value is _MISSING:
            raise UnknownAttributeError(tag, self.name, model)
        return value


@dataclass(frozen=True)
class AttributeRef:
    """A model method if the name is callable on the model, otherwise a property."""
    name: str

    def extract(self, model, manager, tag: str) -> Any:
        value = getattr(model, self.name, _MISSING)
        if value is _MISSING:
            raise UnknownAttributeError(tag, self.name, model)
        if callable(value):
            return value(manager)
        return value


Extractor = Union[Constant, Callback, MethodRef, PropertyRef, AttributeRef]
_EXTRACTOR_TYPES = (Constant, Callback, MethodRef, PropertyRef, AttributeRef)


def as_extractor(value: Any) -> Extractor:
    """Coerce a raw configuration value into an extractor."""
    if isinstance(value, _EXTRACTOR_TYPES):
        return value
    if isinstance(value, str):
        return AttributeRef(value)
    if callable(value):
        return Callback(value)
    return Constant(value)


def is_wildcard(selector: Hashable) -> bool:
    """Anything that is neither a class nor a class name matches every model."""
    return not isinstance(selector, (str, type))


def selector_matches(selector: Hashable, model) -> bool:
    """Check whether a class or class-name selector applies to ``model``."""
    if isinstance(selector, type):
        return isinstance(model, selector)
    if isinstance(selector, str):
        for klass in type(model).__mro__:
            if selector in (klass.__name__, f"{klass.__module__}.{klass.__qualname__}"):
                return True
    return False


class MetaAttributes(Mapping):
    """Immutable, ordered selector -> {tag name -> extractor} configuration."""

    def __init__(self, entries: Optional[Mapping[Hashable, Mapping[str, Any]]] = None):
        self._entries: Dict[Hashable, Dict[str, Extractor]] = {
            selector: {tag: as_extractor(source) for tag, source in attributes.items()}
            for selector, attributes in (entries or {}).items()
        }

    def __getitem__(self, selector: Hashable) -> Dict[str, Extractor]:
        return dict(self._entries[selector])

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MetaAttributes({self._entries!r})"

    def extend(self, other: Optional[Mapping[Hashable, Mapping[str, Any]]], drop_old: bool = False) -> "MetaAttributes":
        """Return a new configuration with ``other`` merged over this one.

        Args:
            other: Entries to add; a selector already present is replaced
            drop_old: Start from an empty configuration instead of this one

        Returns:
            New MetaAttributes instance; this one is left untouched
        """
        merged: Dict[Hashable, Mapping[str, Any]] = {} if drop_old else dict(self._entries)
        merged.update(other or {})
        return MetaAttributes(merged)

    def select(self, model) -> Tuple[Optional[Dict[str, Extractor]], Optional[Dict[str, Extractor]]]:
        """Find the attribute sets that apply to ``model``.

        Entries are scanned in insertion order. A wildcard entry is remembered as
        the global set; the first selector matching the model is the model-specific
        set and ends the scan, so wildcards declared after it are never seen.

        Returns:
            (model_specific, global) tuple; either may be None
        """
        global_attributes = None
        for selector, attributes in self._entries.items():
            if is_wildcard(selector):
                global_attributes = attributes
                continue
            if selector_matches(selector, model):
                logger.debug(f"Meta attributes for {type(model).__name__} matched selector {selector!r}")
                return attributes, global_attributes
        return None, global_attributes
