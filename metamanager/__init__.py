"""SEO meta tag manager for server-rendered pages."""
from metamanager.attributes import (
    ANY_MODEL,
    AttributeRef,
    Callback,
    Constant,
    MetaAttributes,
    MethodRef,
    PropertyRef,
)
from metamanager.config import MetaManagerConfig, Settings, get_settings
from metamanager.constants import META_CONSTANTS
from metamanager.conventions import MetaSource
from metamanager.errors import MetaManagerError, UnknownAttributeError, UnknownTagError
from metamanager.manager import MetaManager
from metamanager.models import Breadcrumb, LinkTagEntry, MetaDescriptor, MetaTagEntry

__all__ = [
    "ANY_MODEL",
    "AttributeRef",
    "Breadcrumb",
    "Callback",
    "Constant",
    "LinkTagEntry",
    "META_CONSTANTS",
    "MetaAttributes",
    "MetaDescriptor",
    "MetaManager",
    "MetaManagerConfig",
    "MetaManagerError",
    "MetaSource",
    "MetaTagEntry",
    "MethodRef",
    "PropertyRef",
    "Settings",
    "UnknownAttributeError",
    "UnknownTagError",
    "get_settings",
]
