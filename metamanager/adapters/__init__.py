"""Default implementations of the meta manager ports."""
from metamanager.adapters.images import PillowImageInspector
from metamanager.adapters.paths import BaseUrlBuilder, PathAliasResolver
from metamanager.adapters.view import PageView

__all__ = [
    "BaseUrlBuilder",
    "PageView",
    "PathAliasResolver",
    "PillowImageInspector",
]
