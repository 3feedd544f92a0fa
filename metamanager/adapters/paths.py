"""Path alias resolution and absolute URL building."""
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urljoin, urlparse

from metamanager.config import Settings, get_settings


def _split_alias(path: str) -> Tuple[str, str]:
    """Split "@alias/rest/of/path" into ("@alias", "rest/of/path")."""
    alias, _, rest = path.partition("/")
    return alias, rest


class PathAliasResolver:
    """Expands "@alias/..." paths to filesystem paths.

    Paths without a known alias are returned unchanged.
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None):
        self.aliases: Dict[str, str] = dict(aliases or {})

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PathAliasResolver":
        settings = settings or get_settings()
        return cls(settings.PATH_ALIASES)

    def resolve(self, path: str) -> str:
        if not path.startswith("@"):
            return path
        alias, rest = _split_alias(path)
        if alias not in self.aliases:
            return path
        return str(Path(self.aliases[alias]) / rest)


class BaseUrlBuilder:
    """Builds URLs relative to a base URL, expanding web aliases first.

    Args:
        base_url: Scheme and host (and optional prefix) of the site
        aliases: Alias -> public path mapping, e.g. {"@webroot": "/static"}
    """

    def __init__(self, base_url: str, aliases: Optional[Mapping[str, str]] = None):
        self.base_url = base_url.rstrip("/") + "/"
        self.aliases: Dict[str, str] = dict(aliases or {})

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "BaseUrlBuilder":
        settings = settings or get_settings()
        return cls(settings.SITE_URL, settings.URL_ALIASES)

    def to(self, url: str, scheme: bool = True) -> str:
        if urlparse(url).scheme:
            return url

        if url.startswith("@"):
            alias, rest = _split_alias(url)
            if alias in self.aliases:
                url = self.aliases[alias].rstrip("/") + "/" + rest

        if not scheme:
            return url
        return urljoin(self.base_url, url.lstrip("/"))
