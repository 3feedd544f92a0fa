"""Meta manager configuration using Pydantic Settings.

This module centralizes the switches that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from pydantic_settings import BaseSettings

from metamanager.attributes import MetaAttributes
from metamanager.constants import META_CONSTANTS


class Settings(BaseSettings):
    """Meta manager settings with environment variable support."""

    # ===== Tag Families =====
    META_REGISTER_KEYWORDS: bool = os.getenv("META_REGISTER_KEYWORDS", "true").lower() == "true"
    META_REGISTER_OGS: bool = os.getenv("META_REGISTER_OGS", "true").lower() == "true"
    META_REGISTER_TWITTERS: bool = os.getenv("META_REGISTER_TWITTERS", "true").lower() == "true"
    META_REGISTER_DCS: bool = os.getenv("META_REGISTER_DCS", "true").lower() == "true"

    # ===== Partial Requests =====
    META_DISABLED_ON_AJAX: bool = os.getenv("META_DISABLED_ON_AJAX", "true").lower() == "true"
    META_DISABLED_ON_PJAX: bool = os.getenv("META_DISABLED_ON_PJAX", "true").lower() == "true"

    # ===== Content =====
    META_DESCRIPTION_LENGTH: int = int(
        os.getenv("META_DESCRIPTION_LENGTH", str(META_CONSTANTS.DEFAULT_DESCRIPTION_LENGTH))
    )
    # JSON object in the environment, e.g. {"og:site_name": {"content": "Storyboard"}}
    META_DEFAULT_META_DATAS: Dict[str, Any] = {}

    # ===== URLs & Paths =====
    SITE_URL: str = os.getenv("SITE_URL", "http://localhost:8000")
    PATH_ALIASES: Dict[str, str] = {"@webroot": "static"}
    URL_ALIASES: Dict[str, str] = {"@webroot": "/static"}

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


@dataclass(frozen=True)
class MetaManagerConfig:
    """Immutable per-instance configuration of a MetaManager.

    Attributes:
        register_meta_keywords: Emit the keywords meta tag
        register_ogs: Emit OpenGraph tags
        register_twitters: Emit Twitter Card tags
        register_dcs: Emit Dublin Core tags
        disabled_on_ajax: Skip registration on AJAX requests
        disabled_on_pjax: Skip registration on PJAX requests
        description_length: Default truncation length of descriptions
        default_meta_datas: Tags applied when the manager is created
        meta_attributes: Model attribute configuration used by register_model
    """
    register_meta_keywords: bool = True
    register_ogs: bool = True
    register_twitters: bool = True
    register_dcs: bool = True
    disabled_on_ajax: bool = True
    disabled_on_pjax: bool = True
    description_length: int = META_CONSTANTS.DEFAULT_DESCRIPTION_LENGTH
    default_meta_datas: Mapping[Any, Any] = field(default_factory=dict)
    meta_attributes: MetaAttributes = field(default_factory=MetaAttributes)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MetaManagerConfig":
        """Build a configuration from environment settings."""
        settings = settings or get_settings()
        return cls(
            register_meta_keywords=settings.META_REGISTER_KEYWORDS,
            register_ogs=settings.META_REGISTER_OGS,
            register_twitters=settings.META_REGISTER_TWITTERS,
            register_dcs=settings.META_REGISTER_DCS,
            disabled_on_ajax=settings.META_DISABLED_ON_AJAX,
            disabled_on_pjax=settings.META_DISABLED_ON_PJAX,
            description_length=settings.META_DESCRIPTION_LENGTH,
            default_meta_datas=dict(settings.META_DEFAULT_META_DATAS),
        )

    def with_meta_attributes(self, meta_attributes, drop_old: bool = False) -> "MetaManagerConfig":
        """Return a copy whose attribute configuration is extended by ``meta_attributes``."""
        return replace(self, meta_attributes=self.meta_attributes.extend(meta_attributes, drop_old=drop_old))
