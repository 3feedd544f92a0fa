"""FastAPI integration: one meta manager per request plus the head templates."""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from metamanager.adapters.paths import BaseUrlBuilder
from metamanager.adapters.starlette import StarletteRequestContext
from metamanager.adapters.view import PageView
from metamanager.config import MetaManagerConfig, get_settings
from metamanager.manager import MetaManager

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Setup Jinja2 templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def configure_meta_manager(app: FastAPI, config: MetaManagerConfig) -> None:
    """Set the configuration every request's meta manager is built with.

    Call once at startup; requests then share ``config`` (attribute mapping,
    default tags, switches) instead of the environment settings.
    """
    app.state.meta_manager_config = config


def build_meta_manager(request: Request, config: Optional[MetaManagerConfig] = None) -> MetaManager:
    """Create a manager bound to a fresh PageView for ``request``.

    Without ``config``, the app-level configuration set by
    configure_meta_manager is used, then the environment settings.
    """
    if config is None:
        config = getattr(request.app.state, "meta_manager_config", None)
    settings = get_settings()
    return MetaManager(
        PageView(),
        request=StarletteRequestContext(request),
        url_builder=BaseUrlBuilder(str(request.base_url), settings.URL_ALIASES),
        config=config,
    )


def get_meta_manager(request: Request) -> MetaManager:
    """FastAPI dependency returning the meta manager of the current request.

    The manager is cached on ``request.state`` so every dependency and the
    route share the same page view.
    """
    manager = getattr(request.state, "meta_manager", None)
    if manager is None:
        manager = build_meta_manager(request)
        request.state.meta_manager = manager
        logger.debug(f"Created meta manager for {request.url.path}")
    return manager


def render_page(request: Request, name: str, context: Optional[Dict[str, Any]] = None, **kwargs):
    """Render a template with the request's page view available as ``view``."""
    context = dict(context or {})
    context.setdefault("view", get_meta_manager(request).view)
    return templates.TemplateResponse(request, name, context, **kwargs)
