"""Request context for Starlette / FastAPI requests."""
from starlette.requests import Request

from metamanager.constants import META_CONSTANTS


class StarletteRequestContext:
    """Detects AJAX and PJAX requests from the request headers."""

    def __init__(self, request: Request):
        self.request = request

    @property
    def is_ajax(self) -> bool:
        return self.request.headers.get(META_CONSTANTS.AJAX_HEADER) == META_CONSTANTS.AJAX_HEADER_VALUE

    @property
    def is_pjax(self) -> bool:
        return self.is_ajax and bool(self.request.headers.get(META_CONSTANTS.PJAX_HEADER))
