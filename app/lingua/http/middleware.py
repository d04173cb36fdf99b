from typing import Optional, Sequence

from starlette.middleware.base import BaseHTTPMiddleware

from lingua.configuration import LinguaSettings
from lingua.i18n.context import set_active_locale
from lingua.i18n.factory import create_lingua
from lingua.i18n.models import LocaleContext
from lingua.logging import bind_request_context, get_module_logger

logger = get_module_logger()


class LinguaMiddleware(BaseHTTPMiddleware):
    """Resolves the request locale and exposes a request-scoped Lingua.

    Sets ``request.state.lingua``, ``request.state.locale`` and
    ``request.state.lingua_groups``, makes the locale ambient for the rest of
    the request and writes any locale cookie queued by ``Lingua.set_locale``
    onto the response. The shared payload is built on demand by
    ``get_lingua_payload``.

    Install it inside SessionMiddleware so the session is available.

    Args:
        settings: Lingua settings (default: application settings).
        groups: Translation groups shared on every request. Empty means all
            translations; routes can narrow it with ``lingua_groups``.
    """

    def __init__(
        self,
        app,
        settings: Optional[LinguaSettings] = None,
        groups: Sequence[str] = (),
    ):
        super().__init__(app)
        self.settings = settings
        self.groups = list(groups)

    async def dispatch(self, request, call_next):
        lingua = create_lingua(self.settings, context=LocaleContext.from_request(request))
        locale = lingua.get_locale()
        set_active_locale(locale)

        request.state.lingua = lingua
        request.state.locale = locale
        request.state.lingua_groups = list(self.groups)
        request.state.lingua_payload = None

        with bind_request_context(
            correlation_id=request.headers.get("x-request-id"),
            request_path=request.url.path,
            request_method=request.method,
            locale=locale,
        ):
            response = await call_next(request)

        for cookie in lingua.queued_cookies:
            response.set_cookie(
                cookie.name,
                cookie.value,
                max_age=cookie.max_age,
                samesite="lax",
            )
            logger.debug("locale_cookie_written", cookie=cookie.name, locale=cookie.value)

        return response
