"""Locale switching and translation endpoints."""

from typing import Optional

from fastapi import APIRouter, FastAPI, Path, Request
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field, StrictStr

from lingua.configuration import LinguaSettings, settings as app_settings
from lingua.http.dependencies import LinguaDep
from lingua.i18n.exceptions import UnsupportedLocaleError
from lingua.logging import get_module_logger

logger = get_module_logger()

router = APIRouter(tags=["Lingua"])

GROUP_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


class LocaleUpdate(BaseModel):
    locale: StrictStr = Field(min_length=1)


class GroupsRequest(BaseModel):
    groups: list[StrictStr] = Field(min_length=1)


# Switch the current locale, then go back to the page the user came from.
@router.post("/locale")
def update_locale(payload: LocaleUpdate, request: Request, lingua: LinguaDep):
    try:
        lingua.set_locale(payload.locale)
    except UnsupportedLocaleError as e:
        return JSONResponse(
            status_code=422,
            content={"detail": str(e), "supported_locales": e.supported_locales},
        )

    redirect_to = request.headers.get("referer") or "/"
    return RedirectResponse(url=redirect_to, status_code=303)


@router.get("/lingua/translations/{group}")
def get_translation_group(
    lingua: LinguaDep,
    group: str = Path(pattern=GROUP_NAME_PATTERN),
):
    return {
        "group": group,
        "locale": lingua.get_locale(),
        "translations": lingua.translation_group(group),
    }


@router.post("/lingua/translations")
def get_translation_groups(payload: GroupsRequest, lingua: LinguaDep):
    return {
        "locale": lingua.get_locale(),
        "translations": lingua.translations_for(payload.groups),
    }


@router.get("/lingua/groups")
def list_groups(lingua: LinguaDep):
    return {
        "locale": lingua.get_locale(),
        "groups": lingua.available_groups(),
    }


def include_lingua_routes(app: FastAPI, settings: Optional[LinguaSettings] = None) -> bool:
    """Mount the lingua router when routes are enabled.

    Returns:
        True if the router was included.
    """
    settings = settings or app_settings.lingua
    if not settings.routes.enabled:
        logger.info("lingua_routes_disabled")
        return False

    app.include_router(router, prefix=settings.routes.prefix)
    logger.info("lingua_routes_registered", prefix=settings.routes.prefix)
    return True
