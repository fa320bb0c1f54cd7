from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from cardsmith.apis.deps import get_theme_preference
from cardsmith.core.config import settings
from cardsmith.core.theme import ThemePreference
from .schemas import ThemeResponse, ThemeUpdate


router = APIRouter()

Preference = Annotated[ThemePreference, Depends(get_theme_preference)]


@router.get(
    f"/{settings.app.version}/theme",
    response_model=ThemeResponse,
    tags=["theme"],
)
async def get_theme(pref: Preference, system: Optional[str] = None) -> ThemeResponse:
    return ThemeResponse(theme=pref.resolve(system), stored=pref.stored())


@router.put(
    f"/{settings.app.version}/theme",
    response_model=ThemeResponse,
    tags=["theme"],
)
async def set_theme(req: ThemeUpdate, pref: Preference) -> ThemeResponse:
    theme = pref.apply(req.theme)
    return ThemeResponse(theme=theme, stored=theme)


@router.post(
    f"/{settings.app.version}/theme/toggle",
    response_model=ThemeResponse,
    tags=["theme"],
)
async def toggle_theme(pref: Preference, system: Optional[str] = None) -> ThemeResponse:
    theme = pref.toggle(system)
    return ThemeResponse(theme=theme, stored=theme)
