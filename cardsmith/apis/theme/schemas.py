from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from cardsmith.core.theme import Theme


class ThemeUpdate(BaseModel):
    theme: Theme


class ThemeResponse(BaseModel):
    theme: Theme
    stored: Optional[Theme] = None
