"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgsprite.models.atlas import Diagnostic


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SpriteResponse(BaseModel):
    svg: str
    css: str
    js: str
    dts: str
    bundle: str = ""
    asset_name: str
    asset_url: str
    width: float = 0.0
    height: float = 0.0
    icon_count: int = 0
    diagnostics: list[Diagnostic] = Field(default_factory=list)
