"""Packed atlas and generation result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgsprite.models.icon import IconDocument


class PlacedIcon(BaseModel):
    document: IconDocument
    x: float = 0.0
    y: float = 0.0

    @property
    def name(self) -> str:
        return self.document.name

    @property
    def width(self) -> float:
        return self.document.width

    @property
    def height(self) -> float:
        return self.document.height


class Atlas(BaseModel):
    """All placed icons in input order plus the enclosing atlas size."""

    icons: list[PlacedIcon] = Field(default_factory=list)
    width: float = 0.0
    height: float = 0.0


class Diagnostic(BaseModel):
    filename: str
    kind: str
    message: str


class AtlasBuild(BaseModel):
    atlas: Atlas
    diagnostics: list[Diagnostic] = Field(default_factory=list)


class GeneratedArtifacts(BaseModel):
    """Every text derived from one atlas for one output configuration."""

    svg: str
    css: str
    js: str
    dts: str
