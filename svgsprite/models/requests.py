"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgsprite.models.options import OutputConfiguration


class SourceFile(BaseModel):
    name: str = Field(..., description="File name; the icon name is this without its extension")
    svg: str = Field(..., description="Raw SVG code")


class SpriteRequest(BaseModel):
    files: list[SourceFile] = Field(default_factory=list, description="Icons in atlas order")
    configuration: OutputConfiguration = Field(default_factory=OutputConfiguration)
    public_path: str | None = Field(
        default=None,
        description="Prefix for the atlas URL (defaults to the server setting)",
    )
    module_name: str | None = Field(
        default=None,
        description="Declared module is <module prefix><module_name> (defaults to the configuration name)",
    )
