"""Output configuration models — how one atlas is rendered for consumers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

CssUnit = Literal["px", "em", "rem"]

# Units measured relative to the font size are anchored on the canonical icon size
RELATIVE_UNITS: frozenset[str] = frozenset({"em", "rem"})


class CssOptions(BaseModel):
    selector: str = Field(..., description="Base CSS selector, e.g. '.icon'")
    scale: float = Field(default=1.0, gt=0, description="Scale factor in the target unit")
    unit: CssUnit = "px"

    @property
    def is_relative(self) -> bool:
        return self.unit in RELATIVE_UNITS


class DtsOptions(BaseModel):
    module: bool = Field(default=True, description="Wrap declarations in a named module block")
    enum_name: str = "SpriteIcons"
    class_union_name: str = "SpriteIconClasses"


class OutputConfiguration(BaseModel):
    """A named bundle of stylesheet and declaration options for one atlas."""

    name: str = "sprites"
    folder: str = ""
    css_class_prefix: str = ""
    css_options: list[CssOptions] = Field(default_factory=list)
    dts_options: DtsOptions = Field(default_factory=DtsOptions)
