"""Stylesheet emitter — one CSS class per icon, cropping the atlas via background-position."""

from __future__ import annotations

import re

from svgsprite.engine.geometry import resolve_canonical_size, resolve_scale
from svgsprite.models.atlas import Atlas
from svgsprite.models.options import CssOptions, OutputConfiguration
from svgsprite.utils.formatting import format_number

_CSS_IDENT_UNSAFE_RE = re.compile(r"([^A-Za-z0-9_-])")


def css_escape(name: str) -> str:
    return _CSS_IDENT_UNSAFE_RE.sub(r"\\\1", name)


def render_stylesheet_rules(
    atlas: Atlas,
    options: CssOptions,
    class_prefix: str,
    atlas_url: str,
    canonical: tuple[float, float] | None = None,
) -> str:
    """Base rule for options.selector followed by one rule per icon.

    Icons whose size differs from the canonical size also override
    background-size, width and height, since the base rule sizes the element
    for canonical icons only.
    """
    if canonical is None:
        canonical = resolve_canonical_size(atlas)
    canonical_width, canonical_height = canonical
    scale_x, scale_y = resolve_scale(options, canonical)
    unit = options.unit

    def length(value: float) -> str:
        return f"{format_number(value)}{unit}"

    def offset(value: float) -> str:
        return "0" if value == 0 else length(value)

    selector = options.selector
    url = atlas_url.replace('"', "%22")
    background_size = f"background-size:{length(atlas.width * scale_x)} {length(atlas.height * scale_y)}"

    rules = [
        f"{selector}{{"
        f"display:inline-block;"
        f'background:url("{url}") no-repeat;'
        f"{background_size};"
        f"height:{length(canonical_height * scale_y)};"
        f"width:{length(canonical_width * scale_x)}"
        f"}}"
    ]

    for icon in atlas.icons:
        declarations = f"background-position:{offset(-icon.x * scale_x)} {offset(-icon.y * scale_y)}"
        if (icon.width, icon.height) != canonical:
            declarations += (
                f";{background_size}"
                f";width:{length(icon.width * scale_x)}"
                f";height:{length(icon.height * scale_y)}"
            )
        rules.append(f"{selector}.{css_escape(class_prefix + icon.name)}{{{declarations}}}")

    return "".join(rules)


def render_stylesheet(atlas: Atlas, configuration: OutputConfiguration, atlas_url: str) -> str:
    """All css_options of the configuration rendered in order and concatenated."""
    canonical = resolve_canonical_size(atlas)
    return "".join(
        render_stylesheet_rules(atlas, options, configuration.css_class_prefix, atlas_url, canonical)
        for options in configuration.css_options
    )
