"""Geometry resolver — canonical icon size and per-unit scale factors."""

from __future__ import annotations

from collections import Counter

from svgsprite.models.atlas import Atlas
from svgsprite.models.options import CssOptions


def resolve_canonical_size(atlas: Atlas) -> tuple[float, float]:
    """Most frequent (width, height) among the icons; ties go to the first seen.

    An empty atlas has canonical size (0, 0).
    """
    if not atlas.icons:
        return (0.0, 0.0)
    counts = Counter((icon.width, icon.height) for icon in atlas.icons)
    # Counter keeps first-insertion order and most_common() sorts stably
    return counts.most_common(1)[0][0]


def resolve_scale(options: CssOptions, canonical: tuple[float, float]) -> tuple[float, float]:
    """(scale_x, scale_y) that turn atlas coordinates into options.unit.

    Absolute units scale coordinates directly. Relative units map the canonical
    icon size to ``options.scale`` of the unit, so a 24×24 canonical icon at
    scale 1 in em gives 1/24 per coordinate.
    """
    if not options.is_relative:
        return (options.scale, options.scale)

    canonical_width, canonical_height = canonical
    scale_x = options.scale / canonical_width if canonical_width else 0.0
    scale_y = options.scale / canonical_height if canonical_height else 0.0
    return (scale_x, scale_y)
