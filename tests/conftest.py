"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgsprite.models.atlas import Atlas, PlacedIcon
from svgsprite.models.icon import IconDocument, IconNode


CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''

# 32×32 icon, off the usual 24×24 grid
LARGE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <rect x="2" y="2" width="28" height="28" fill="#4ECDC4"/>
</svg>'''

XLINK_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 16 16">
  <defs>
    <path id="p" d="M0 0h16v16z"/>
  </defs>
  <use xlink:href="#p"/>
</svg>'''

INKSCAPE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd" viewBox="0 0 16 16">
  <sodipodi:namedview pagecolor="#ffffff"/>
  <circle cx="8" cy="8" r="6"/>
</svg>'''

# Inkscape declares the svg: prefix before the default namespace
INKSCAPE_PREFIXED_SVG = '''<svg xmlns:svg="http://www.w3.org/2000/svg" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16">
  <circle cx="8" cy="8" r="6"/>
</svg>'''

LABEL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 12">
  <text x="0" y="10">Hi <tspan>there</tspan> you</text>
</svg>'''

URN_ONE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:a="urn:one" viewBox="0 0 8 8">
  <a:x/>
</svg>'''

URN_TWO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:a="urn:two" viewBox="0 0 8 8">
  <a:y/>
</svg>'''

TITLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 8 8">
  <title>Star &amp; moon</title>
  <path d="M4 0L8 8H0z"/>
</svg>'''

HTML_DOC = '''<html xmlns="http://www.w3.org/1999/xhtml"><body><p>not an icon</p></body></html>'''

MALFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"></svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24"><circle cx="12" cy="12" r="10"/></svg>'''


def source(filename: str, svg: str) -> tuple[str, bytes]:
    return (filename, svg.encode("utf-8"))


def make_icon(name: str, width: float, height: float, x: float = 0.0, y: float = 0.0) -> PlacedIcon:
    root = IconNode(tag="svg", attributes={"viewBox": f"0 0 {width} {height}"})
    doc = IconDocument(name=name, filename=f"{name}.svg", root=root, width=width, height=height)
    return PlacedIcon(document=doc, x=x, y=y)


def make_atlas(*icons: PlacedIcon, width: float, height: float) -> Atlas:
    return Atlas(icons=list(icons), width=width, height=height)


@pytest.fixture
def mixed_atlas() -> Atlas:
    """Three 24×24 icons and one 32×32 icon, laid out by hand."""
    return make_atlas(
        make_icon("a", 24, 24, 0, 0),
        make_icon("b", 24, 24, 24, 0),
        make_icon("c", 24, 24, 0, 24),
        make_icon("d", 32, 32, 48, 0),
        width=80,
        height=48,
    )


@pytest.fixture
def icon_sources() -> list[tuple[str, bytes]]:
    return [
        source("circle.svg", CIRCLE_SVG),
        source("smiley.svg", SMILEY_SVG),
        source("home.svg", HOME_SVG),
        source("bar_chart.svg", BAR_CHART_SVG),
        source("large-box.svg", LARGE_SVG),
    ]
