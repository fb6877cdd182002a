"""Write icon trees and the composite sprite document back out as SVG markup."""

from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from svgsprite.models.atlas import Atlas, PlacedIcon
from svgsprite.models.icon import IconNode
from svgsprite.utils.formatting import format_number

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

INDENT = "  "

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def is_namespace_declaration(attribute: str) -> bool:
    return attribute == "xmlns" or attribute.startswith("xmlns:")


def _attributes(node: IconNode) -> str:
    return "".join(
        f' {key}="{escape(value, _ATTRIBUTE_ENTITIES)}"' for key, value in node.attributes.items()
    )


def is_mixed(node: IconNode) -> bool:
    """Text sits next to child elements, so whitespace inside is significant."""
    return bool(node.children) and (
        node.text is not None or any(child.tail is not None for child in node.children)
    )


def serialize_inline(node: IconNode) -> str:
    """Render a subtree without added whitespace; text and tails are written verbatim."""
    if not node.children and node.text is None:
        return f"<{node.tag}{_attributes(node)}/>"
    inner = "".join(serialize_inline(child) + escape(child.tail or "") for child in node.children)
    return f"<{node.tag}{_attributes(node)}>{escape(node.text or '')}{inner}</{node.tag}>"


def serialize_node(node: IconNode, depth: int = 0) -> str:
    """Render a node and its subtree, indenting two spaces per nesting level."""
    pad = INDENT * depth
    if is_mixed(node):
        return pad + serialize_inline(node)

    opening = f"{pad}<{node.tag}{_attributes(node)}"
    if node.children:
        inner = "\n".join(serialize_node(child, depth + 1) for child in node.children)
        return f"{opening}>\n{inner}\n{pad}</{node.tag}>"
    if node.text is not None:
        return f"{opening}>\n{pad}{INDENT}{escape(node.text)}\n{pad}</{node.tag}>"
    return f"{opening}/>"


def place_icon_root(icon: PlacedIcon, class_prefix: str, hoisted: dict[str, str]) -> IconNode:
    """Copy of the icon root carrying its id and placement.

    Namespace declarations the composite root already makes are dropped; a
    declaration binding a prefix differently stays on the nested root.
    """
    attributes: dict[str, str] = {}
    for key, value in icon.document.root.attributes.items():
        if is_namespace_declaration(key) and hoisted.get(key) == value:
            continue
        attributes[key] = value

    attributes["id"] = class_prefix + icon.name
    attributes["x"] = format_number(icon.x)
    attributes["y"] = format_number(icon.y)
    attributes["width"] = format_number(icon.width)
    attributes["height"] = format_number(icon.height)

    return icon.document.root.model_copy(update={"attributes": attributes})


def hoisted_namespaces(atlas: Atlas) -> dict[str, str]:
    """Namespace declarations for the composite root: SVG and xlink, then first bindings from icon roots."""
    namespaces = {"xmlns": SVG_NAMESPACE, "xmlns:xlink": XLINK_NAMESPACE}
    for icon in atlas.icons:
        for key, uri in icon.document.root.attributes.items():
            if not is_namespace_declaration(key):
                continue
            existing = namespaces.setdefault(key, uri)
            if existing != uri:
                logger.debug("Icon %r keeps its own %s=%s (composite binds %s)", icon.name, key, uri, existing)
    return namespaces


def render_composite(atlas: Atlas, class_prefix: str = "") -> str:
    """Merge every placed icon into one SVG of nested, id-addressable <svg> viewports."""
    namespaces = hoisted_namespaces(atlas)
    body = [
        serialize_node(place_icon_root(icon, class_prefix, namespaces), depth=1)
        for icon in atlas.icons
    ]

    width = format_number(atlas.width)
    height = format_number(atlas.height)
    ns_attrs = "".join(f' {key}="{escape(uri, _ATTRIBUTE_ENTITIES)}"' for key, uri in namespaces.items())

    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f"<!-- {len(atlas.icons)} icons packed -->",
        f'<svg{ns_attrs} width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        *body,
        "</svg>",
    ]
    return "\n".join(lines)
