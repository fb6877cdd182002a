"""SVG document loader — raw file bytes → IconDocument.

Markup is parsed with ElementTree; namespace-qualified names are turned back
into their prefixed form so the tree can be written out again unchanged.
"""

from __future__ import annotations

import io
import logging
import math
import re
import xml.etree.ElementTree as ET
from pathlib import PurePath

from svgsprite.engine.errors import ParseError, SkipWarning
from svgsprite.models.icon import IconDocument, IconNode

logger = logging.getLogger(__name__)

SVG_ROOT_TAG = "svg"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def icon_name(filename: str) -> str:
    """Icon name = file name without directory and extension."""
    return PurePath(filename).stem


def load_icon(filename: str, data: bytes) -> IconDocument:
    """Parse one source file into an IconDocument.

    Raises ParseError for malformed markup and SkipWarning for documents that
    are not usable icons (wrong root element, missing or invalid viewBox).
    """
    elem, prefixes, declared = _parse_elements(filename, data)

    # Unqualified <svg> or <svg> in the SVG namespace, whatever prefix the file bound it to
    if elem.tag not in (SVG_ROOT_TAG, f"{{{SVG_NAMESPACE}}}{SVG_ROOT_TAG}"):
        raise SkipWarning(filename, f"invalid svg root element <{_qualify(elem.tag, prefixes)}>")

    root = _to_node(elem, prefixes, declared)
    width, height = parse_viewbox(filename, root.attributes.get("viewBox"))

    doc = IconDocument(
        name=icon_name(filename),
        filename=filename,
        root=root,
        width=width,
        height=height,
    )
    logger.debug("Loaded %s as %r (%s×%s)", filename, doc.name, width, height)
    return doc


def parse_tree(filename: str, data: bytes) -> IconNode:
    """Parse markup bytes into an IconNode tree, keeping namespace declarations."""
    elem, prefixes, declared = _parse_elements(filename, data)
    return _to_node(elem, prefixes, declared)


def _parse_elements(
    filename: str, data: bytes
) -> tuple[ET.Element, dict[str, str], dict[int, list[tuple[str, str]]]]:
    # SVG elements are always written unprefixed; the composite root binds the SVG namespace as default
    prefixes: dict[str, str] = {XML_NAMESPACE: "xml", SVG_NAMESPACE: ""}
    declared: dict[int, list[tuple[str, str]]] = {}
    pending: list[tuple[str, str]] = []
    root: ET.Element | None = None

    try:
        for event, item in ET.iterparse(io.BytesIO(data), events=("start-ns", "start")):
            if event == "start-ns":
                prefix, uri = item
                prefixes.setdefault(uri, prefix)
                pending.append((prefix, uri))
                continue
            if pending:
                declared[id(item)] = pending
                pending = []
            if root is None:
                root = item
    except ET.ParseError as e:
        raise ParseError(filename, f"malformed markup ({e})") from e

    if root is None:
        raise ParseError(filename, "document has no root element")

    return root, prefixes, declared


def parse_viewbox(filename: str, value: str | None) -> tuple[float, float]:
    """Read (width, height) from a 'min-x min-y width height' declaration."""
    if value is None:
        raise SkipWarning(filename, "missing viewBox")

    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        raise SkipWarning(filename, f"invalid viewBox {value!r}")

    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        raise SkipWarning(filename, f"non-numeric viewBox {value!r}") from None

    _, _, width, height = numbers
    if not all(math.isfinite(n) for n in numbers) or width <= 0 or height <= 0:
        raise SkipWarning(filename, f"invalid bounds {width} x {height} in viewBox {value!r}")

    return width, height


def _qualify(name: str, prefixes: dict[str, str]) -> str:
    """'{uri}local' → 'prefix:local' (or bare 'local' for the default namespace)."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    prefix = prefixes.get(uri, "")
    return f"{prefix}:{local}" if prefix else local


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def _to_node(
    elem: ET.Element,
    prefixes: dict[str, str],
    declared: dict[int, list[tuple[str, str]]],
    preserve: bool = False,
    tail: str | None = None,
) -> IconNode:
    """Convert an element subtree.

    Whitespace between elements is layout and is dropped. Once an element holds
    real text next to child elements, its whole subtree keeps text and tails
    verbatim.
    """
    attributes: dict[str, str] = {}
    for prefix, uri in declared.get(id(elem), []):
        attributes[f"xmlns:{prefix}" if prefix else "xmlns"] = uri
    for key, value in elem.attrib.items():
        attributes[_qualify(key, prefixes)] = value

    mixed = preserve or (
        len(elem) > 0 and (_has_text(elem.text) or any(_has_text(child.tail) for child in elem))
    )

    children = [
        _to_node(child, prefixes, declared, preserve=mixed, tail=child.tail if mixed else None)
        for child in elem
    ]

    if mixed:
        text = elem.text or None
    else:
        text = elem.text.strip() if _has_text(elem.text) and not children else None

    return IconNode(
        tag=_qualify(elem.tag, prefixes),
        attributes=attributes,
        children=children,
        text=text,
        tail=tail or None,
    )
