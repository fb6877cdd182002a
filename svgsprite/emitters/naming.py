"""Icon name → generated enum identifier."""

from __future__ import annotations

import re
from collections.abc import Iterable

from svgsprite.engine.errors import IdentifierCollisionError
from svgsprite.models.atlas import Atlas

_SEPARATOR_RE = re.compile(r"[- ]")
_INVALID_RE = re.compile(r"[^a-zA-Z0-9_]")

# Word boundaries: "fooBar" → foo|Bar, "HTMLParser" → HTML|Parser
_CASE_SPLIT_RES = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_WORD_STRIP_RE = re.compile(r"[^A-Za-z0-9]+")


def pascal_case(text: str) -> str:
    for pattern in _CASE_SPLIT_RES:
        text = pattern.sub("\\1\0\\2", text)
    words = [w for w in _WORD_STRIP_RE.sub("\0", text).split("\0") if w]
    return "".join(_capitalize(word, index) for index, word in enumerate(words))


def _capitalize(word: str, index: int) -> str:
    first, rest = word[0], word[1:].lower()
    if index > 0 and first.isdigit():
        return f"_{first}{rest}"
    return first.upper() + rest


def normalize_identifier(name: str) -> str:
    """'arrow-down' → 'ArrowDown', 'add_foe' → 'AddFoe', 'w2g' → 'W2g'."""
    name = _SEPARATOR_RE.sub("_", name)
    name = _INVALID_RE.sub("", name)
    return pascal_case(name)


def find_collisions(names: Iterable[str]) -> dict[str, list[str]]:
    """Identifiers produced by more than one name, with the names that produce them."""
    by_identifier: dict[str, list[str]] = {}
    for name in names:
        by_identifier.setdefault(normalize_identifier(name), []).append(name)
    return {ident: group for ident, group in by_identifier.items() if len(group) > 1}


def enum_members(atlas: Atlas, class_prefix: str) -> dict[str, str]:
    """Ordered identifier → CSS class mapping for every icon in the atlas."""
    collisions = find_collisions(icon.name for icon in atlas.icons)
    if collisions:
        identifier, names = next(iter(collisions.items()))
        raise IdentifierCollisionError(identifier, names)
    return {normalize_identifier(icon.name): class_prefix + icon.name for icon in atlas.icons}
