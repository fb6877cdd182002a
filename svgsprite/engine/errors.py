"""Error taxonomy for atlas generation.

SkipWarning and ParseError exclude a single source file; the batch carries on.
Everything else here aborts the generation pass.
"""

from __future__ import annotations


class SkipWarning(Exception):
    """A source file that cannot become an icon (wrong root, missing or bad viewBox)."""

    kind = "skip"

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{filename}: {message}")
        self.filename = filename
        self.message = message


class ParseError(SkipWarning):
    """A source file that is not well-formed markup at all."""

    kind = "parse_error"


class PackingInvariantViolation(RuntimeError):
    """The packer produced overlapping or out-of-bounds placements."""


class IdentifierCollisionError(ValueError):
    """Two icon names normalize to the same generated identifier."""

    def __init__(self, identifier: str, names: list[str]) -> None:
        super().__init__(
            f"Icon names {', '.join(repr(n) for n in names)} all map to identifier {identifier!r}"
        )
        self.identifier = identifier
        self.names = names
