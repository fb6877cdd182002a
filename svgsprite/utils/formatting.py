"""Number and string formatting shared by the text emitters."""

from __future__ import annotations

from urllib.parse import quote

import numpy as np

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_number(value: float) -> str:
    """Shortest round-trip decimal, integral values without a fraction, -0 as 0."""
    if value == 0:
        return "0"
    return np.format_float_positional(float(value), trim="-")


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def js_string(text: str) -> str:
    """Double-quoted JavaScript string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'
