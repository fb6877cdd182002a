"""Parsed icon document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class IconNode(BaseModel):
    """One element of an icon's markup tree.

    Attribute names are kept in their prefixed form (``xlink:href``), and
    namespace declarations appear as ``xmlns`` / ``xmlns:prefix`` attributes on
    the element that declared them. ``text`` precedes the first child and
    ``tail`` follows this element inside its parent, as in ElementTree.
    """

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[IconNode] = Field(default_factory=list)
    text: str | None = None
    tail: str | None = None


class IconDocument(BaseModel):
    """A single source icon: its name, markup tree and intrinsic size."""

    name: str
    filename: str = ""
    root: IconNode
    width: float
    height: float
