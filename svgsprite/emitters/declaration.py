"""Type declaration emitter — TypeScript view of the runtime module."""

from __future__ import annotations

from svgsprite.emitters.naming import enum_members
from svgsprite.models.atlas import Atlas
from svgsprite.models.options import OutputConfiguration
from svgsprite.utils.formatting import js_string

DEFAULT_MODULE_PREFIX = "svg-sprites/"


def render_declaration(
    atlas: Atlas,
    configuration: OutputConfiguration,
    module_name: str,
    source_dir_label: str,
    module_prefix: str = DEFAULT_MODULE_PREFIX,
) -> str:
    dts = configuration.dts_options
    prefix = configuration.css_class_prefix

    header = [
        "/*",
        " * DO NOT MODIFY THIS FILE!",
        " *",
        " * This file has been auto generated by the svg-sprite generator.",
        f" * Sprite source directory: {source_dir_label}",
        f" * Sprite count: {len(atlas.icons)}",
        " */",
        "",
    ]

    union = " | ".join(js_string(prefix + icon.name) for icon in atlas.icons) or "never"
    lines = [f"export type {dts.class_union_name} = {union};", ""]

    lines.append(f"export enum {dts.enum_name} {{")
    for key, class_name in enum_members(atlas, prefix).items():
        lines.append(f"  {key} = {js_string(class_name)},")
    lines.append("}")

    lines.extend([
        "",
        "export const spriteEntries: {",
        "  id: string;",
        "  className: string;",
        "  width: number;",
        "  height: number;",
        "  xOffset: number;",
        "  yOffset: number;",
        "}[];",
        "",
        "export const spriteUrl: string;",
        "export const classList: string[];",
        "",
        "export const spriteWidth: number;",
        "export const spriteHeight: number;",
    ])

    if not dts.module:
        return "\n".join(header) + "\n".join(lines)

    body = "\n".join(f"  {line}" for line in lines)
    return "\n".join(header) + f'declare module "{module_prefix}{module_name}" {{\n{body}\n}}'
