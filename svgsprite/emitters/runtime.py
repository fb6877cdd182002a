"""Runtime module emitter — CommonJS lookup tables for application code."""

from __future__ import annotations

from svgsprite.emitters.naming import enum_members
from svgsprite.models.atlas import Atlas
from svgsprite.models.options import OutputConfiguration
from svgsprite.utils.formatting import encode_uri_component, format_number, js_string


def render_runtime_module(atlas: Atlas, configuration: OutputConfiguration, atlas_url: str) -> str:
    """Frozen enum, per-icon entries, sprite url, class list and atlas size as CommonJS exports."""
    prefix = configuration.css_class_prefix
    lines = ["let EnumClassList = {};"]

    # Reverse-mapped like a compiled TypeScript string enum
    for key, class_name in enum_members(atlas, prefix).items():
        key_literal = js_string(key)
        lines.append(f"EnumClassList[EnumClassList[{key_literal}] = {js_string(class_name)}] = {key_literal};")

    lines.append("")
    lines.append("let SpriteEntries = [")
    for icon in atlas.icons:
        lines.extend([
            "  Object.freeze({",
            f"    id: {js_string(icon.name)},",
            f"    className: {js_string(prefix + icon.name)},",
            f"    width: {format_number(icon.width)},",
            f"    height: {format_number(icon.height)},",
            f"    xOffset: {format_number(icon.x)},",
            f"    yOffset: {format_number(icon.y)},",
            "  }),",
        ])
    lines.append("];")

    lines.append("")
    lines.append(f'let SpriteUrl = decodeURIComponent("{encode_uri_component(atlas_url)}");')

    class_list = ", ".join(js_string(prefix + icon.name) for icon in atlas.icons)
    lines.append("")
    lines.append(f"let ClassList = [{class_list}];")

    lines.extend([
        "",
        'Object.defineProperty(exports, "__esModule", { value: true });',
        f"exports.{configuration.dts_options.enum_name} = Object.freeze(EnumClassList);",
        "exports.spriteUrl = SpriteUrl;",
        "exports.classList = Object.freeze(ClassList);",
        "exports.spriteEntries = Object.freeze(SpriteEntries);",
        f"exports.spriteWidth = {format_number(atlas.width)};",
        f"exports.spriteHeight = {format_number(atlas.height)};",
    ])
    return "\n".join(lines)


def encode_css_for_js(css: str) -> str:
    return css.replace("%", "%25").replace('"', "%22").replace("\n", "%0A")


def render_bundle_module(css: str, runtime_module: str) -> str:
    """Module that injects the stylesheet into the page, then defines the runtime exports."""
    lines = [
        "/* initialize css */",
        'var element = document.createElement("style");',
        f'element.innerText = decodeURIComponent("{encode_css_for_js(css)}");',
        "document.head.append(element);",
        "",
        "/* initialize typescript objects */",
        runtime_module,
    ]
    return "\n".join(lines)
