"""Generation pipeline — source files → Atlas → artifacts.

Every stage only reads the previous stage's output. Nothing is retained
between calls; each invocation builds its own Atlas.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from svgsprite.emitters.declaration import DEFAULT_MODULE_PREFIX, render_declaration
from svgsprite.emitters.naming import find_collisions, normalize_identifier
from svgsprite.emitters.runtime import render_runtime_module
from svgsprite.emitters.stylesheet import render_stylesheet
from svgsprite.engine.errors import IdentifierCollisionError, SkipWarning
from svgsprite.engine.packer import Box, PackingStrategy, pack
from svgsprite.models.atlas import Atlas, AtlasBuild, Diagnostic, GeneratedArtifacts, PlacedIcon
from svgsprite.models.icon import IconDocument
from svgsprite.models.options import OutputConfiguration
from svgsprite.svg.parser import load_icon
from svgsprite.svg.serializer import render_composite

logger = logging.getLogger(__name__)


def load_icons(source_files: Iterable[tuple[str, bytes]]) -> tuple[list[IconDocument], list[Diagnostic]]:
    """Load every source file, skipping the unusable ones.

    A later file with an already-seen icon name replaces the earlier document
    in its original slot.
    """
    documents: dict[str, IconDocument] = {}
    diagnostics: list[Diagnostic] = []

    for filename, data in source_files:
        try:
            doc = load_icon(filename, data)
            if not normalize_identifier(doc.name):
                raise SkipWarning(filename, f"icon name {doc.name!r} yields an empty identifier")
        except SkipWarning as e:
            logger.warning("Skipping %s: %s", filename, e.message)
            diagnostics.append(Diagnostic(filename=filename, kind=e.kind, message=e.message))
            continue

        previous = documents.get(doc.name)
        if previous is not None:
            message = f"icon {doc.name!r} replaces the one loaded from {previous.filename}"
            logger.warning("%s: %s", filename, message)
            diagnostics.append(Diagnostic(filename=filename, kind="duplicate", message=message))
        documents[doc.name] = doc

    return list(documents.values()), diagnostics


def generate_atlas(
    source_files: Iterable[tuple[str, bytes]],
    packer: PackingStrategy | None = None,
) -> AtlasBuild:
    """Parse and pack the source files into an Atlas, collecting per-file diagnostics."""
    start = time.perf_counter()
    documents, diagnostics = load_icons(source_files)

    collisions = find_collisions(doc.name for doc in documents)
    if collisions:
        identifier, names = next(iter(collisions.items()))
        raise IdentifierCollisionError(identifier, names)

    # Barrier: packing needs every box at once
    result = pack([Box(doc.width, doc.height) for doc in documents], packer)

    atlas = Atlas(
        icons=[
            PlacedIcon(document=doc, x=pos.x, y=pos.y)
            for doc, pos in zip(documents, result.positions)
        ],
        width=result.width,
        height=result.height,
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Atlas generated: %d icons (%d diagnostics), %s×%s in %.0fms",
        len(atlas.icons),
        len(diagnostics),
        atlas.width,
        atlas.height,
        elapsed,
    )
    return AtlasBuild(atlas=atlas, diagnostics=diagnostics)


def generate_artifacts(
    atlas: Atlas,
    configuration: OutputConfiguration,
    atlas_url: str,
    module_name: str | None = None,
    source_dir_label: str | None = None,
    module_prefix: str = DEFAULT_MODULE_PREFIX,
    composite: str | None = None,
) -> GeneratedArtifacts:
    """Render all four artifacts of one atlas for one configuration.

    ``composite`` may be passed when the caller already rendered the SVG (it
    usually has to, to derive the atlas URL from its content).
    """
    if composite is None:
        composite = render_composite(atlas, configuration.css_class_prefix)

    return GeneratedArtifacts(
        svg=composite,
        css=render_stylesheet(atlas, configuration, atlas_url),
        js=render_runtime_module(atlas, configuration, atlas_url),
        dts=render_declaration(
            atlas,
            configuration,
            module_name if module_name is not None else configuration.name,
            source_dir_label if source_dir_label is not None else configuration.folder,
            module_prefix,
        ),
    )
