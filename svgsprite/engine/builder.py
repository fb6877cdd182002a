"""Directory-backed sprite builds with content-hash caching.

This is the host side of generation: it lists and reads the source folder,
decides whether a rebuild is needed, names the published asset and writes the
declaration file. The pipeline it drives stays pure.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from svgsprite.emitters.runtime import render_bundle_module
from svgsprite.engine.packer import PackingStrategy
from svgsprite.engine.pipeline import generate_artifacts, generate_atlas
from svgsprite.models.atlas import Atlas, Diagnostic, GeneratedArtifacts
from svgsprite.models.options import OutputConfiguration
from svgsprite.svg.serializer import render_composite

logger = logging.getLogger(__name__)


def asset_name(composite: str) -> str:
    """'sprite-<last 20 hex digits of the SVG's SHA-1>.svg'."""
    digest = hashlib.sha1(composite.encode("utf-8")).hexdigest()
    return f"sprite-{digest[-20:]}.svg"


def read_sources(folder: Path) -> list[tuple[str, bytes]]:
    """(file name, bytes) for every regular file in the folder, sorted by name."""
    return [(path.name, path.read_bytes()) for path in sorted(folder.iterdir()) if path.is_file()]


def directory_hash(sources: list[tuple[str, bytes]]) -> str:
    digest = hashlib.sha1()
    for name, data in sources:
        digest.update(name.encode("utf-8"))
        digest.update(b"\0")
        digest.update(hashlib.sha1(data).digest())
    return digest.hexdigest()


@dataclass
class SpriteBuild:
    configuration_name: str
    directory_hash: str
    asset_name: str
    asset_url: str
    atlas: Atlas
    artifacts: GeneratedArtifacts
    bundle: str
    source_count: int
    diagnostics: list[Diagnostic] = field(default_factory=list)


def build_sprite(
    configuration: OutputConfiguration,
    sources: list[tuple[str, bytes]],
    public_path: str = "",
    module_prefix: str = "svg-sprites/",
    packer: PackingStrategy | None = None,
    source_hash: str | None = None,
    module_name: str | None = None,
) -> SpriteBuild:
    """Run the whole pipeline for one configuration over already-read sources.

    The declaration module is named after the configuration unless module_name is given.
    """
    result = generate_atlas(sources, packer)
    composite = render_composite(result.atlas, configuration.css_class_prefix)
    name = asset_name(composite)
    url = public_path + name

    artifacts = generate_artifacts(
        result.atlas,
        configuration,
        url,
        module_name=module_name or configuration.name,
        source_dir_label=configuration.folder,
        module_prefix=module_prefix,
        composite=composite,
    )

    logger.info(
        "SVG sprite configuration %s contains %d/%d sprites",
        configuration.name,
        len(result.atlas.icons),
        len(sources),
    )
    return SpriteBuild(
        configuration_name=configuration.name,
        directory_hash=source_hash if source_hash is not None else directory_hash(sources),
        asset_name=name,
        asset_url=url,
        atlas=result.atlas,
        artifacts=artifacts,
        bundle=render_bundle_module(artifacts.css, artifacts.js),
        source_count=len(sources),
        diagnostics=result.diagnostics,
    )


class SpriteBuilder:
    """Builds each named configuration from its folder, rebuilding only when the folder changed."""

    def __init__(
        self,
        configurations: Mapping[str, OutputConfiguration],
        public_path: str = "",
        module_prefix: str = "svg-sprites/",
        dts_output_folder: Path | None = None,
        packer: PackingStrategy | None = None,
    ) -> None:
        self.configurations = dict(configurations)
        self.public_path = public_path
        self.module_prefix = module_prefix
        self.dts_output_folder = dts_output_folder
        self.packer = packer
        self._builds: dict[str, SpriteBuild] = {}

    def configuration(self, name: str) -> OutputConfiguration:
        try:
            config = self.configurations[name]
        except KeyError:
            raise KeyError(f"Unknown sprite configuration: {name}") from None
        # The configuration's own name is what ends up in module names
        return config if config.name == name else config.model_copy(update={"name": name})

    def needs_build(self, name: str) -> bool:
        cached = self._builds.get(name)
        if cached is None:
            return True
        sources = read_sources(Path(self.configuration(name).folder))
        return cached.directory_hash != directory_hash(sources)

    def build(self, name: str) -> SpriteBuild:
        config = self.configuration(name)
        sources = read_sources(Path(config.folder))
        source_hash = directory_hash(sources)

        cached = self._builds.get(name)
        if cached is not None and cached.directory_hash == source_hash:
            logger.debug("SVG sprite %s unchanged (Hash: %s)", name, source_hash)
            return cached

        logger.info("Building SVG sprite for configuration %s (Hash: %s).", name, source_hash)
        sprite = build_sprite(
            config,
            sources,
            public_path=self.public_path,
            module_prefix=self.module_prefix,
            packer=self.packer,
            source_hash=source_hash,
        )
        self._builds[name] = sprite

        if self.dts_output_folder is not None:
            self.write_declaration(sprite)
        return sprite

    def write_declaration(self, sprite: SpriteBuild) -> Path:
        if self.dts_output_folder is None:
            raise ValueError("No declaration output folder configured")
        self.dts_output_folder.mkdir(parents=True, exist_ok=True)
        path = self.dts_output_folder / f"{sprite.configuration_name}.d.ts"
        path.write_text(sprite.artifacts.dts, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path
