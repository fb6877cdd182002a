"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from svgsprite.config import Settings, settings
from svgsprite.engine.builder import SpriteBuilder


def get_settings() -> Settings:
    return settings


def create_builder(app_settings: Settings) -> SpriteBuilder:
    """Builder over the configured sprite folders; declarations are written only when an output folder is set."""
    dts_folder = app_settings.svgsprite_dts_output_folder
    return SpriteBuilder(
        app_settings.svgsprite_configurations,
        public_path=app_settings.svgsprite_public_path,
        module_prefix=app_settings.svgsprite_module_prefix,
        dts_output_folder=Path(dts_folder) if dts_folder else None,
    )


@lru_cache
def get_builder() -> SpriteBuilder:
    # One per process, so folder hashes are remembered between requests
    return create_builder(settings)
