"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgsprite.models.options import OutputConfiguration


class Settings(BaseSettings):
    svgsprite_env: str = "development"
    svgsprite_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Publishing
    svgsprite_public_path: str = ""
    svgsprite_module_prefix: str = "svg-sprites/"
    svgsprite_dts_output_folder: str = ""

    # Named sprite folders served by POST /api/sprite/{name}, as JSON
    svgsprite_configurations: dict[str, OutputConfiguration] = {}

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
