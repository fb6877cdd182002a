"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgsprite.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgsprite_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgsprite",
        description="SVG sprite atlas generator — packed composite SVG plus CSS, runtime and type artifacts",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgsprite.api.router import api_router

    app.include_router(api_router)

    if settings.svgsprite_configurations:
        logger.info("Sprite configurations: %s", ", ".join(sorted(settings.svgsprite_configurations)))

    return app


app = create_app()
