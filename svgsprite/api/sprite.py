"""Sprite endpoints.

POST /api/sprite         — build an atlas and its artifacts from uploaded SVG sources.
POST /api/sprite/{name}  — build (or reuse) a sprite from a configured icon folder.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from svgsprite.config import Settings
from svgsprite.dependencies import get_builder, get_settings
from svgsprite.engine.builder import SpriteBuild, SpriteBuilder, build_sprite
from svgsprite.engine.errors import IdentifierCollisionError
from svgsprite.models.requests import SpriteRequest
from svgsprite.models.responses import SpriteResponse

router = APIRouter()


def _to_response(sprite: SpriteBuild) -> SpriteResponse:
    return SpriteResponse(
        svg=sprite.artifacts.svg,
        css=sprite.artifacts.css,
        js=sprite.artifacts.js,
        dts=sprite.artifacts.dts,
        bundle=sprite.bundle,
        asset_name=sprite.asset_name,
        asset_url=sprite.asset_url,
        width=sprite.atlas.width,
        height=sprite.atlas.height,
        icon_count=len(sprite.atlas.icons),
        diagnostics=sprite.diagnostics,
    )


@router.post("/sprite", response_model=SpriteResponse)
def create_sprite(req: SpriteRequest, settings: Settings = Depends(get_settings)) -> SpriteResponse:
    # Plain def: FastAPI runs it in the threadpool, generation is CPU-bound
    sources = [(f.name, f.svg.encode("utf-8")) for f in req.files]
    public_path = req.public_path if req.public_path is not None else settings.svgsprite_public_path

    try:
        sprite = build_sprite(
            req.configuration,
            sources,
            public_path=public_path,
            module_prefix=settings.svgsprite_module_prefix,
            module_name=req.module_name,
        )
    except IdentifierCollisionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _to_response(sprite)


@router.post("/sprite/{name}", response_model=SpriteResponse)
def build_configured_sprite(name: str, builder: SpriteBuilder = Depends(get_builder)) -> SpriteResponse:
    if name not in builder.configurations:
        raise HTTPException(status_code=404, detail=f"Unknown sprite configuration: {name}")

    try:
        sprite = builder.build(name)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Sprite folder not found: {e.filename}") from e
    except IdentifierCollisionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _to_response(sprite)
