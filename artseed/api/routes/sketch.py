"""GET /api/v1/sketch — the default sketch as a JSON scene."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from artseed.api.dependencies import check_poisson_grid, get_config, get_engine
from artseed.api.schemas import DotSchema, ErrorResponse, PolylineSchema, RectSchema, SceneResponse
from artseed.config import SketchConfig
from artseed.core.models import Dot, Polyline, Rect, Scene
from artseed.sketch.design import Design
from artseed.systems.rng import RandomEngine
from artseed.systems.units import Viewport

router = APIRouter()


def _scene_response(scene: Scene) -> SceneResponse:
    shapes: list[RectSchema | PolylineSchema | DotSchema] = []
    for shape in scene.shapes:
        match shape:
            case Rect():
                shapes.append(RectSchema(
                    x=shape.x, y=shape.y, width=shape.width, height=shape.height, fill=shape.fill,
                ))
            case Polyline():
                shapes.append(PolylineSchema(
                    points=list(shape.points), stroke=shape.stroke, stroke_width=shape.stroke_width,
                ))
            case Dot():
                shapes.append(DotSchema(
                    x=shape.center[0], y=shape.center[1], radius=shape.radius, fill=shape.fill,
                ))
    return SceneResponse(seed=scene.seed, width=scene.width, height=scene.height, shapes=shapes)


@router.get("/sketch", response_model=SceneResponse, responses={400: {"model": ErrorResponse}})
def get_sketch(
    width: int | None = Query(None, gt=0, le=8192),
    height: int | None = Query(None, gt=0, le=8192),
    dots: float | None = Query(None, ge=0, description="Dot spacing in pixels; 0 disables dots."),
    engine: RandomEngine = Depends(get_engine),
    config: SketchConfig = Depends(get_config),
) -> SceneResponse:
    viewport = Viewport(width or config.width, height or config.height)
    spacing = config.dot_spacing if dots is None else dots
    if spacing > 0:
        check_poisson_grid(viewport.width, viewport.height, spacing, config)
    scene = Design(engine, viewport, dot_spacing=spacing).render()
    return _scene_response(scene)
