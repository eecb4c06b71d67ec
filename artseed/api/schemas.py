"""Pydantic response models for the REST API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# --- Samples ---

class UniformResponse(BaseModel):
    seed: int
    values: list[float]


class IntResponse(BaseModel):
    seed: int
    max: int
    values: list[int]


class GaussianResponse(BaseModel):
    seed: int
    mean: float
    std: float
    values: list[float]


class ShuffleResponse(BaseModel):
    seed: int
    items: list[str]


class PointsResponse(BaseModel):
    seed: int
    count: int
    points: list[tuple[float, float]]


class NoiseResponse(BaseModel):
    seed: int
    dimension: str
    coords: list[float]
    value: float


# --- Scene ---

class RectSchema(BaseModel):
    kind: Literal["rect"] = "rect"
    x: float
    y: float
    width: float
    height: float
    fill: str


class PolylineSchema(BaseModel):
    kind: Literal["polyline"] = "polyline"
    points: list[tuple[float, float]]
    stroke: str
    stroke_width: float = 1.0


class DotSchema(BaseModel):
    kind: Literal["dot"] = "dot"
    x: float
    y: float
    radius: float
    fill: str


class SceneResponse(BaseModel):
    seed: int
    width: int
    height: int
    shapes: list[RectSchema | PolylineSchema | DotSchema] = Field(default_factory=list)


# --- Config ---

class SketchConfigResponse(BaseModel):
    seed: int | None
    width: int
    height: int
    poisson_spacing: float
    dot_spacing: float
    max_samples: int
    max_grid_cells: int


class ErrorResponse(BaseModel):
    detail: str
