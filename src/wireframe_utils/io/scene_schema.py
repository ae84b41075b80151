"""Define Pydantic models for validating wireframe scene YAML files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from wireframe_utils.geometry import Basis3D, CoordinateSystem, Cuboid
from wireframe_utils.io.yaml_utils import load_yaml_mapping
from wireframe_utils.math import Vector3D

logger = logging.getLogger(__name__)

XYZ = Tuple[float, float, float]
"""A three-tuple of floats representing an (x,y,z) vector."""

SCENE_KEYS = {"camera", "cuboid"}
"""Top-level keys required in every scene file."""


class CameraSchema(BaseModel):
    """Schema for the viewer's coordinate system (origin and basis rows)."""

    origin: XYZ
    basis: Tuple[XYZ, XYZ, XYZ] = Field(description="Rows: x_basis, y_basis, z_basis")

    model_config = ConfigDict(extra="forbid")


class CuboidSchema(BaseModel):
    """Schema for the cuboid drawn in the scene."""

    half_extents: XYZ
    axis_indicator: bool = False

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_positive_extents(self) -> CuboidSchema:
        """Validate that every half-extent is positive."""
        if any(extent <= 0 for extent in self.half_extents):
            raise ValueError(f"Cuboid half-extents must be positive, got {self.half_extents}")
        return self


class CanvasSchema(BaseModel):
    """Schema for the size (pixels) of the drawing surface."""

    width_px: int = Field(default=400, gt=0)
    height_px: int = Field(default=300, gt=0)

    model_config = ConfigDict(extra="forbid")


class SceneSchema(BaseModel):
    """Schema for a complete scene: camera, cuboid, and canvas."""

    camera: CameraSchema
    cuboid: CuboidSchema
    canvas: CanvasSchema = Field(default_factory=CanvasSchema)

    model_config = ConfigDict(extra="forbid")


@dataclass
class Scene:
    """A validated scene, converted into the package's geometric types."""

    coordinate_system: CoordinateSystem
    cuboid: Cuboid
    axis_indicator: bool
    canvas_width_px: int
    canvas_height_px: int

    @classmethod
    def from_schema(cls, schema: SceneSchema) -> Scene:
        """Construct a Scene from its validated schema."""
        camera = schema.camera
        coordinate_system = CoordinateSystem(
            origin=Vector3D.from_sequence(camera.origin),
            basis=Basis3D.from_sequence(camera.basis),
        )
        return cls(
            coordinate_system=coordinate_system,
            cuboid=Cuboid(*schema.cuboid.half_extents),
            axis_indicator=schema.cuboid.axis_indicator,
            canvas_width_px=schema.canvas.width_px,
            canvas_height_px=schema.canvas.height_px,
        )


def load_scene(yaml_path: Path) -> Scene:
    """Load and validate a scene from the given YAML file.

    :param yaml_path: Path to a YAML file describing the scene
    :return: Validated scene
    :raises pydantic.ValidationError: If the YAML data does not match the scene schema
    """
    yaml_data = load_yaml_mapping(yaml_path, required_keys=SCENE_KEYS)

    try:
        schema = SceneSchema.model_validate(yaml_data)
    except ValidationError:
        logger.error(f"Validation error in scene file {yaml_path}")
        raise

    logger.debug(f"Loaded scene from {yaml_path}: {schema}")
    return Scene.from_schema(schema)
