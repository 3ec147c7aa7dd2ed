"""Pydantic models for the data handed to heatmap and isoline renderers."""

from pydantic import BaseModel, ConfigDict, Field

from scalar_field.schemas import BoundingBox


class IsolineMapOutput(BaseModel):
    """Interpolated field plus everything a renderer needs to draw it."""

    # Cells blended with empty-quadrant sentinels may be inf or nan
    model_config = ConfigDict(ser_json_inf_nan="constants")

    title: str = Field(..., description="Title of the map.")
    sample_count: int = Field(..., description="Number of scattered input samples.")
    bounding_box: BoundingBox = Field(..., description="Extent of the input samples.")
    resolution_x: int = Field(..., description="Grid positions along X.")
    resolution_y: int = Field(..., description="Grid positions along Y.")
    x_coordinates: list[float] = Field(
        ..., description="X coordinate of each grid index i (column coordinates)."
    )
    y_coordinates: list[float] = Field(
        ..., description="Y coordinate of each grid index j (row coordinates)."
    )
    values: list[list[float]] = Field(
        ..., description="Interpolated values, values[i][j] at (x_i, y_j)."
    )
    value_min: float = Field(..., description="Smallest sample value.")
    value_max: float = Field(..., description="Largest sample value.")
    contour_levels: list[float] = Field(
        ..., description="Isoline thresholds from value_min to value_max."
    )
