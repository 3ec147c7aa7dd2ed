"""Pydantic models for scattered samples and their bounds."""

from pydantic import BaseModel, ConfigDict, Field


class Sample(BaseModel):
    """A single scattered measurement of a scalar field."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="X coordinate of the measurement.")
    y: float = Field(..., description="Y coordinate of the measurement.")
    value: float = Field(..., description="Measured scalar value at (x, y).")


class BoundingBox(BaseModel):
    """Axis-aligned bounds of a point set."""

    model_config = ConfigDict(frozen=True)

    min_x: float = Field(..., description="Smallest x coordinate.")
    max_x: float = Field(..., description="Largest x coordinate.")
    min_y: float = Field(..., description="Smallest y coordinate.")
    max_y: float = Field(..., description="Largest y coordinate.")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Returns (min_x, max_x, min_y, max_y)."""
        return self.min_x, self.max_x, self.min_y, self.max_y
