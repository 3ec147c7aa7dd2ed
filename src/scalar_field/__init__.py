"""Scalar field interpolation from scattered samples onto a regular grid."""

from .errors import (
    EmptyInputError,
    EvaluationCancelledError,
    InvalidArgumentError,
    ParseFailureError,
    ScalarFieldError,
)
from .interpolation import InterpolationGrid, bilinear_blend
from .levels import evenly_spaced, generate_contour_levels
from .point_set import PointSet
from .schemas import BoundingBox, Sample
from .search import QuadrantSearch, ScanQuadrantSearch, SortedQuadrantSearch

__all__ = [
    "BoundingBox",
    "EmptyInputError",
    "EvaluationCancelledError",
    "InterpolationGrid",
    "InvalidArgumentError",
    "ParseFailureError",
    "PointSet",
    "QuadrantSearch",
    "Sample",
    "ScalarFieldError",
    "ScanQuadrantSearch",
    "SortedQuadrantSearch",
    "bilinear_blend",
    "evenly_spaced",
    "generate_contour_levels",
]
