"""Builds heatmap and isoline data from a CSV of scattered samples."""

from .config import IsolineMapConfig
from .csv_reader import read_points
from .pipeline import IsolineMapPipeline
from .schemas import IsolineMapOutput

__all__ = [
    "IsolineMapConfig",
    "IsolineMapOutput",
    "IsolineMapPipeline",
    "read_points",
]
