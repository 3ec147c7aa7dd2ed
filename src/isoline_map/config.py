"""Configuration for building isoline map data from a CSV file."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class IsolineMapConfig:
    """Configuration for the isoline map pipeline.

    Attributes:
        resolution_x: Grid positions along X.
        resolution_y: Grid positions along Y.
        level_count: Number of contour levels between the min and max sample value.
        max_workers: Threads used for grid evaluation (None lets the pool decide).
        search: Quadrant search strategy ("sorted" or "scan").
        delimiter: Field separator of the input CSV.
        output_dir: Directory where exported map data is written.
    """

    # Grid
    resolution_x: int = 400
    resolution_y: int = 400

    # Contours
    level_count: int = 25

    # Evaluation
    max_workers: int | None = None
    search: str = "sorted"

    # I/O
    delimiter: str = ","
    output_dir: Path = field(default_factory=lambda: Path("."))

    def __post_init__(self):
        """Convert string paths to Path objects."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
