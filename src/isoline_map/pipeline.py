"""Pipeline turning a CSV of scattered samples into isoline map data."""

import logging
import threading
from pathlib import Path

from scalar_field.interpolation import InterpolationGrid
from scalar_field.levels import generate_contour_levels
from scalar_field.point_set import PointSet

from .config import IsolineMapConfig
from .csv_reader import read_points
from .schemas import IsolineMapOutput

logger = logging.getLogger(__name__)


class IsolineMapPipeline:
    """Ingests samples, interpolates them onto a grid and derives contour levels.

    Attributes:
        config: Pipeline configuration.
    """

    def __init__(self, config: IsolineMapConfig | None = None):
        """Initializes the pipeline.

        Args:
            config: Optional configuration. Defaults to IsolineMapConfig().
        """
        self.config = config or IsolineMapConfig()

    def build_grid(self, points: PointSet) -> InterpolationGrid:
        """Creates the interpolation grid for a point set using the configured sizes."""
        return InterpolationGrid(
            points,
            self.config.resolution_x,
            self.config.resolution_y,
            max_workers=self.config.max_workers,
            search=self.config.search,
        )

    def interpolate(
        self,
        points: PointSet,
        title: str,
        cancel_event: threading.Event | None = None,
    ) -> IsolineMapOutput:
        """Interpolates an already loaded point set.

        Args:
            points: Scattered samples. Must not be empty.
            title: Title of the map.
            cancel_event: Optional event that aborts grid evaluation when set.

        Returns:
            IsolineMapOutput with the grid, its axes and the contour levels.
        """
        grid = self.build_grid(points)

        value_min, value_max = points.value_range()
        logger.info(f"Min Value: {value_min}, Max Value: {value_max}")
        levels = generate_contour_levels(value_min, value_max, self.config.level_count)

        logger.info(
            f"Interpolating {len(points)} samples onto a "
            f"{grid.resolution_x}x{grid.resolution_y} grid..."
        )
        values = grid.evaluate(cancel_event=cancel_event)

        return IsolineMapOutput(
            title=title,
            sample_count=len(points),
            bounding_box=grid.bounding_box,
            resolution_x=grid.resolution_x,
            resolution_y=grid.resolution_y,
            x_coordinates=grid.x_coordinates().tolist(),
            y_coordinates=grid.y_coordinates().tolist(),
            values=values.tolist(),
            value_min=value_min,
            value_max=value_max,
            contour_levels=levels.tolist(),
        )

    def run(
        self,
        csv_path: str | Path,
        title: str,
        cancel_event: threading.Event | None = None,
    ) -> IsolineMapOutput:
        """Runs the pipeline on a CSV file.

        Args:
            csv_path: Path to a CSV file with an X,Y,Value header.
            title: Title of the map.
            cancel_event: Optional event that aborts grid evaluation when set.

        Returns:
            IsolineMapOutput for the file's samples.

        Raises:
            FileNotFoundError: If the CSV file does not exist.
            EmptyInputError: If the file holds no valid samples.
        """
        logger.info(f"Processing {csv_path}...")
        points = read_points(csv_path, delimiter=self.config.delimiter)
        return self.interpolate(points, title, cancel_event=cancel_event)

    def export(self, output: IsolineMapOutput, output_path: str | Path | None = None) -> Path:
        """Writes the map data as JSON.

        Args:
            output: The pipeline result.
            output_path: Target file. Defaults to "<title>.json" in the
                configured output directory.

        Returns:
            Path of the written file.
        """
        if output_path is None:
            output_path = self.config.output_dir / f"{output.title}.json"
        output_path = Path(output_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Isoline map data saved as {output_path}")
        return output_path
