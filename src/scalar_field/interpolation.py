"""Bilinear interpolation of a scattered point set onto a regular grid."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .errors import EvaluationCancelledError, InvalidArgumentError
from .levels import evenly_spaced, spacing, validate_count
from .point_set import PointSet
from .search import SEARCH_ENGINES, QuadrantAnchors, QuadrantSearch

logger = logging.getLogger(__name__)


def bilinear_blend(x: float, ys: np.ndarray, anchors: QuadrantAnchors) -> np.ndarray:
    """Blends the four quadrant anchors at the query points (x, ys[j]).

    Where the anchors do not span a rectangle (zero denominator) the value of
    the lower-left anchor q11 is returned as is.

    Args:
        x: X coordinate of the query points.
        ys: Y coordinates of the query points.
        anchors: Anchors found for the same query points.

    Returns:
        Interpolated values, one per entry of ys.
    """
    q11, q21, q12, q22 = anchors.q11, anchors.q21, anchors.q12, anchors.q22

    # Sentinel anchors can overflow to inf/nan; those cells are kept as computed.
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        denom = (q21.x - q11.x) * (q12.y - q11.y)
        blended = (
            (q21.x - x) * (q12.y - ys) * q11.value
            + (x - q11.x) * (q12.y - ys) * q21.value
            + (q21.x - x) * (ys - q11.y) * q12.value
            + (x - q11.x) * (ys - q11.y) * q22.value
        ) / denom

    return np.where(denom == 0, q11.value, blended)


class InterpolationGrid:
    """Evaluates a bilinearly interpolated scalar field on a regular grid.

    The grid spans the bounding box of the point set with resolution_x by
    resolution_y sample positions, endpoints included. Evaluation is split
    into one task per X index; each task writes only its own row of the
    result, so no locking is needed.

    Attributes:
        points: The shared, read-only point set.
        resolution_x: Number of grid positions along X.
        resolution_y: Number of grid positions along Y.
        bounding_box: Bounds of the point set, read once at construction.
        step_x: Distance between neighbouring X positions (0 for a single one).
        step_y: Distance between neighbouring Y positions (0 for a single one).
    """

    def __init__(
        self,
        points: PointSet,
        resolution_x: int,
        resolution_y: int,
        max_workers: int | None = None,
        search: QuadrantSearch | str | None = None,
    ):
        """Initializes the grid.

        Args:
            points: Point set to interpolate. Must not be None or empty.
            resolution_x: Number of grid positions along X, at least 1.
            resolution_y: Number of grid positions along Y, at least 1.
            max_workers: Worker threads used by evaluate(). None lets the
                executor decide; 1 evaluates in the calling thread.
            search: Quadrant search strategy, either an instance or one of
                the names in SEARCH_ENGINES. Defaults to "sorted".

        Raises:
            InvalidArgumentError: On a missing point set or invalid sizes.
            EmptyInputError: If the point set has no samples.
        """
        if points is None:
            raise InvalidArgumentError("points must not be None")

        self.points = points
        self.resolution_x = validate_count("resolution_x", resolution_x)
        self.resolution_y = validate_count("resolution_y", resolution_y)
        self.max_workers = (
            None if max_workers is None else validate_count("max_workers", max_workers)
        )

        self.bounding_box = points.bounding_box()
        box = self.bounding_box
        self.step_x = spacing(box.min_x, box.max_x, self.resolution_x)
        self.step_y = spacing(box.min_y, box.max_y, self.resolution_y)

        self.search = self._resolve_search(search)

    def _resolve_search(self, search) -> QuadrantSearch:
        if search is None:
            search = "sorted"
        if isinstance(search, QuadrantSearch):
            return search
        if search not in SEARCH_ENGINES:
            raise InvalidArgumentError(
                f"search must be one of {sorted(SEARCH_ENGINES)}, got {search!r}"
            )
        return SEARCH_ENGINES[search](self.points)

    @property
    def shape(self) -> tuple[int, int]:
        return self.resolution_x, self.resolution_y

    def x_coordinates(self) -> np.ndarray:
        """Returns the X coordinate of every grid column index i."""
        box = self.bounding_box
        return evenly_spaced(box.min_x, box.max_x, self.resolution_x)

    def y_coordinates(self) -> np.ndarray:
        """Returns the Y coordinate of every grid row index j."""
        box = self.bounding_box
        return evenly_spaced(box.min_y, box.max_y, self.resolution_y)

    def evaluate(self, cancel_event: threading.Event | None = None) -> np.ndarray:
        """Interpolates the field at every grid position.

        Args:
            cancel_event: Optional event checked before each X index is
                processed. Setting it aborts the evaluation.

        Returns:
            A new float64 array of shape (resolution_x, resolution_y) where
            result[i, j] is the value at
            (min_x + i * step_x, min_y + j * step_y).

        Raises:
            EvaluationCancelledError: If cancel_event was set.
        """
        result = np.empty(self.shape, dtype=np.float64)
        ys = self.y_coordinates()

        logger.debug(
            f"Evaluating {self.resolution_x}x{self.resolution_y} grid over "
            f"{len(self.points)} samples ({type(self.search).__name__}, "
            f"max_workers={self.max_workers})"
        )

        def fill_column(i: int) -> None:
            if cancel_event is not None and cancel_event.is_set():
                raise EvaluationCancelledError(
                    f"Evaluation cancelled at column {i} of {self.resolution_x}"
                )
            x = self.bounding_box.min_x + i * self.step_x
            anchors = self.search.find_column(x, ys)
            result[i, :] = bilinear_blend(x, ys, anchors)

        if self.max_workers == 1:
            for i in range(self.resolution_x):
                fill_column(i)
            return result

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(fill_column, i) for i in range(self.resolution_x)]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        return result
