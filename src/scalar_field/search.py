"""Quadrant anchor search used by bilinear interpolation.

For a query point (x, y) each quadrant picks one sample: the one closest to
the query by lexicographic (x, then y) ordering among the samples lying in
that quadrant. Boundaries are inclusive, so a sample sitting exactly on the
query point belongs to all four quadrants. This is not a Euclidean
nearest-neighbour search.

    q12 | q22        q11: x <= qx, y <= qy   (max x, then max y)
    ----+----        q21: x >= qx, y <= qy   (min x, then max y)
    q11 | q21        q12: x <= qx, y >= qy   (max x, then min y)
                     q22: x >= qx, y >= qy   (min x, then min y)

A quadrant without samples yields a sentinel anchor built from the extreme
finite float64 values. Samples with identical coordinates resolve to the
earliest one in point set order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .point_set import PointSet

LOW = float(np.finfo(np.float64).min)
HIGH = float(np.finfo(np.float64).max)

# Bound on the size of the boolean mask built per chunk of query rows.
_MAX_MASK_CELLS = 1 << 22


@dataclass(frozen=True)
class Quadrant:
    """One of the four quadrants around a query point.

    Attributes:
        name: Anchor name (q11, q21, q12, q22).
        x_below: True if samples must satisfy s.x <= qx, else s.x >= qx.
        y_below: True if samples must satisfy s.y <= qy, else s.y >= qy.
    """

    name: str
    x_below: bool
    y_below: bool

    @property
    def sentinel(self) -> tuple[float, float, float]:
        return (LOW if self.x_below else HIGH, LOW if self.y_below else HIGH, LOW)

    def contains(self, sx: float, sy: float, qx: float, qy: float) -> bool:
        in_x = sx <= qx if self.x_below else sx >= qx
        in_y = sy <= qy if self.y_below else sy >= qy
        return in_x and in_y

    def rank(self, sx: float, sy: float) -> tuple[float, float]:
        """Sort key where larger means closer to the query point."""
        return (sx if self.x_below else -sx, sy if self.y_below else -sy)


Q11 = Quadrant("q11", x_below=True, y_below=True)
Q21 = Quadrant("q21", x_below=False, y_below=True)
Q12 = Quadrant("q12", x_below=True, y_below=False)
Q22 = Quadrant("q22", x_below=False, y_below=False)

QUADRANTS = (Q11, Q21, Q12, Q22)


@dataclass(frozen=True)
class Anchors:
    """Anchor samples for a column of query points, one entry per query."""

    x: np.ndarray
    y: np.ndarray
    value: np.ndarray

    @classmethod
    def sentinel(cls, quadrant: Quadrant, size: int) -> "Anchors":
        sx, sy, sv = quadrant.sentinel
        return cls(
            x=np.full(size, sx, dtype=np.float64),
            y=np.full(size, sy, dtype=np.float64),
            value=np.full(size, sv, dtype=np.float64),
        )


@dataclass(frozen=True)
class QuadrantAnchors:
    """The four quadrant anchors for a column of query points."""

    q11: Anchors
    q21: Anchors
    q12: Anchors
    q22: Anchors


class QuadrantSearch(ABC):
    """Abstract base class for quadrant anchor search strategies.

    Implementations must return identical anchors for identical inputs; they
    only differ in how fast they get there.
    """

    def __init__(self, points: PointSet):
        self.points = points

    def find_column(self, x: float, ys: np.ndarray) -> QuadrantAnchors:
        """Finds the anchors for every query point (x, ys[j]) of one grid column.

        Args:
            x: X coordinate shared by the column.
            ys: Y coordinates of the query points.

        Returns:
            QuadrantAnchors whose arrays have the same length as ys.
        """
        ys = np.asarray(ys, dtype=np.float64)
        return QuadrantAnchors(**{q.name: self._find(q, x, ys) for q in QUADRANTS})

    @abstractmethod
    def _find(self, quadrant: Quadrant, x: float, ys: np.ndarray) -> Anchors:
        pass


class ScanQuadrantSearch(QuadrantSearch):
    """Scans every sample for every query point.

    O(samples) per cell. Slow, but trivially follows the selection rules and
    serves as the reference for the indexed search.
    """

    def _find(self, quadrant: Quadrant, x: float, ys: np.ndarray) -> Anchors:
        anchors = Anchors.sentinel(quadrant, len(ys))
        samples = self.points.samples

        for j, y in enumerate(ys.tolist()):
            best = None
            best_rank = None
            for sample in samples:
                if not quadrant.contains(sample.x, sample.y, x, y):
                    continue
                rank = quadrant.rank(sample.x, sample.y)
                # Strict comparison keeps the earliest sample on ties
                if best is None or rank > best_rank:
                    best = sample
                    best_rank = rank

            if best is not None:
                anchors.x[j] = best.x
                anchors.y[j] = best.y
                anchors.value[j] = best.value

        return anchors


class SortedQuadrantSearch(QuadrantSearch):
    """Pre-sorts samples once per quadrant and resolves whole columns at once.

    For each quadrant the samples are stably sorted from closest to farthest by
    that quadrant's lexicographic key, so the anchor of a query point is simply
    the first qualifying sample in that order.
    """

    def __init__(self, points: PointSet):
        super().__init__(points)
        xs, ys, values = points.xs, points.ys, points.values

        self._sorted = {}
        for quadrant in QUADRANTS:
            x_key = -xs if quadrant.x_below else xs
            y_key = -ys if quadrant.y_below else ys
            # lexsort sorts by the last key first and is stable
            order = np.lexsort((y_key, x_key))
            self._sorted[quadrant.name] = (xs[order], ys[order], values[order])

    def _find(self, quadrant: Quadrant, x: float, ys: np.ndarray) -> Anchors:
        anchors = Anchors.sentinel(quadrant, len(ys))
        sx, sy, sv = self._sorted[quadrant.name]

        in_x = sx <= x if quadrant.x_below else sx >= x
        candidates = np.flatnonzero(in_x)
        if candidates.size == 0 or ys.size == 0:
            return anchors

        cx = sx[candidates]
        cy = sy[candidates]
        cv = sv[candidates]

        rows_per_chunk = max(1, _MAX_MASK_CELLS // candidates.size)
        for start in range(0, ys.size, rows_per_chunk):
            stop = min(start + rows_per_chunk, ys.size)
            qy = ys[start:stop, None]
            mask = cy[None, :] <= qy if quadrant.y_below else cy[None, :] >= qy

            found = mask.any(axis=1)
            first = mask.argmax(axis=1)[found]
            rows = np.flatnonzero(found) + start

            anchors.x[rows] = cx[first]
            anchors.y[rows] = cy[first]
            anchors.value[rows] = cv[first]

        return anchors


SEARCH_ENGINES = {
    "sorted": SortedQuadrantSearch,
    "scan": ScanQuadrantSearch,
}
