"""Immutable collection of scattered samples shared by interpolation workers."""

from collections.abc import Iterable, Iterator

import numpy as np

from .errors import EmptyInputError, InvalidArgumentError
from .schemas import BoundingBox, Sample


def _as_sample(item) -> Sample:
    if isinstance(item, Sample):
        return item
    try:
        x, y, value = item
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(
            f"Expected a Sample or an (x, y, value) triple, got {item!r}"
        ) from exc
    return Sample(x=x, y=y, value=value)


def _read_only(values: list[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    arr.flags.writeable = False
    return arr


class PointSet:
    """An ordered, read-only set of (x, y, value) samples.

    Sample order is kept as given. It does not affect interpolated values
    except when several samples share the same coordinates, where the earlier
    sample wins.

    Attributes:
        xs: Read-only float64 array of x coordinates.
        ys: Read-only float64 array of y coordinates.
        values: Read-only float64 array of sample values.
    """

    def __init__(self, samples: Iterable[Sample | tuple[float, float, float]]):
        """Initializes the point set.

        Args:
            samples: Samples or (x, y, value) triples. May be empty, but not None.

        Raises:
            InvalidArgumentError: If samples is None or an item is malformed.
        """
        if samples is None:
            raise InvalidArgumentError("samples must not be None")

        self._samples = tuple(_as_sample(item) for item in samples)

        self.xs = _read_only([s.x for s in self._samples])
        self.ys = _read_only([s.y for s in self._samples])
        self.values = _read_only([s.value for s in self._samples])

        # Cached once; left unset for an empty set so access can fail loudly.
        self._bounding_box = None
        if self._samples:
            self._bounding_box = BoundingBox(
                min_x=float(self.xs.min()),
                max_x=float(self.xs.max()),
                min_y=float(self.ys.min()),
                max_y=float(self.ys.max()),
            )

    @classmethod
    def from_arrays(cls, xs, ys, values) -> "PointSet":
        """Builds a point set from three equal-length array-likes."""
        if xs is None or ys is None or values is None:
            raise InvalidArgumentError("xs, ys and values must not be None")

        xs = np.asarray(xs, dtype=np.float64).ravel()
        ys = np.asarray(ys, dtype=np.float64).ravel()
        values = np.asarray(values, dtype=np.float64).ravel()
        if not (len(xs) == len(ys) == len(values)):
            raise InvalidArgumentError(
                f"Array lengths differ: xs={len(xs)}, ys={len(ys)}, "
                f"values={len(values)}"
            )
        return cls(zip(xs.tolist(), ys.tolist(), values.tolist()))

    @property
    def samples(self) -> tuple[Sample, ...]:
        return self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"PointSet(n={len(self)})"

    def bounding_box(self) -> BoundingBox:
        """Returns the componentwise min/max of all sample coordinates.

        Raises:
            EmptyInputError: If the point set has no samples.
        """
        if self._bounding_box is None:
            raise EmptyInputError("Cannot compute the bounding box of an empty point set")
        return self._bounding_box

    def value_range(self) -> tuple[float, float]:
        """Returns (min, max) of the sample values.

        Raises:
            EmptyInputError: If the point set has no samples.
        """
        if not self._samples:
            raise EmptyInputError("Cannot compute the value range of an empty point set")
        return float(self.values.min()), float(self.values.max())
