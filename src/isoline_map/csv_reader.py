"""Reads scattered (x, y, value) samples from delimited text files."""

import logging
from pathlib import Path

import pandas as pd

from scalar_field.errors import ParseFailureError
from scalar_field.point_set import PointSet

logger = logging.getLogger(__name__)

COLUMNS = ["x", "y", "value"]


def _parse_fields(table: pd.DataFrame) -> tuple[pd.DataFrame, pd.Series]:
    """Converts string fields to floats; returns the numbers and a per-row ok mask."""
    text = table.apply(lambda column: column.str.strip())
    numeric = text.apply(lambda column: pd.to_numeric(column, errors="coerce"))
    nan_literal = text.apply(lambda column: column.str.lower() == "nan")
    parsed = ~(numeric.isna() & ~nan_literal).any(axis=1)
    return numeric, parsed


def read_points(path: str | Path, delimiter: str = ",") -> PointSet:
    """Reads a point set from a CSV file with a header row.

    Every line after the header must hold exactly three numbers (x, y, value)
    using "." as decimal separator regardless of the system locale. Fields are
    split on the delimiter as is; quoting is not interpreted. Blank lines are
    ignored. Malformed rows are logged and skipped; the rest of the file is
    still read.

    Args:
        path: Path to the CSV file.
        delimiter: Field separator.

    Returns:
        PointSet with the parsed samples in file order. Empty if the file is
        empty or only contains a header.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Could not read points at {path}")

    lines = path.read_text(encoding="utf-8-sig").splitlines()

    # Indexed by 1-based line number; line 1 is the header
    rows = pd.Series(lines[1:], index=pd.RangeIndex(2, len(lines) + 1), dtype=object)
    rows = rows[rows.str.strip() != ""]

    fields = rows.str.split(delimiter, regex=False)
    counts = fields.str.len()
    complete = counts == len(COLUMNS)

    reasons = pd.Series(None, index=rows.index, dtype=object)
    reasons.loc[~complete] = (
        f"expected {len(COLUMNS)} fields, got " + counts[~complete].astype(str)
    )

    table = pd.DataFrame(
        fields[complete].tolist(), index=fields[complete].index, columns=COLUMNS
    )
    numeric = pd.DataFrame(columns=COLUMNS, dtype=float)
    if not table.empty:
        numeric, parsed = _parse_fields(table)
        reasons.loc[parsed.index[~parsed.to_numpy()]] = "not a number"
        numeric = numeric[parsed]

    rejected = reasons.dropna()
    for line_number, reason in rejected.items():
        error = ParseFailureError(int(line_number), rows.loc[line_number], reason)
        logger.warning(str(error))

    logger.info(
        f"Read {len(numeric)} points from {path.name} ({len(rejected)} rows skipped)"
    )

    return PointSet.from_arrays(numeric["x"], numeric["y"], numeric["value"])
