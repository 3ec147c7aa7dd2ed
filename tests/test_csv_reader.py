import logging

import numpy as np
import pytest

from isoline_map.csv_reader import read_points
from scalar_field.errors import EmptyInputError
from scalar_field.schemas import Sample


def write_csv(tmp_path, content: str, name: str = "points.csv"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_valid_file_returns_points(tmp_path):
    path = write_csv(tmp_path, "X,Y,Value\n0,0,1\n1,0,2\n0,1,3\n1,1,4")
    points = read_points(path)

    assert len(points) == 4
    assert points.samples[1] == Sample(x=1, y=0, value=2)
    assert points.bounding_box().as_tuple() == (0, 1, 0, 1)


def test_empty_file_returns_empty_set(tmp_path):
    points = read_points(write_csv(tmp_path, ""))
    assert len(points) == 0


def test_header_only_file_returns_empty_set(tmp_path):
    points = read_points(write_csv(tmp_path, "X,Y,Value"))
    assert len(points) == 0
    with pytest.raises(EmptyInputError):
        points.bounding_box()


def test_single_line_file_returns_single_point(tmp_path):
    points = read_points(write_csv(tmp_path, "X,Y,Value\n0,0,1"))
    assert len(points) == 1


def test_first_line_is_always_skipped(tmp_path):
    points = read_points(write_csv(tmp_path, "5,5,5\n1,2,3\n"))
    assert points.samples == (Sample(x=1, y=2, value=3),)


def test_number_formats(tmp_path):
    path = write_csv(tmp_path, "X,Y,Value\n-1.5,2e3, 0.25 \n+3,.5,-1E-2\n")
    points = read_points(path)

    np.testing.assert_allclose(points.xs, [-1.5, 3.0])
    np.testing.assert_allclose(points.ys, [2000.0, 0.5])
    np.testing.assert_allclose(points.values, [0.25, -0.01])


def test_blank_lines_are_ignored(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    points = read_points(write_csv(tmp_path, "X,Y,Value\n0,0,1\n\n1,1,2\n\n"))

    assert len(points) == 2
    assert not caplog.records


def test_malformed_rows_are_skipped(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    content = "X,Y,Value\n0,0,1\nfoo,1,2\n1,1\n1,2,3,4\n2,2,2\n"
    points = read_points(write_csv(tmp_path, content))

    assert [s.value for s in points] == [1.0, 2.0]

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 3
    assert "line 3" in messages[0] and "foo" in messages[0]
    assert "line 4" in messages[1] and "expected 3 fields" in messages[1]
    assert "line 5" in messages[2] and "1,2,3,4" in messages[2]


def test_locale_style_decimal_comma_is_rejected(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    path = write_csv(tmp_path, "X;Y;Value\n1,5;2;3\n1.5;2;3\n")
    points = read_points(path, delimiter=";")

    assert points.samples == (Sample(x=1.5, y=2, value=3),)
    assert len(caplog.records) == 1


def test_summary_is_logged(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="isoline_map.csv_reader")
    read_points(write_csv(tmp_path, "X,Y,Value\n0,0,1\nbad,0,1\n"))
    assert any("1 rows skipped" in r.getMessage() for r in caplog.records)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_points(tmp_path / "missing.csv")


def test_too_wide_first_row_is_skipped(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    points = read_points(write_csv(tmp_path, "X,Y,Value\n1,2,3,4\n0,0,1\n5,5,5\n"))

    assert points.samples == (
        Sample(x=0, y=0, value=1),
        Sample(x=5, y=5, value=5),
    )
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert "line 2" in messages[0] and "expected 3 fields, got 4" in messages[0]


def test_only_too_wide_rows_gives_empty_set(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    points = read_points(write_csv(tmp_path, "X,Y,Value\n1,2,3,4\n5,6,7,8\n"))

    assert len(points) == 0
    assert len(caplog.records) == 2


def test_too_wide_rows_keep_following_line_numbers(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    content = "X,Y,Value\n1,2,3,4,5\n\n0,0,1\nbad,1,1\n"
    points = read_points(write_csv(tmp_path, content))

    assert [s.value for s in points] == [1.0]
    messages = [record.getMessage() for record in caplog.records]
    assert "line 2" in messages[0]
    assert "line 5" in messages[1] and "not a number" in messages[1]


def test_quoted_fields_are_rejected(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="isoline_map.csv_reader")
    points = read_points(write_csv(tmp_path, 'X,Y,Value\n"3",1,2\n3,1,2\n'))

    assert points.samples == (Sample(x=3, y=1, value=2),)
    assert len(caplog.records) == 1
