import json

import pytest

from polyline_cleanup.clean_polylines import (
    CleaningStats,
    PolylineCleaningContext,
    clean_polylines,
)
from polyline_cleanup.geometry import Cartesian2, Cartesian3


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f)


def _read_json(path):
    with open(path, "r") as f:
        return json.load(f)


@pytest.fixture
def data_dir(tmp_path):
    _write_json(
        tmp_path / "polylines" / "raw.json",
        {
            "polylines": [
                {
                    "id": "road",
                    "points": [[1, 1, 1], [1, 1, 1], [2, 2, 2], [3, 3, 3], [1, 1, 1]],
                },
                {
                    "id": "parcel",
                    "closed": True,
                    "points": [[1, 1, 1], [1, 1, 1], [2, 2, 2], [3, 3, 3], [1, 1, 1]],
                },
                {"id": "clean", "points": [[1, 0, 0], [2, 0, 0], [3, 0, 0]]},
            ]
        },
    )
    return tmp_path


def _context(data_dir, **kwargs):
    return PolylineCleaningContext(
        data_dir=data_dir,
        input_filename="polylines/raw.json",
        output_filename="output/clean.json",
        **kwargs,
    )


class TestPolylineCleaningContext:
    def test_paths(self, data_dir):
        ctx = _context(data_dir)

        assert ctx.input_path == data_dir / "polylines" / "raw.json"
        assert ctx.output_path == data_dir / "output" / "clean.json"
        assert ctx.output_path.parent.exists()

    def test_point_type(self, data_dir):
        assert _context(data_dir).point_type is Cartesian3
        assert _context(data_dir, dimension=2).point_type is Cartesian2

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _context(tmp_path)

    def test_invalid_dimension(self, data_dir):
        with pytest.raises(ValueError, match="Dimension must be 2 or 3"):
            _context(data_dir, dimension=4)


class TestCleanPolylines:
    def test_output_file(self, data_dir):
        ctx = _context(data_dir)
        clean_polylines(ctx)

        polylines = _read_json(ctx.output_path)["polylines"]

        assert [p["id"] for p in polylines] == ["road", "parcel", "clean"]
        assert polylines[0]["closed"] is False
        assert polylines[0]["points"] == [[1, 1, 1], [2, 2, 2], [3, 3, 3], [1, 1, 1]]
        assert polylines[1]["closed"] is True
        assert polylines[1]["points"] == [[2, 2, 2], [3, 3, 3], [1, 1, 1]]
        assert polylines[2]["points"] == [[1, 0, 0], [2, 0, 0], [3, 0, 0]]

    def test_stats(self, data_dir):
        stats = clean_polylines(_context(data_dir))

        assert stats == CleaningStats(polylines=3, points_in=13, points_out=10)
        assert stats.removed == 3

    def test_wrap_around_default(self, data_dir):
        ctx = _context(data_dir, wrap_around=True)
        clean_polylines(ctx)

        polylines = _read_json(ctx.output_path)["polylines"]

        assert polylines[0]["closed"] is True
        assert polylines[0]["points"] == [[2, 2, 2], [3, 3, 3], [1, 1, 1]]
        assert polylines[2]["points"] == [[1, 0, 0], [2, 0, 0], [3, 0, 0]]

    def test_plain_list_input(self, tmp_path):
        _write_json(
            tmp_path / "polylines" / "raw.json",
            [[[0, 0], [0, 0], [1, 1]], [[5, 5]]],
        )
        ctx = _context(tmp_path, dimension=2)
        stats = clean_polylines(ctx)

        polylines = _read_json(ctx.output_path)["polylines"]

        assert [p["id"] for p in polylines] == [0, 1]
        assert polylines[0]["points"] == [[0, 0], [1, 1]]
        assert polylines[1]["points"] == [[5, 5]]
        assert stats.removed == 1

    def test_wrong_coordinate_count(self, tmp_path):
        _write_json(tmp_path / "polylines" / "raw.json", [[[0, 0], [1, 1]]])
        ctx = _context(tmp_path)

        with pytest.raises(ValueError, match="expected 3"):
            clean_polylines(ctx)

    def test_non_boolean_closed(self, tmp_path):
        _write_json(
            tmp_path / "polylines" / "raw.json",
            [{"id": "ring", "closed": "false", "points": [[0, 0, 0], [1, 0, 0], [0, 0, 0]]}],
        )
        ctx = _context(tmp_path)

        with pytest.raises(ValueError, match="Polyline ring has a non-boolean 'closed'"):
            clean_polylines(ctx)

        assert not ctx.output_path.exists()

    def test_missing_polylines_key(self, tmp_path):
        _write_json(tmp_path / "polylines" / "raw.json", {"lines": []})

        with pytest.raises(ValueError, match="Missing 'polylines' key"):
            clean_polylines(_context(tmp_path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "polylines" / "raw.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        with pytest.raises(json.JSONDecodeError):
            clean_polylines(_context(tmp_path))

    def test_input_file_untouched(self, data_dir):
        ctx = _context(data_dir)
        before = ctx.input_path.read_text()

        clean_polylines(ctx)

        assert ctx.input_path.read_text() == before
