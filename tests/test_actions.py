"""Tests for the core inspect/edit workflows."""

import pytest

from bmp_raster_editor import BLACK, WHITE, CodecOptions, RowOrder, decode
from bmp_raster_editor.core.actions import DrawKind, DrawOperation, edit_bmp, inspect_bmp
from bmp_raster_editor.core.results import OperationResult


class TestInspect:
    def test_inspect_ok(self, bmp_file):
        result = inspect_bmp(str(bmp_file))
        assert result.ok
        assert result.size == (6, 4)
        assert result.metadata["top_down"] is False
        assert result.metadata["header"]["height"] == 4

    def test_inspect_failure_is_reported(self, tmp_path):
        bad = tmp_path / "bad.bmp"
        bad.write_bytes(b"XX" + b"\x00" * 60)

        result = inspect_bmp(str(bad))
        assert not result.ok
        assert "signature" in result.errors[0]


class TestEdit:
    def test_operations_applied_in_order(self, white_bmp_file, tmp_path):
        out = tmp_path / "out.bmp"
        ops = [
            DrawOperation(DrawKind.LINE, (0, 0), (0, 4), BLACK),
            DrawOperation(DrawKind.PIXEL, (0, 2), color=WHITE),
            DrawOperation(DrawKind.CROSS, (1, 0), (3, 2), BLACK),
        ]
        result = edit_bmp(str(white_bmp_file), str(out), ops)

        assert result.ok, result.errors
        assert result.points_drawn == 5 + 1 + 6
        image = decode(out)
        assert image.pixel_at(0, 0) == BLACK
        assert image.pixel_at(0, 2) != BLACK
        assert image.pixel_at(2, 1) == BLACK

    def test_clipped_pixel_counts_zero(self, white_bmp_file, tmp_path):
        """A pixel outside the image is not counted as drawn."""
        out = tmp_path / "out.bmp"
        ops = [
            DrawOperation(DrawKind.PIXEL, (-1, 0), color=BLACK),
            DrawOperation(DrawKind.PIXEL, (5, 5), color=BLACK),
            DrawOperation(DrawKind.PIXEL, (2, 3), color=BLACK),
        ]
        result = edit_bmp(str(white_bmp_file), str(out), ops)

        assert result.ok, result.errors
        assert result.points_drawn == 1
        assert decode(out).pixel_at(2, 3) == BLACK

    def test_line_without_end_is_rejected(self):
        op = DrawOperation(DrawKind.LINE, (0, 0))
        with pytest.raises(ValueError):
            op.apply(None)

    def test_overwrite_warning(self, white_bmp_file):
        result = edit_bmp(str(white_bmp_file), str(white_bmp_file))
        assert result.ok
        assert any("overwrites" in w for w in result.warnings)

    def test_as_stored_warning(self, bmp_file, tmp_path):
        options = CodecOptions(row_order=RowOrder.AS_STORED)
        result = edit_bmp(str(bmp_file), str(tmp_path / "o.bmp"), options=options)
        assert result.ok
        assert any("flipped" in w for w in result.warnings)

    def test_failure_result(self, tmp_path):
        result = edit_bmp(str(tmp_path / "missing.bmp"), str(tmp_path / "o.bmp"))
        assert not result.ok
        assert "FAILED" in result.to_summary()
        assert result.to_dict()["errors"]


class TestOperationResult:
    def test_summary(self):
        result = OperationResult.success("edit_bmp", input_path="a.bmp", size=(2, 3), bit_count=24)
        result.add_warning("careful")
        summary = result.to_summary()

        assert "[SUCCESS] edit_bmp" in summary
        assert "2x3 24-bit" in summary
        assert "careful" in summary

    def test_add_error_marks_failed(self):
        result = OperationResult.success("inspect_bmp")
        result.add_error("boom")
        assert not result.ok
