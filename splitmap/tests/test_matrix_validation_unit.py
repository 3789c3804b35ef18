#!/usr/bin/env python3
"""Unit tests for the validation layer (core/matrix/validation.py).

The engine stays lenient; these checks only report what it absorbed.
"""

from __future__ import annotations

import pytest


def _kinds(issues):
    return [i.kind for i in issues]


class TestValidateMatrixMap:
    def test_clean_map_has_no_issues(self, corne_matrix_map):
        from splitmap.core.matrix import validate_matrix_map

        assert validate_matrix_map(corne_matrix_map, rows=8, cols=6, expected_keys=42) == []

    def test_reports_malformed_token(self):
        from splitmap.core.matrix import IssueKind, validate_matrix_map

        issues = validate_matrix_map("(0,0,L) (invalid) (1,1,R)", rows=2, cols=2)

        assert _kinds(issues) == [IssueKind.MALFORMED_TOKEN]
        assert issues[0].index == 1
        assert "invalid" in issues[0].message

    def test_reports_capacity_truncation(self):
        from splitmap.core.matrix import IssueKind, validate_matrix_map

        text = "(0,0,L) (0,1,L) (0,2,L) (0,3,L) (0,4,L) (0,5,L)"
        issues = validate_matrix_map(text, rows=1, cols=6, capacity=4)

        assert _kinds(issues) == [IssueKind.CAPACITY_TRUNCATED]

    def test_reports_count_mismatch(self):
        from splitmap.core.matrix import IssueKind, validate_matrix_map

        issues = validate_matrix_map("(0,0,L) (0,1,L)", rows=1, cols=2, expected_keys=3)

        assert _kinds(issues) == [IssueKind.TOKEN_COUNT_MISMATCH]

    def test_reports_out_of_range_and_duplicates(self):
        from splitmap.core.matrix import IssueKind, validate_matrix_map

        issues = validate_matrix_map("(0,0,L) (0,0,R) (3,0,L)", rows=2, cols=2)

        assert _kinds(issues) == [IssueKind.DUPLICATE_COORDINATE, IssueKind.COORDINATE_OUT_OF_RANGE]
        assert issues[0].index == 1
        assert issues[1].coordinate is not None and issues[1].coordinate.cell == (3, 0)

    def test_validation_does_not_change_engine_output(self):
        """Projection of a map with issues is the same whether or not it was validated."""
        from splitmap.core.matrix import parse_coordinates, project, validate_matrix_map

        text = "(0,0,L) (bad) (0,0,R) (9,9,L)"
        before = project(parse_coordinates(text), [["A", "B", "C"]], rows=1, cols=1)
        validate_matrix_map(text, rows=1, cols=1, expected_keys=5)
        after = project(parse_coordinates(text), [["A", "B", "C"]], rows=1, cols=1)

        assert before == after == ((("B",),),)


class TestValidateKeymap:
    def test_reports_layer_length_mismatch(self):
        from splitmap.core.matrix import IssueKind, parse_coordinates, validate_keymap

        coords = parse_coordinates("(0,0,L) (0,1,L)")
        issues = validate_keymap(coords, [["A", "B"], ["A"]], rows=1, cols=2)

        assert _kinds(issues) == [IssueKind.LAYER_LENGTH_MISMATCH]
        assert issues[0].index == 1


class TestCheckHelpers:
    def test_check_matrix_map_raises_with_issues(self):
        from splitmap.core.matrix import IssueKind, MatrixMapError, check_matrix_map

        with pytest.raises(MatrixMapError) as excinfo:
            check_matrix_map("(0,0,L) (5,5,R)", rows=2, cols=2, expected_keys=2)

        assert [i.kind for i in excinfo.value.issues] == [IssueKind.COORDINATE_OUT_OF_RANGE]
        assert isinstance(excinfo.value, ValueError)

    def test_check_keymap_passes_when_clean(self):
        from splitmap.core.matrix import check_keymap, parse_coordinates

        coords = parse_coordinates("(0,0,L) (0,1,R)")
        check_keymap(coords, [["A", "B"]], rows=1, cols=2)
