#!/usr/bin/env python3
"""Unit tests for the physical-to-electrical projector (core/matrix/projector.py)."""

from __future__ import annotations

import pytest


class TestProject:
    """project: placement, defaults and tolerance for bad data."""

    def test_worked_2x2_example(self):
        """Reading-order A..D lands row by row in a 2x2 grid."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (0,1,L) (1,0,L) (1,1,L)")
        electrical = project(coords, [["A", "B", "C", "D"]], rows=2, cols=2)

        assert electrical == ((("A", "B"), ("C", "D")),)

    def test_mirrored_right_hand_columns(self):
        """Right-hand keys declared left-to-right land in reversed columns."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (0,1,L)   (1,1,R) (1,0,R)")
        electrical = project(coords, [["Q", "W", "O", "P"]], rows=2, cols=2)

        assert electrical[0] == (("Q", "W"), ("P", "O"))

    def test_untouched_cells_hold_no_op(self):
        """Cells no coordinate addresses keep the sentinel."""
        from splitmap.core.matrix import NO_OP, parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (2,1,R)")
        grid = project(coords, [["A", "B"]], rows=3, cols=2)[0]

        assert grid == (("A", NO_OP), (NO_OP, NO_OP), (NO_OP, "B"))

    def test_custom_no_op_sentinel(self):
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(1,1,L)")
        grid = project(coords, [[1]], rows=2, cols=2, no_op=0)[0]

        assert grid == ((0, 0), (0, 1))

    def test_duplicate_cell_last_write_wins(self):
        """A later index sharing a cell overwrites the earlier one."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (0,1,L) (1,0,L) (1,1,L) (0,1,L) (0,0,L)")
        grid = project(coords, [["A", "x", "y", "z", "w", "B"]], rows=2, cols=2)[0]

        assert grid[0][0] == "B"
        assert grid[0][1] == "w"

    def test_zero_cell_at_nonzero_index_is_written_by_default(self):
        """(0,0) at a later index is a real key unless the legacy heuristic is on."""
        from splitmap.core.matrix import project

        coords = [(1, 1), (0, 0)]

        assert project(coords, [["A", "B"]], rows=2, cols=2)[0][0][0] == "B"
        legacy = project(coords, [["A", "B"]], rows=2, cols=2, skip_zero_gaps=True)
        assert legacy[0][0][0] == "No"

    def test_out_of_range_coordinates_are_ignored(self):
        """Coordinates outside rows x cols are skipped without error."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (5,0,L) (0,9,R) (1,1,R)")
        grid = project(coords, [["A", "B", "C", "D"]], rows=2, cols=2)[0]

        assert grid == (("A", "No"), ("No", "D"))

    def test_short_layer_skips_missing_indices(self):
        """Indices past the end of a layer are not written."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,0,L) (0,1,L) (1,0,L)")
        grid = project(coords, [["A"]], rows=2, cols=2)[0]

        assert grid == (("A", "No"), ("No", "No"))

    def test_none_slots_are_skipped(self):
        """Unfilled slots (None) never write anything."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,1,L)", capacity=3)
        grid = project(coords.slots(), [["A", "B", "C"]], rows=1, cols=2)[0]

        assert grid == (("No", "A"),)

    def test_one_grid_per_layer(self):
        """Every layer uses the same coordinates."""
        from splitmap.core.matrix import parse_coordinates, project

        coords = parse_coordinates("(0,1,L) (0,0,L)")
        electrical = project(coords, [["A", "B"], ["1", "2"], ["x", "y"]], rows=1, cols=2)

        assert electrical == ((("B", "A"),), (("2", "1"),), (("y", "x"),))

    def test_no_layers_gives_empty_keymap(self):
        from splitmap.core.matrix import parse_coordinates, project

        assert project(parse_coordinates("(0,0,L)"), [], rows=1, cols=1) == ()

    def test_is_deterministic(self, corne_matrix_map):
        from splitmap.core.matrix import parse_coordinates, project

        physical = [[f"k{i}" for i in range(42)]]
        first = project(parse_coordinates(corne_matrix_map), physical, rows=8, cols=6)
        second = project(parse_coordinates(corne_matrix_map), physical, rows=8, cols=6)

        assert first == second

    def test_result_is_immutable(self):
        from splitmap.core.matrix import project

        grid = project([(0, 0)], [["A"]], rows=1, cols=1)[0]

        with pytest.raises(TypeError):
            grid[0][0] = "B"  # type: ignore[index]

    def test_project_layer_matches_project(self):
        from splitmap.core.matrix import parse_coordinates, project, project_layer

        coords = parse_coordinates("(1,0,R) (0,0,L)")

        assert project_layer(coords, ["A", "B"], rows=2, cols=1) == project(coords, [["A", "B"]], rows=2, cols=1)[0]


class TestUnproject:
    """unproject: reading electrical cells back in physical order."""

    def test_round_trip_identity_on_corne(self, corne_matrix_map):
        """Project then read back reproduces every physical layer exactly."""
        from splitmap.core.matrix import parse_coordinates, project, unproject

        coords = parse_coordinates(corne_matrix_map)
        physical = (
            tuple(f"base{i}" for i in range(42)),
            tuple(f"sym{i}" for i in range(42)),
        )

        electrical = project(coords, physical, rows=8, cols=6)

        assert unproject(coords, electrical) == physical

    def test_out_of_range_reads_as_no_op(self):
        from splitmap.core.matrix import project, unproject

        coords = [(0, 0), (3, 3)]
        electrical = project(coords, [["A", "B"]], rows=1, cols=1)

        assert unproject(coords, electrical, no_op="-") == (("A", "-"),)

    def test_migrates_hand_written_electrical_table(self):
        """A legacy electrical table reads back into reading order."""
        from splitmap.core.matrix import parse_coordinates, unproject

        coords = parse_coordinates("(0,0,L) (0,1,L)   (1,1,R) (1,0,R)")
        legacy = [[["Q", "W"], ["P", "O"]]]

        assert unproject(coords, legacy) == (("Q", "W", "O", "P"),)
