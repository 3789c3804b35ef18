"""Matrix-map engine: grammar parser, projector and hand annotator.

Preview rendering (Pillow) lives in `splitmap.core.matrix.preview` and is not
imported here.
"""

from __future__ import annotations

from .annotator import annotate, hand_counts
from .formatting import format_grid, format_hand_map, format_matrix_map
from .parser import Token, parse_coordinate_token, parse_coordinates, scan_tokens
from .projector import project, project_layer, unproject
from .types import (
    MAX_COORDS,
    NO_OP,
    Coordinate,
    CoordinateSequence,
    ElectricalKeymap,
    Hand,
    HandMap,
)
from .validation import (
    Issue,
    IssueKind,
    MatrixMapError,
    check_keymap,
    check_matrix_map,
    validate_keymap,
    validate_matrix_map,
)


__all__ = [
    "MAX_COORDS",
    "NO_OP",
    "Coordinate",
    "CoordinateSequence",
    "ElectricalKeymap",
    "Hand",
    "HandMap",
    "Issue",
    "IssueKind",
    "MatrixMapError",
    "Token",
    "annotate",
    "check_keymap",
    "check_matrix_map",
    "format_grid",
    "format_hand_map",
    "format_matrix_map",
    "hand_counts",
    "parse_coordinate_token",
    "parse_coordinates",
    "project",
    "project_layer",
    "scan_tokens",
    "unproject",
    "validate_keymap",
    "validate_matrix_map",
]
