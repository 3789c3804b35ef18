"""Optional checks layered over the lenient parser and projector.

The engine itself absorbs bad input (drops, skips, truncates). These helpers
report what was absorbed so a build can refuse a broken profile. They never
change what the engine produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .parser import parse_coordinates, scan_tokens
from .types import MAX_COORDS, Action, Coordinate, CoordinateLike, as_coordinate


class IssueKind(Enum):
    MALFORMED_TOKEN = "malformed_token"
    CAPACITY_TRUNCATED = "capacity_truncated"
    TOKEN_COUNT_MISMATCH = "token_count_mismatch"
    COORDINATE_OUT_OF_RANGE = "coordinate_out_of_range"
    DUPLICATE_COORDINATE = "duplicate_coordinate"
    LAYER_LENGTH_MISMATCH = "layer_length_mismatch"


@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    message: str
    index: Optional[int] = None
    coordinate: Optional[Coordinate] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class MatrixMapError(ValueError):
    """Raised by the check_* helpers when validation found issues."""

    def __init__(self, issues: Sequence[Issue]):
        self.issues: tuple[Issue, ...] = tuple(issues)
        lines = [str(i) for i in self.issues]
        summary = f"{len(lines)} matrix map issue(s)"
        super().__init__(summary + (":\n  " + "\n  ".join(lines) if lines else ""))


def validate_coordinates(coordinates: Iterable[CoordinateLike], *, rows: int, cols: int) -> List[Issue]:
    """Report out-of-range and duplicate cells."""

    issues: List[Issue] = []
    seen: dict[tuple[int, int], int] = {}
    for idx, raw in enumerate(coordinates):
        coord = as_coordinate(raw)
        if coord is None:
            continue
        if not (0 <= coord.row < rows and 0 <= coord.col < cols):
            issues.append(
                Issue(
                    kind=IssueKind.COORDINATE_OUT_OF_RANGE,
                    message=f"key {idx} at {coord} is outside the {rows}x{cols} matrix",
                    index=idx,
                    coordinate=coord,
                )
            )
            continue
        first = seen.get(coord.cell)
        if first is not None:
            issues.append(
                Issue(
                    kind=IssueKind.DUPLICATE_COORDINATE,
                    message=f"key {idx} at {coord} overwrites key {first}",
                    index=idx,
                    coordinate=coord,
                )
            )
        seen[coord.cell] = idx
    return issues


def validate_matrix_map(
    text: str,
    *,
    rows: int,
    cols: int,
    expected_keys: Optional[int] = None,
    capacity: int = MAX_COORDS,
) -> List[Issue]:
    """Validate a matrix-map string against the matrix it is meant for."""

    issues: List[Issue] = []
    tokens = scan_tokens(text)

    valid = 0
    for ordinal, token in enumerate(tokens):
        if token.coordinate is None:
            issues.append(
                Issue(
                    kind=IssueKind.MALFORMED_TOKEN,
                    message=f"token #{ordinal} '({token.payload})' at offset {token.offset} was dropped",
                    index=ordinal,
                )
            )
        else:
            valid += 1

    if valid > capacity:
        issues.append(
            Issue(
                kind=IssueKind.CAPACITY_TRUNCATED,
                message=f"{valid} valid tokens but capacity is {capacity}; {valid - capacity} ignored",
            )
        )

    coordinates = parse_coordinates(text, capacity=capacity)
    issues.extend(validate_coordinates(coordinates, rows=rows, cols=cols))

    if expected_keys is not None and len(coordinates) != expected_keys:
        issues.append(
            Issue(
                kind=IssueKind.TOKEN_COUNT_MISMATCH,
                message=f"parsed {len(coordinates)} coordinates, expected {expected_keys}",
            )
        )
    return issues


def validate_keymap(
    coordinates: Sequence[CoordinateLike],
    physical_keymap: Sequence[Sequence[Action]],
    *,
    rows: int,
    cols: int,
) -> List[Issue]:
    """Check that every layer lines up with the coordinate sequence."""

    issues = validate_coordinates(coordinates, rows=rows, cols=cols)
    expected = len(coordinates)
    for layer_idx, actions in enumerate(physical_keymap):
        if len(actions) != expected:
            issues.append(
                Issue(
                    kind=IssueKind.LAYER_LENGTH_MISMATCH,
                    message=f"layer {layer_idx} has {len(actions)} actions for {expected} coordinates",
                    index=layer_idx,
                )
            )
    return issues


def check(issues: Sequence[Issue]) -> None:
    if issues:
        raise MatrixMapError(issues)


def check_matrix_map(
    text: str,
    *,
    rows: int,
    cols: int,
    expected_keys: Optional[int] = None,
    capacity: int = MAX_COORDS,
) -> None:
    check(validate_matrix_map(text, rows=rows, cols=cols, expected_keys=expected_keys, capacity=capacity))


def check_keymap(
    coordinates: Sequence[CoordinateLike],
    physical_keymap: Sequence[Sequence[Action]],
    *,
    rows: int,
    cols: int,
) -> None:
    check(validate_keymap(coordinates, physical_keymap, rows=rows, cols=cols))


__all__ = [
    "Issue",
    "IssueKind",
    "MatrixMapError",
    "check",
    "check_keymap",
    "check_matrix_map",
    "validate_coordinates",
    "validate_keymap",
    "validate_matrix_map",
]
