"""Plain-text rendering of matrix maps and grids (CLI and debug logging)."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .annotator import hand_counts
from .types import Action, Coordinate, CoordinateLike, Hand, HandMap, as_coordinate


_SIDE_CHUNK = 6
_EMPTY_SLOT = " " * 8


def _coords(coordinates: Iterable[CoordinateLike]) -> List[Coordinate]:
    return [c for c in (as_coordinate(raw) for raw in coordinates) if c is not None]


def _side_lines(coords: Sequence[Coordinate]) -> List[str]:
    lines: List[str] = []
    for start in range(0, len(coords), _SIDE_CHUNK):
        lines.append(" ".join(str(c) for c in coords[start : start + _SIDE_CHUNK]))
    return lines


def format_matrix_map(coordinates: Iterable[CoordinateLike]) -> str:
    """Summarize parsed coordinates: totals, per-side lists and a sketch.

    The sketch draws left-hand cells in column order and right-hand cells
    mirrored, which is how split boards are usually wired.
    """

    coords = _coords(coordinates)
    counts = hand_counts(coords)
    left = [c for c in coords if c.hand is Hand.LEFT]
    right = [c for c in coords if c.hand is Hand.RIGHT]

    out: List[str] = [f"Total positions: {len(coords)}", ""]
    out.append(f"Left side positions ({counts[Hand.LEFT]}):")
    out.extend(_side_lines(left))
    out.append("")
    out.append(f"Right side positions ({counts[Hand.RIGHT]}):")
    out.extend(_side_lines(right))

    if coords:
        max_row = max(c.row for c in coords)
        max_col = max(c.col for c in coords)
        by_side = {(c.row, c.col, c.hand) for c in coords}
        out.append("")
        out.append("Matrix layout:")
        for row in range(max_row + 1):
            cells: List[str] = []
            for col in range(max_col + 1):
                key = (row, col, Hand.LEFT)
                cells.append(f"({row},{col},L)" if key in by_side else _EMPTY_SLOT)
            cells.append("  ")
            for col in range(max_col, -1, -1):
                key = (row, col, Hand.RIGHT)
                cells.append(f"({row},{col},R)" if key in by_side else _EMPTY_SLOT)
            out.append(" ".join(cells).rstrip())

    return "\n".join(out)


def format_grid(grid: Sequence[Sequence[Action]]) -> str:
    """Render a 2-D grid as aligned columns, one matrix row per line."""

    text = [[str(v.label if isinstance(v, Hand) else v) for v in row] for row in grid]
    if not text:
        return ""
    widths = [0] * max((len(r) for r in text), default=0)
    for row in text:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    lines = []
    for row_idx, row in enumerate(text):
        body = "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
        lines.append(f"{row_idx:>2} | {body}")
    return "\n".join(lines)


def format_hand_map(hand_map: HandMap) -> str:
    return format_grid(hand_map)


__all__ = ["format_grid", "format_hand_map", "format_matrix_map"]
