"""Per-cell hand ownership derived from the same coordinates as the keymap."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .types import CoordinateLike, Hand, HandMap, as_coordinate


def annotate(coordinates: Iterable[CoordinateLike], *, rows: int, cols: int) -> HandMap:
    """Return a ``rows x cols`` grid of Hand values.

    Cells no coordinate touches stay UNKNOWN. Duplicates: last one wins.
    Coordinates outside the grid are skipped.
    """

    rows, cols = max(0, int(rows)), max(0, int(cols))
    grid: List[List[Hand]] = [[Hand.UNKNOWN] * cols for _ in range(rows)]
    for raw in coordinates:
        coord = as_coordinate(raw)
        if coord is None:
            continue
        if 0 <= coord.row < rows and 0 <= coord.col < cols:
            grid[coord.row][coord.col] = coord.hand
    return tuple(tuple(r) for r in grid)


def hand_counts(coordinates: Iterable[CoordinateLike]) -> Dict[Hand, int]:
    counts = {hand: 0 for hand in Hand}
    for raw in coordinates:
        coord = as_coordinate(raw)
        if coord is not None:
            counts[coord.hand] += 1
    return counts


__all__ = ["annotate", "hand_counts"]
