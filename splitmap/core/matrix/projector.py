"""Project a physically ordered keymap onto the electrical scan matrix.

The physical keymap is authored in reading order, one flat list of actions
per layer. Index ``i`` of every layer belongs to ``coordinates[i]``; the
projector writes that action to ``(row, col)`` of the electrical grid.

Bad data never raises here: coordinates outside the grid, slots beyond the
end of a layer and unfilled slots are skipped. Use
``splitmap.core.matrix.validation`` to find out about them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .types import (
    NO_OP,
    Action,
    ActionGrid,
    Coordinate,
    CoordinateLike,
    ElectricalKeymap,
    as_coordinate,
)


def _placements(
    coordinates: Iterable[CoordinateLike],
    *,
    rows: int,
    cols: int,
    skip_zero_gaps: bool,
) -> List[tuple[int, Coordinate]]:
    """Return (sequence index, coordinate) pairs that land inside the grid."""

    out: List[tuple[int, Coordinate]] = []
    for idx, raw in enumerate(coordinates):
        coord = as_coordinate(raw)
        if coord is None:
            continue
        if skip_zero_gaps and idx > 0 and coord.row == 0 and coord.col == 0:
            continue
        if not (0 <= coord.row < rows and 0 <= coord.col < cols):
            continue
        out.append((idx, coord))
    return out


def _empty_grid(rows: int, cols: int, fill: Action) -> List[List[Action]]:
    return [[fill] * cols for _ in range(rows)]


def _freeze(grid: List[List[Action]]) -> ActionGrid:
    return tuple(tuple(row) for row in grid)


def project_layer(
    coordinates: Iterable[CoordinateLike],
    actions: Sequence[Action],
    *,
    rows: int,
    cols: int,
    no_op: Action = NO_OP,
    skip_zero_gaps: bool = False,
) -> ActionGrid:
    """Project one layer. See `project` for the rules."""

    return project(
        coordinates,
        [actions],
        rows=rows,
        cols=cols,
        no_op=no_op,
        skip_zero_gaps=skip_zero_gaps,
    )[0]


def project(
    coordinates: Iterable[CoordinateLike],
    physical_keymap: Sequence[Sequence[Action]],
    *,
    rows: int,
    cols: int,
    no_op: Action = NO_OP,
    skip_zero_gaps: bool = False,
) -> ElectricalKeymap:
    """Build the electrical keymap, one ``rows x cols`` grid per layer.

    Every cell starts as *no_op*. Later sequence indices overwrite earlier
    ones that share a cell. With *skip_zero_gaps* a ``(0, 0)`` coordinate at
    a non-zero index is treated as an unfilled slot, matching zero-padded
    fixed-size coordinate arrays; a real key wired to ``(0, 0)`` at such an
    index is dropped in that mode.
    """

    rows, cols = max(0, int(rows)), max(0, int(cols))
    placements = _placements(coordinates, rows=rows, cols=cols, skip_zero_gaps=skip_zero_gaps)

    layers: List[ActionGrid] = []
    for actions in physical_keymap:
        grid = _empty_grid(rows, cols, no_op)
        n = len(actions)
        for idx, coord in placements:
            if idx >= n:
                continue
            grid[coord.row][coord.col] = actions[idx]
        layers.append(_freeze(grid))
    return tuple(layers)


def unproject(
    coordinates: Iterable[CoordinateLike],
    electrical_keymap: Sequence[Sequence[Sequence[Action]]],
    *,
    no_op: Action = NO_OP,
) -> tuple[tuple[Action, ...], ...]:
    """Read an electrical keymap back in physical order.

    Returns one flat tuple per layer with one entry per coordinate. Slots
    whose coordinate is missing or outside the grid read as *no_op*.
    """

    coords: List[Optional[Coordinate]] = [as_coordinate(c) for c in coordinates]
    layers: List[tuple[Action, ...]] = []
    for grid in electrical_keymap:
        out: List[Action] = []
        for coord in coords:
            value = no_op
            if coord is not None and 0 <= coord.row < len(grid):
                row = grid[coord.row]
                if 0 <= coord.col < len(row):
                    value = row[coord.col]
            out.append(value)
        layers.append(tuple(out))
    return tuple(layers)


__all__ = ["project", "project_layer", "unproject"]
