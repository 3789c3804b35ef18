"""Value types shared by the matrix-map parser, projector and annotator.

Everything here is immutable. Grids are tuples of tuples indexed as
``grid[row][col]``; keymaps add a leading layer index.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterator, Optional, Sequence, Tuple, Union, overload


# Largest key count any bundled profile declares (Corne: 6x3 + 3 thumbs per side).
MAX_COORDS = 42

# Matrix indices are 8-bit on the scanning side.
MAX_INDEX = 255

# Action written to every electrical cell no physical key maps to.
NO_OP = "No"

Action = Hashable
Cell = Tuple[int, int]


class Hand(Enum):
    LEFT = "L"
    RIGHT = "R"
    UNKNOWN = "U"

    @classmethod
    def from_label(cls, label: str) -> "Hand":
        """Map a grammar hand field to a Hand.

        Only the first character counts. Anything other than ``L``/``R``
        (including an empty field) falls back to LEFT.
        """

        first = (label or "")[:1]
        if first == "R":
            return cls.RIGHT
        return cls.LEFT

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int
    hand: Hand = Hand.LEFT

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col},{self.hand.label})"


# What the projector/annotator accept per slot: a Coordinate, a bare
# (row, col) / (row, col, hand) tuple, or None for an unfilled slot.
CoordinateLike = Union[Coordinate, Tuple[int, int], Tuple[int, int, object], None]


class CoordinateSequence(Sequence[Coordinate]):
    """Ordered coordinates with a fixed upper bound on length.

    Order is physical authoring order; index ``i`` lines up with
    ``physical_keymap[layer][i]``.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, items: Sequence[Coordinate] = (), *, capacity: int = MAX_COORDS):
        capacity = max(0, int(capacity))
        self._items: Tuple[Coordinate, ...] = tuple(items)[:capacity]
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    @overload
    def __getitem__(self, index: int) -> Coordinate: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Coordinate, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CoordinateSequence):
            return self._items == other._items
        if isinstance(other, (tuple, list)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"CoordinateSequence({list(self._items)!r}, capacity={self._capacity})"

    def slots(self) -> Tuple[Optional[Coordinate], ...]:
        """Return exactly ``capacity`` slots; unfilled ones are None."""

        return self._items + (None,) * (self._capacity - len(self._items))

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(c.cell for c in self._items)


ActionGrid = Tuple[Tuple[Action, ...], ...]
ElectricalKeymap = Tuple[ActionGrid, ...]
HandMap = Tuple[Tuple[Hand, ...], ...]


def as_coordinate(value: CoordinateLike) -> Optional[Coordinate]:
    """Normalize one projector/annotator slot.

    Returns None for unfilled slots and for values that do not look like a
    coordinate at all; callers skip those.
    """

    if value is None:
        return None
    if isinstance(value, Coordinate):
        return value
    try:
        row, col = int(value[0]), int(value[1])
    except (TypeError, ValueError, IndexError):
        return None
    hand = Hand.LEFT
    if len(value) > 2:
        raw = value[2]
        if isinstance(raw, Hand):
            hand = raw
        else:
            hand = Hand.from_label(str(raw))
    return Coordinate(row=row, col=col, hand=hand)


__all__ = [
    "MAX_COORDS",
    "MAX_INDEX",
    "NO_OP",
    "Action",
    "ActionGrid",
    "Cell",
    "Coordinate",
    "CoordinateLike",
    "CoordinateSequence",
    "ElectricalKeymap",
    "Hand",
    "HandMap",
    "as_coordinate",
]
