"""Keyboard profile data model.

A profile is everything needed to build one keyboard's keymap: the matrix
dimensions, the matrix-map text, and the physically ordered layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from splitmap.core.matrix.types import (
    MAX_COORDS,
    Action,
    ActionGrid,
    CoordinateSequence,
    ElectricalKeymap,
    Hand,
    HandMap,
)
from splitmap.core.matrix.validation import Issue


@dataclass(frozen=True)
class Layer:
    name: str
    keys: tuple[Action, ...]


@dataclass(frozen=True)
class KeyboardProfile:
    name: str
    rows: int
    cols: int
    matrix_map: str
    layers: tuple[Layer, ...]
    # Expected number of physical keys; None skips the count check.
    keys: Optional[int] = None
    capacity: int = MAX_COORDS
    description: str = ""

    @property
    def num_layers(self) -> int:
        return len(self.layers)

    @property
    def physical_keymap(self) -> tuple[tuple[Action, ...], ...]:
        return tuple(layer.keys for layer in self.layers)

    def layer_index(self, layer: Union[int, str]) -> Optional[int]:
        """Resolve a layer by index or (case-insensitive) name."""

        if isinstance(layer, int):
            return layer if 0 <= layer < len(self.layers) else None
        text = str(layer).strip()
        if text.isdigit():
            return self.layer_index(int(text))
        for idx, item in enumerate(self.layers):
            if item.name.lower() == text.lower():
                return idx
        return None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "rows": self.rows,
            "cols": self.cols,
            "capacity": self.capacity,
            "matrix_map": self.matrix_map,
            "layers": [{"name": layer.name, "keys": list(layer.keys)} for layer in self.layers],
        }
        if self.keys is not None:
            out["keys"] = self.keys
        return out


@dataclass(frozen=True)
class CompiledKeymap:
    """Everything derived from one profile. Built once, never mutated."""

    profile: KeyboardProfile
    coordinates: CoordinateSequence
    electrical: ElectricalKeymap
    hands: HandMap
    issues: tuple[Issue, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.issues

    def layer(self, layer: Union[int, str]) -> Optional[ActionGrid]:
        idx = self.profile.layer_index(layer)
        if idx is None or idx >= len(self.electrical):
            return None
        return self.electrical[idx]

    def to_dict(self) -> dict[str, Any]:
        """Export shape: electrical grids per layer plus the hand map."""

        return {
            "name": self.profile.name,
            "rows": self.profile.rows,
            "cols": self.profile.cols,
            "layers": [
                {"name": layer.name, "rows": [list(row) for row in grid]}
                for layer, grid in zip(self.profile.layers, self.electrical)
            ],
            "hands": [[hand.label for hand in row] for row in self.hands],
        }

    def hand_at(self, row: int, col: int) -> Hand:
        if 0 <= row < len(self.hands) and 0 <= col < len(self.hands[row]):
            return self.hands[row][col]
        return Hand.UNKNOWN
