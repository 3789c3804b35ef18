"""Coordinate grammar parser.

A matrix map is free-form text holding ``(row, col, hand)`` tokens, usually
laid out to look like the physical board::

    (0,0, L) (0,1, L) (0,2, L)        (4,2, R) (4,1, R) (4,0, R)
                      (3,2, L)        (7,2, R)

Anything outside parentheses is decoration. Parsing is lenient: malformed
tokens are dropped and tokens past the capacity are ignored, without errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .types import MAX_COORDS, MAX_INDEX, Coordinate, CoordinateSequence, Hand


@dataclass(frozen=True)
class Token:
    """One parenthesized payload as found in the source text."""

    payload: str
    offset: int  # index of the opening "("
    coordinate: Optional[Coordinate]

    @property
    def is_valid(self) -> bool:
        return self.coordinate is not None


def _parse_index(field: str) -> Optional[int]:
    field = field.strip()
    if not field or not field.isascii() or not field.isdigit():
        return None
    value = int(field)
    if value > MAX_INDEX:
        return None
    return value


def parse_coordinate_token(payload: str) -> Optional[Coordinate]:
    """Parse the inside of one ``(...)`` token, or return None if malformed."""

    parts = payload.split(",")
    if len(parts) != 3:
        return None

    row = _parse_index(parts[0])
    col = _parse_index(parts[1])
    if row is None or col is None:
        return None

    return Coordinate(row=row, col=col, hand=Hand.from_label(parts[2].strip()))


def _iter_payloads(text: str) -> Iterator[tuple[int, str]]:
    i = 0
    n = len(text)
    while i < n:
        if text[i] != "(":
            i += 1
            continue
        j = text.find(")", i + 1)
        if j < 0:
            # Unclosed "(": skip it and keep scanning.
            i += 1
            continue
        yield i, text[i + 1 : j]
        i = j + 1


def scan_tokens(text: str) -> List[Token]:
    """Return every parenthesized payload in *text*, valid or not."""

    return [
        Token(payload=payload, offset=offset, coordinate=parse_coordinate_token(payload))
        for offset, payload in _iter_payloads(text or "")
    ]


def parse_coordinates(text: str, *, capacity: int = MAX_COORDS) -> CoordinateSequence:
    """Lower a matrix-map string to coordinates in declaration order.

    At most *capacity* coordinates are kept; scanning stops once the sequence
    is full.
    """

    capacity = max(0, int(capacity))
    out: List[Coordinate] = []
    if capacity == 0:
        return CoordinateSequence(out, capacity=capacity)

    for _offset, payload in _iter_payloads(text or ""):
        coord = parse_coordinate_token(payload)
        if coord is None:
            continue
        out.append(coord)
        if len(out) >= capacity:
            break

    return CoordinateSequence(out, capacity=capacity)


__all__ = [
    "Token",
    "parse_coordinate_token",
    "parse_coordinates",
    "scan_tokens",
]
