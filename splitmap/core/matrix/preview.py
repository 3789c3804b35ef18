from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from PIL import Image, ImageDraw

from .types import Action, Hand, HandMap


_CELL = 48
_GAP = 6
_MARGIN = 12

HAND_COLORS: dict[Hand, tuple[int, int, int]] = {
    Hand.LEFT: (70, 130, 200),
    Hand.RIGHT: (220, 120, 50),
    Hand.UNKNOWN: (60, 60, 60),
}

_BACKGROUND = (24, 24, 24)
_TEXT = (240, 240, 240)


def _label(value: Action, *, max_len: int = 6) -> str:
    s = str(value)
    return s if len(s) <= max_len else s[: max_len - 1] + "~"


def render_matrix_preview(
    hand_map: HandMap,
    layer: Optional[Sequence[Sequence[Action]]] = None,
    *,
    no_op: Action = None,
) -> Image.Image:
    """Draw the scan matrix as colored cells, one per (row, col).

    Cells are tinted by hand. When *layer* is given its actions are written
    into the cells; cells holding *no_op* are left blank.
    """

    rows = len(hand_map)
    cols = max((len(r) for r in hand_map), default=0)
    width = _MARGIN * 2 + cols * _CELL + max(0, cols - 1) * _GAP
    height = _MARGIN * 2 + rows * _CELL + max(0, rows - 1) * _GAP

    img = Image.new("RGB", (max(1, width), max(1, height)), color=_BACKGROUND)
    draw = ImageDraw.Draw(img)

    for r, hand_row in enumerate(hand_map):
        for c, hand in enumerate(hand_row):
            x0 = _MARGIN + c * (_CELL + _GAP)
            y0 = _MARGIN + r * (_CELL + _GAP)
            draw.rectangle([x0, y0, x0 + _CELL - 1, y0 + _CELL - 1], fill=HAND_COLORS[hand])

            if layer is None or r >= len(layer) or c >= len(layer[r]):
                continue
            value = layer[r][c]
            if no_op is not None and value == no_op:
                continue
            draw.text((x0 + 4, y0 + _CELL // 2 - 6), _label(value), fill=_TEXT)

    return img


def save_matrix_preview(
    path: Path,
    hand_map: HandMap,
    layer: Optional[Sequence[Sequence[Action]]] = None,
    *,
    no_op: Action = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_matrix_preview(hand_map, layer, no_op=no_op).save(path, format="PNG")
    return path


__all__ = ["HAND_COLORS", "render_matrix_preview", "save_matrix_preview"]
