"""Rectangle packing — boxes in, positions + enclosing atlas size out.

The strategy is replaceable; any deterministic strategy is acceptable as long
as the result passes validate_placements().
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from svgsprite.engine.errors import PackingInvariantViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Box:
    width: float
    height: float


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class PackResult:
    positions: list[Position]
    width: float = 0.0
    height: float = 0.0
    # Share of the atlas area covered by boxes
    fill: float = 0.0


class PackingStrategy(Protocol):
    def pack(self, boxes: Sequence[Box]) -> PackResult: ...


@dataclass
class _FreeSpace:
    x: float
    y: float
    width: float
    height: float


class GuillotinePacker:
    """Free-space splitting packer (the potpack heuristic).

    Boxes are visited tallest first (stable for equal heights). Each box goes
    into the most recently created free space that fits; the space is then
    split into what remains to its right and below it. The initial space is
    as wide as a square of the total area at ~95% fill and unbounded in height.
    """

    def __init__(self, target_fill: float = 0.95) -> None:
        self.target_fill = target_fill

    def pack(self, boxes: Sequence[Box]) -> PackResult:
        if not boxes:
            return PackResult(positions=[])

        area = sum(b.width * b.height for b in boxes)
        max_width = max(b.width for b in boxes)
        start_width = max(math.ceil(math.sqrt(area / self.target_fill)), max_width)

        spaces = [_FreeSpace(0.0, 0.0, start_width, math.inf)]
        positions: list[Position | None] = [None] * len(boxes)
        width = height = 0.0

        for index in sorted(range(len(boxes)), key=lambda i: -boxes[i].height):
            box = boxes[index]
            for s in range(len(spaces) - 1, -1, -1):
                space = spaces[s]
                if box.width > space.width or box.height > space.height:
                    continue

                positions[index] = Position(space.x, space.y)
                width = max(width, space.x + box.width)
                height = max(height, space.y + box.height)

                if box.width == space.width and box.height == space.height:
                    last = spaces.pop()
                    if s < len(spaces):
                        spaces[s] = last
                elif box.height == space.height:
                    space.x += box.width
                    space.width -= box.width
                elif box.width == space.width:
                    space.y += box.height
                    space.height -= box.height
                else:
                    spaces.append(
                        _FreeSpace(space.x + box.width, space.y, space.width - box.width, box.height)
                    )
                    space.y += box.height
                    space.height -= box.height
                break

        return PackResult(
            positions=[p for p in positions if p is not None],
            width=width,
            height=height,
            fill=area / (width * height),
        )


class ShelfPacker:
    """Input-order shelf packer: rows left to right, a new row when one is full."""

    def pack(self, boxes: Sequence[Box]) -> PackResult:
        if not boxes:
            return PackResult(positions=[])

        area = sum(b.width * b.height for b in boxes)
        shelf_width = max(math.ceil(math.sqrt(area)), max(b.width for b in boxes))

        positions: list[Position] = []
        x = y = shelf_height = 0.0
        width = 0.0
        for box in boxes:
            if x > 0 and x + box.width > shelf_width:
                y += shelf_height
                x = shelf_height = 0.0
            positions.append(Position(x, y))
            x += box.width
            width = max(width, x)
            shelf_height = max(shelf_height, box.height)

        height = y + shelf_height
        return PackResult(positions=positions, width=width, height=height, fill=area / (width * height))


def validate_placements(boxes: Sequence[Box], result: PackResult) -> None:
    """Raise PackingInvariantViolation unless placements are disjoint and inside a tight atlas."""
    if len(result.positions) != len(boxes):
        raise PackingInvariantViolation(
            f"packer placed {len(result.positions)} of {len(boxes)} boxes"
        )
    if not boxes:
        if result.width != 0 or result.height != 0:
            raise PackingInvariantViolation("empty input must produce a 0×0 atlas")
        return

    lo = np.array([(p.x, p.y) for p in result.positions], dtype=np.float64)
    hi = lo + np.array([(b.width, b.height) for b in boxes], dtype=np.float64)
    size = np.array([result.width, result.height], dtype=np.float64)

    if (lo < 0).any() or (lo >= size).any() or (hi > size).any():
        bad = int(np.argmax(((lo < 0) | (lo >= size) | (hi > size)).any(axis=1)))
        raise PackingInvariantViolation(
            f"box {bad} at {tuple(lo[bad])} exceeds atlas {result.width}×{result.height}"
        )

    if not np.allclose(hi.max(axis=0), size):
        raise PackingInvariantViolation(
            f"atlas {result.width}×{result.height} is not the tight bound {tuple(hi.max(axis=0))}"
        )

    overlap = (
        (lo[:, None, 0] < hi[None, :, 0])
        & (lo[None, :, 0] < hi[:, None, 0])
        & (lo[:, None, 1] < hi[None, :, 1])
        & (lo[None, :, 1] < hi[:, None, 1])
    )
    np.fill_diagonal(overlap, False)
    if overlap.any():
        i, j = np.argwhere(overlap)[0]
        raise PackingInvariantViolation(f"boxes {int(i)} and {int(j)} overlap")


def pack(boxes: Sequence[Box], strategy: PackingStrategy | None = None) -> PackResult:
    """Pack boxes with the given strategy (GuillotinePacker by default) and verify the result."""
    strategy = strategy or GuillotinePacker()
    result = strategy.pack(boxes)
    validate_placements(boxes, result)
    logger.debug(
        "Packed %d boxes into %s×%s with %s (fill %.2f)",
        len(boxes),
        result.width,
        result.height,
        type(strategy).__name__,
        result.fill,
    )
    return result
