"""Cell coordinates and face-direction helpers for volumes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

Face = Tuple[int, int, int]

# Order matches the block_*_visible queries on SparseVolume.
FACE_NAMES: Dict[str, Face] = {
    "left": (-1, 0, 0),
    "right": (1, 0, 0),
    "above": (0, 1, 0),
    "below": (0, -1, 0),
    "front": (0, 0, 1),
    "back": (0, 0, -1),
}

FACE_DIRECTIONS: Tuple[Face, ...] = tuple(FACE_NAMES.values())


@dataclass(frozen=True, order=True)
class PositionKey:
    """Hashable cell coordinate, ordered lexicographically by (x, y, z).

    Any integer triple is a valid key; range policy belongs to the volume.
    """

    x: int
    y: int
    z: int


def neighbors(x: int, y: int, z: int) -> Iterator[Face]:
    """Cells sharing a face with ``(x, y, z)``, in ``FACE_NAMES`` order.

    No bounds are applied, so border cells yield coordinates outside the cube.
    """
    for dx, dy, dz in FACE_DIRECTIONS:
        yield x + dx, y + dy, z + dz


def clamp_axis(value: int, size: int) -> int:
    """Clamp one coordinate into ``[0, size - 1]``.

    Writes are never rejected for being outside the cube; they land on the
    nearest border cell instead.
    """
    if value >= size:
        return size - 1
    if value < 0:
        return 0
    return value
