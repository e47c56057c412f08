"""Sparse storage for one cubic chunk of voxels.

A volume is in one of two states: *full*, where every cell of the cube is
solid and nothing is stored per cell, or *sparse*, where a dict maps each
solid cell's :class:`PositionKey` to its block tag and absent keys are empty.

Coordinates are handled permissively. Writes through :meth:`SparseVolume.set`
are clamped onto the cube; reads are looked up literally, so a coordinate
outside the cube reads as empty unless the whole volume is full. The
visibility queries rely on this to peek one cell past the border.
"""
from __future__ import annotations

import operator
from typing import Dict, Iterator, Optional, Tuple

from engine import config
from world.position import FACE_NAMES, PositionKey, clamp_axis, neighbors

# Tag reported for every cell of a full volume, and written by uncompress().
FILL_TAG = 1
MAX_TAG = 255

DEFAULT_SIZE = 16


def _check_tag(value: int) -> int:
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"block tag must be an integer, got {value!r}") from None
    if not 0 <= value <= MAX_TAG:
        raise ValueError(f"block tag must be in 0..{MAX_TAG}, got {value}")
    return value


class SparseVolume:
    """Cube of ``size ** 3`` cells holding byte tags, stored sparsely."""

    __slots__ = ("_size", "_cells", "_compressed_arb", "_modified")

    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            size = config.get("volume.default_size", DEFAULT_SIZE)
        size = int(size)
        if size <= 0:
            raise ValueError("volume size must be positive")

        self._size = size
        # None while full; otherwise solid cells only.
        self._cells: Optional[Dict[PositionKey, int]] = {}
        self._compressed_arb = False
        self._modified = False

    def __repr__(self) -> str:
        state = "full" if self._cells is None else "sparse"
        return (
            f"SparseVolume(size={self._size}, state={state}, "
            f"solid={self.solid_count()}, modified={self._modified})"
        )

    def __len__(self) -> int:
        return self.solid_count()

    # State ----------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def compressed_full(self) -> bool:
        return self._cells is None

    @property
    def compressed_arb(self) -> bool:
        # Reserved for an arbitrary-content encoding; never set.
        return self._compressed_arb

    def fill(self) -> None:
        """Make every cell solid without storing any of them."""
        cells = self._cells
        if cells is not None and (
            len(cells) != self._size ** 3
            or any(tag != FILL_TAG for tag in cells.values())
        ):
            self._modified = True
        self._cells = None

    def empty(self) -> None:
        if not self.is_empty():
            self._modified = True
        self._cells = {}

    def uncompress(self) -> None:
        """Expand a full volume into explicit ``FILL_TAG`` cells.

        Costs ``size ** 3`` entries and marks the volume modified, since
        every cell is written. Does nothing on a sparse volume.
        """
        if self._cells is not None:
            return
        size = self._size
        self._cells = {
            PositionKey(x, y, z): FILL_TAG
            for x in range(size)
            for y in range(size)
            for z in range(size)
        }
        self._modified = True

    def is_full(self) -> bool:
        return self._cells is None or len(self._cells) == self._size ** 3

    def is_empty(self) -> bool:
        return self._cells is not None and not self._cells

    def is_compressed(self) -> bool:
        return self._cells is None or self._compressed_arb

    def is_modified(self) -> bool:
        return self._modified

    def clear_modified_state(self) -> None:
        self._modified = False

    def solid_count(self) -> int:
        if self._cells is None:
            return self._size ** 3
        return len(self._cells)

    # Point access ---------------------------------------------------------
    def is_solid(self, x: int, y: int, z: int) -> bool:
        if self._cells is None:
            return True
        return PositionKey(x, y, z) in self._cells

    def get(self, x: int, y: int, z: int) -> int:
        if self._cells is None:
            return FILL_TAG
        return self._cells.get(PositionKey(x, y, z), 0)

    def set(self, x: int, y: int, z: int, value: int) -> None:
        """Write one cell, clamping the coordinate onto the cube.

        A non-zero ``value`` stores that tag, a zero clears the cell. The
        modified flag is raised only when the cell actually changes. A full
        volume is uncompressed first unless the write would be a no-op.
        """
        value = _check_tag(value)
        size = self._size
        key = PositionKey(clamp_axis(x, size), clamp_axis(y, size), clamp_axis(z, size))

        if self._cells is None:
            if value == FILL_TAG:
                return
            self.uncompress()
        cells = self._cells

        if value > 0:
            if cells.get(key) != value:
                cells[key] = value
                self._modified = True
        elif key in cells:
            del cells[key]
            self._modified = True

    def y_range_set(self, x: int, y0: int, y1: int, z: int, value: int) -> bool:
        """Write a vertical run of cells in column ``(x, z)``.

        Requires ``0 <= y0 <= y1 < size``; otherwise reports the problem and
        returns False without touching the volume. A non-zero ``value`` is
        written to every ``y`` in ``[y0, y1]``, while a zero clears ``[y0, y1)``
        only. ``x`` and ``z`` are used as given. Always marks the volume
        modified on success.
        """
        value = _check_tag(value)
        if y0 > y1 or y0 < 0 or y1 >= self._size:
            self._report_range_error(x, y0, y1, z)
            return False

        if self._cells is None:
            self.uncompress()
        cells = self._cells

        if value == 0:
            for y in range(y0, y1):
                cells.pop(PositionKey(x, y, z), None)
        else:
            for y in range(y0, y1 + 1):
                cells[PositionKey(x, y, z)] = value
        self._modified = True
        return True

    def _report_range_error(self, x: int, y0: int, y1: int, z: int) -> None:
        if config.get("volume.report_range_errors", True):
            print(
                f"[volume] y_range_set needs 0 <= y0 <= y1 < {self._size} "
                f"(got x={x} y0={y0} y1={y1} z={z})"
            )

    def iter_cells(self) -> Iterator[Tuple[int, int, int, int]]:
        """Yield ``(x, y, z, tag)`` for each solid cell in key order."""
        if self._cells is None:
            size = self._size
            for x in range(size):
                for y in range(size):
                    for z in range(size):
                        yield x, y, z, FILL_TAG
            return
        for key in sorted(self._cells):
            yield key.x, key.y, key.z, self._cells[key]

    # Border queries -------------------------------------------------------
    def _plane_full(self, axis: int, index: int) -> bool:
        cells = self._cells
        if cells is None:
            return True
        size = self._size
        for a in range(size):
            for b in range(size):
                if axis == 0:
                    key = PositionKey(index, a, b)
                elif axis == 1:
                    key = PositionKey(a, index, b)
                else:
                    key = PositionKey(a, b, index)
                if key not in cells:
                    return False
        return True

    def top_border_full(self) -> bool:
        return self._plane_full(1, self._size - 1)

    def bottom_border_full(self) -> bool:
        return self._plane_full(1, 0)

    def left_border_full(self) -> bool:
        return self._plane_full(0, 0)

    def right_border_full(self) -> bool:
        return self._plane_full(0, self._size - 1)

    def front_border_full(self) -> bool:
        return self._plane_full(2, self._size - 1)

    def back_border_full(self) -> bool:
        return self._plane_full(2, 0)

    # Face visibility ------------------------------------------------------
    # Neighbours are not range checked: past the border they read as empty,
    # or as solid when the volume is full.
    def block_left_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x - 1, y, z)

    def block_right_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x + 1, y, z)

    def block_above_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x, y + 1, z)

    def block_below_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x, y - 1, z)

    def block_front_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x, y, z + 1)

    def block_back_visible(self, x: int, y: int, z: int) -> bool:
        return not self.is_solid(x, y, z - 1)

    def face_visible(self, x: int, y: int, z: int, face: str) -> bool:
        try:
            dx, dy, dz = FACE_NAMES[face]
        except KeyError:
            raise ValueError(f"unknown face {face!r}") from None
        return not self.is_solid(x + dx, y + dy, z + dz)

    def visible_faces(self, x: int, y: int, z: int) -> Tuple[str, ...]:
        """Names of the faces of ``(x, y, z)`` whose neighbour is not solid."""
        return tuple(
            name
            for name, (nx, ny, nz) in zip(FACE_NAMES, neighbors(x, y, z))
            if not self.is_solid(nx, ny, nz)
        )
