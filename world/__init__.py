"""Voxel chunk storage."""
from .position import FACE_DIRECTIONS, FACE_NAMES, PositionKey, clamp_axis, neighbors
from .small_volume import FILL_TAG, SparseVolume

__all__ = [
    "FACE_DIRECTIONS",
    "FACE_NAMES",
    "FILL_TAG",
    "PositionKey",
    "SparseVolume",
    "clamp_axis",
    "neighbors",
]
