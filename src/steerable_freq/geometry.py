from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple
import numpy as np
from .params import ParameterSet


@dataclass(frozen=True)
class GridGeometry:
    """Addressable extent and physical metadata of the output grid.

    Unpacks as ``extent, spacing, origin, direction``. Every field is a tuple,
    so geometries compare by value and hash.
    """

    extent: Tuple[int, ...]
    spacing: Tuple[float, ...]
    origin: Tuple[float, ...]
    direction: Tuple[Tuple[float, ...], ...]

    def __iter__(self) -> Iterator:
        return iter((self.extent, self.spacing, self.origin, self.direction))

    @property
    def dimension(self) -> int:
        return len(self.extent)

    @property
    def num_cells(self) -> int:
        return int(np.prod(self.extent, dtype=np.int64))

    @property
    def direction_matrix(self) -> np.ndarray:
        return np.array(self.direction, dtype=float)

    def index_to_physical(self, index: Sequence[int]) -> np.ndarray:
        """Map a grid index to its physical point ``origin + D @ (index * spacing)``."""
        scaled = np.asarray(index, dtype=float) * np.asarray(self.spacing)
        return np.asarray(self.origin) + self.direction_matrix @ scaled


def resolve_geometry(params: ParameterSet) -> GridGeometry:
    """Return the output extent ``[0, size)`` and the grid's physical metadata.

    Spacing, origin and direction are propagated unchanged from ``params``.
    """
    return GridGeometry(
        extent=tuple(params.size),
        spacing=tuple(params.spacing),
        origin=tuple(params.origin),
        direction=tuple(tuple(row) for row in params.direction.tolist()),
    )


def allocate_buffer(geometry: GridGeometry, dtype=np.float32) -> np.ndarray:
    """Return a zero-filled output buffer shaped like ``geometry.extent``.

    Parameters
    ----------
    geometry : GridGeometry
        Resolved geometry of the output grid.
    dtype : numpy dtype, optional
        Scalar type of the buffer. Default is ``float32``.

    Returns
    -------
    np.ndarray
        Array of shape ``geometry.extent``.
    """
    if not all(e > 0 for e in geometry.extent):
        raise ValueError("Every grid extent must be a positive integer.")
    return np.zeros(geometry.extent, dtype=dtype)
