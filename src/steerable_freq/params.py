from __future__ import annotations
import math
from typing import Callable, List, Sequence, Tuple
import numpy as np
from .constants import (
    DEFAULT_DIMENSION, DEFAULT_SIZE, DEFAULT_SPACING, DEFAULT_ORIGIN,
    DEFAULT_ANGULAR_BANDWIDTH, FWHM_TO_SIGMA,
)


class ParameterSet:
    """Configuration of one angular Gaussian kernel generation run.

    Every vector-valued field holds ``dimension`` entries. Setters compare the
    new value with the stored one and only count a modification (and notify
    observers) when something actually changed, so callers can skip
    regeneration when ``modified_count`` has not moved.

    Parameters
    ----------
    dimension : int, optional
        Number of grid dimensions ``N``. Default is 2.
    """

    def __init__(self, dimension: int = DEFAULT_DIMENSION) -> None:
        if dimension < 1:
            raise ValueError("Dimension must be a positive integer.")
        self._dimension = int(dimension)
        self._size: Tuple[int, ...] = (DEFAULT_SIZE,) * self._dimension
        self._spacing: Tuple[float, ...] = (DEFAULT_SPACING,) * self._dimension
        self._origin: Tuple[float, ...] = (DEFAULT_ORIGIN,) * self._dimension
        self._direction = np.identity(self._dimension, dtype=float)
        self._orientation: Tuple[float, ...] = (1.0,) + (0.0,) * (self._dimension - 1)
        self._angular_bandwidth = float(DEFAULT_ANGULAR_BANDWIDTH)
        self._observers: List[Callable[["ParameterSet"], None]] = []
        self.modified_count = 0

    # ------------------------------------------------------------------ read

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def size(self) -> Tuple[int, ...]:
        return self._size

    @property
    def spacing(self) -> Tuple[float, ...]:
        return self._spacing

    @property
    def origin(self) -> Tuple[float, ...]:
        return self._origin

    @property
    def direction(self) -> np.ndarray:
        return self._direction.copy()

    @property
    def orientation(self) -> Tuple[float, ...]:
        return self._orientation

    @property
    def angular_bandwidth(self) -> float:
        return self._angular_bandwidth

    @property
    def orientation_radius(self) -> float:
        """Euclidean norm of the orientation axis."""
        return math.sqrt(sum(o * o for o in self._orientation))

    @property
    def angular_sigma(self) -> float:
        """Gaussian standard deviation matching the configured FWHM."""
        return (self._angular_bandwidth / 2) / FWHM_TO_SIGMA

    @property
    def center(self) -> Tuple[float, ...]:
        return tuple(float(s) / 2.0 for s in self._size)

    # --------------------------------------------------------------- observe

    def add_observer(self, callback: Callable[["ParameterSet"], None]) -> None:
        """Register ``callback(params)``, called after every effective change."""
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[["ParameterSet"], None]) -> None:
        self._observers.remove(callback)

    def _modified(self) -> None:
        self.modified_count += 1
        for callback in list(self._observers):
            callback(self)

    # --------------------------------------------------------------- setters

    def _vector(self, values: Sequence[float], name: str) -> Tuple[float, ...]:
        vec = tuple(float(v) for v in values)
        if len(vec) != self._dimension:
            raise ValueError(
                f"{name} needs {self._dimension} entries, got {len(vec)}."
            )
        return vec

    def set_size(self, size: Sequence[int]) -> bool:
        if any(float(s) != int(s) for s in size):
            raise ValueError("Size entries must be whole numbers.")
        new = tuple(int(s) for s in size)
        if len(new) != self._dimension:
            raise ValueError(
                f"size needs {self._dimension} entries, got {len(new)}."
            )
        if any(s < 1 for s in new):
            raise ValueError("Every size entry must be at least 1.")
        if new == self._size:
            return False
        self._size = new
        self._modified()
        return True

    def set_spacing(self, spacing: Sequence[float]) -> bool:
        new = self._vector(spacing, "spacing")
        if any(s == 0.0 for s in new):
            raise ValueError("Spacing entries must be non-zero.")
        if new == self._spacing:
            return False
        self._spacing = new
        self._modified()
        return True

    def set_origin(self, origin: Sequence[float]) -> bool:
        new = self._vector(origin, "origin")
        if new == self._origin:
            return False
        self._origin = new
        self._modified()
        return True

    def set_direction(self, direction) -> bool:
        new = np.array(direction, dtype=float)
        if new.shape != (self._dimension, self._dimension):
            raise ValueError(
                f"direction must be a {self._dimension}x{self._dimension} matrix, "
                f"got shape {new.shape}."
            )
        if np.array_equal(new, self._direction):
            return False
        self._direction = new
        self._modified()
        return True

    def set_orientation(self, orientation: Sequence[float]) -> bool:
        new = self._vector(orientation, "orientation")
        if not all(math.isfinite(o) for o in new):
            raise ValueError("Orientation entries must be finite.")
        if not any(new):
            raise ValueError("Orientation must not be the zero vector.")
        if new == self._orientation:
            return False
        self._orientation = new
        self._modified()
        return True

    def set_angular_bandwidth(self, bandwidth: float) -> bool:
        new = float(bandwidth)
        if not (math.isfinite(new) and new > 0.0):
            raise ValueError("Angular bandwidth must be a positive finite number.")
        if new == self._angular_bandwidth:
            return False
        self._angular_bandwidth = new
        self._modified()
        return True

    # ---------------------------------------------------------------- report

    def describe(self) -> str:
        """Return a multi-line, human readable summary."""
        lines = [
            f"ParameterSet (dimension={self._dimension})",
            f"  Size              : {list(self._size)}",
            f"  Spacing           : {list(self._spacing)}",
            f"  Origin            : {list(self._origin)}",
            f"  Direction         : {self._direction.tolist()}",
            f"  Orientation       : {list(self._orientation)}",
            f"  Angular bandwidth : {self._angular_bandwidth:.6g} rad",
            f"  Angular sigma     : {self.angular_sigma:.6g} rad",
            f"  Modified count    : {self.modified_count}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ParameterSet(size={self._size}, orientation={self._orientation}, "
            f"angular_bandwidth={self._angular_bandwidth!r})"
        )
