from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np
from .constants import CENTER_VALUE
from .params import ParameterSet


def geodesic_angle(cosine):
    """Return ``arccos`` of ``cosine`` after clamping it to ``[-1, 1]``.

    Rounding can push a cosine computed from normalized vectors fractionally
    past +/-1; the clamp keeps the angle at 0 (or pi) instead of NaN there.
    Works on scalars and arrays.
    """
    return np.arccos(np.clip(cosine, -1.0, 1.0))


def angular_gaussian(angle, sigma: float):
    """Gaussian falloff ``exp(-angle**2 / (2 sigma**2))``; scalar or array."""
    return np.exp(-(angle * angle) / (2 * sigma * sigma))


def evaluate(index: Sequence[int], params: ParameterSet) -> float:
    """Evaluate the angular Gaussian kernel at one grid index.

    The coordinate of ``index`` is taken relative to the grid center and
    divided by the grid size per dimension, so the kernel lives in normalized
    index space and ignores physical spacing. The value is a Gaussian of the
    angle between that coordinate and the orientation axis. The exact center
    has no direction and evaluates to 1.

    This is :func:`evaluate_region` on a one-cell region, so both give the
    same bits for the same index.

    Parameters
    ----------
    index : sequence of int
        Grid index, one entry per dimension.
    params : ParameterSet
        Grid size, orientation and angular bandwidth.

    Returns
    -------
    float
        Kernel value in ``[0, 1]``.
    """
    region = tuple(slice(int(i), int(i) + 1) for i in index)
    return float(evaluate_region(region, params).flat[0])


def evaluate_region(region: Tuple[slice, ...], params: ParameterSet) -> np.ndarray:
    """Evaluate the kernel for every index of a rectangular region.

    Parameters
    ----------
    region : tuple of slice
        One ``slice(start, stop)`` per dimension.
    params : ParameterSet
        Generation parameters.

    Returns
    -------
    np.ndarray
        ``float64`` values shaped like the region.
    """
    size = params.size
    center = params.center
    orientation = params.orientation
    ndims = params.dimension
    shape = tuple(s.stop - s.start for s in region)

    radius = np.zeros(shape, dtype=float)
    dot_product = np.zeros(shape, dtype=float)
    for d in range(ndims):
        idx = np.arange(region[d].start, region[d].stop, dtype=float)
        idx = idx.reshape((-1,) + (1,) * (ndims - d - 1))
        dist = (idx - center[d]) / float(size[d])
        dot_product = dot_product + orientation[d] * dist
        radius = radius + dist * dist
    radius = np.sqrt(radius)

    at_center = radius == 0
    with np.errstate(divide="ignore", invalid="ignore"):
        dot_product = dot_product / (radius * params.orientation_radius)
        angle = geodesic_angle(dot_product)
        values = angular_gaussian(angle, params.angular_sigma)
    values[at_center] = CENTER_VALUE
    return values
