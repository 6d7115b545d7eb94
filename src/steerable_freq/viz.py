from __future__ import annotations
from typing import Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import Normalize
from .constants import IMSHOW_INTERPOLATION, KERNEL_CMAP


def central_slice(buffer: np.ndarray, display_axes: Tuple[int, int] = (0, 1)) -> np.ndarray:
    """Return the 2-D plane spanned by ``display_axes`` through the grid center.

    A 1-D buffer is returned as a single row.
    """
    if buffer.ndim == 1:
        return buffer[np.newaxis, :]
    a0, a1 = display_axes
    if a0 == a1:
        raise ValueError("display_axes must name two different axes.")
    index = [n // 2 for n in buffer.shape]
    index[a0] = slice(None)
    index[a1] = slice(None)
    plane = buffer[tuple(index)]
    # sliced axes keep buffer order
    return plane if a0 < a1 else plane.T


def plot_kernel_slice(
    buffer: np.ndarray,
    display_axes: Tuple[int, int] = (0, 1),
    title: str = "Angular Gaussian kernel",
):
    """Create figure, axis, and image handle showing a central kernel slice.

    Parameters
    ----------
    buffer : np.ndarray
        Generated kernel of any dimensionality.
    display_axes : tuple[int, int], optional
        Buffer axes drawn as rows and columns. Default is ``(0, 1)``.
    title : str, optional
        Axis title.

    Returns
    -------
    tuple[plt.Figure, plt.Axes, plt.AxesImage]
    """
    plane = central_slice(buffer, display_axes)
    fig, ax = plt.subplots(figsize=(6.6, 6.6))
    img = ax.imshow(
        plane,
        cmap=KERNEL_CMAP,
        norm=Normalize(vmin=0.0, vmax=1.0),
        interpolation=IMSHOW_INTERPOLATION,
    )
    ax.set_title(title, fontsize=14)
    ax.set_xlabel(f"index[{display_axes[1]}]")
    ax.set_ylabel(f"index[{display_axes[0]}]")
    fig.colorbar(img, ax=ax)
    return fig, ax, img
