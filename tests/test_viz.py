from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pytest

from steerable_freq import central_slice, plot_kernel_slice


def test_central_slice_of_volume() -> None:
    volume = np.arange(4 * 5 * 6, dtype=float).reshape(4, 5, 6)
    plane = central_slice(volume, (0, 2))
    assert plane.shape == (4, 6)
    assert np.array_equal(plane, volume[:, 2, :])

    swapped = central_slice(volume, (2, 0))
    assert np.array_equal(swapped, volume[:, 2, :].T)


def test_central_slice_of_line_and_plane() -> None:
    assert central_slice(np.ones(7)).shape == (1, 7)
    image = np.ones((3, 4))
    assert central_slice(image) is not None
    assert central_slice(image).shape == (3, 4)


def test_central_slice_needs_distinct_axes() -> None:
    with pytest.raises(ValueError, match="two different axes"):
        central_slice(np.ones((3, 3)), (1, 1))


def test_plot_kernel_slice_returns_handles() -> None:
    fig, ax, img = plot_kernel_slice(np.full((5, 5), 0.5), title="demo")
    assert ax.get_title() == "demo"
    assert img.get_array().shape == (5, 5)
    plt.close(fig)
