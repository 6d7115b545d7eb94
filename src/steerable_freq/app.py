from __future__ import annotations
import time
import numpy as np
import matplotlib.pyplot as plt

from .config import SourceConfig
from .geometry import allocate_buffer, resolve_geometry
from .progress import GenerationProgress
from .viz import plot_kernel_slice


class SourceApp:
    """High-level orchestrator: resolve geometry, generate, summarize, plot."""

    def __init__(self, config: SourceConfig) -> None:
        self.cfg = config
        self.params = self.cfg.build_parameters()
        self.geometry = resolve_geometry(self.params)
        self.progress = GenerationProgress(self.geometry.num_cells)
        self.executor = self.cfg.build_executor(progress=self.progress)
        self.buffer = allocate_buffer(self.geometry, dtype=np.dtype(self.cfg.dtype))
        self._generated_at = -1

    def generate(self) -> np.ndarray:
        """Generate the kernel unless the parameters are unchanged since last time."""
        if self._generated_at == self.params.modified_count:
            return self.buffer
        geometry = resolve_geometry(self.params)
        if geometry.extent != self.geometry.extent:
            self.buffer = allocate_buffer(geometry, dtype=self.buffer.dtype)
        self.geometry = geometry
        self.progress = GenerationProgress(geometry.num_cells)
        self.executor.progress = self.progress
        self.executor.generate(self.buffer, self.params)
        self._generated_at = self.params.modified_count
        return self.buffer

    def _title(self) -> str:
        orient = ", ".join("{:.2f}".format(o) for o in self.params.orientation)
        return (
            "size={}  orientation=({})  ".format("x".join(map(str, self.geometry.extent)), orient)
            + "FWHM={:.3f} rad".format(self.params.angular_bandwidth)
        )

    def run(self) -> np.ndarray:
        extent = "x".join(map(str, resolve_geometry(self.params).extent))
        print(
            f"Generating angular Gaussian kernel: Size={extent}, "
            f"Regions={self.executor.n_regions} ({self.executor.strategy})"
        )
        t0 = time.perf_counter()
        kernel = self.generate()
        elapsed = time.perf_counter() - t0

        print(f"Regions done: {self.progress.regions_done}  "
              f"coverage: {self.progress.fraction() * 100.0:.1f}%")
        print(f"Kernel min/max/mean: {float(kernel.min()):.4f} / "
              f"{float(kernel.max()):.4f} / {float(kernel.mean()):.4f}")
        print(f"Elapsed: {elapsed * 1000.0:.1f} ms")

        if self.cfg.save_path or self.cfg.show:
            fig, _, _ = plot_kernel_slice(kernel, self.cfg.display_axes, title=self._title())
            fig.tight_layout()
            if self.cfg.save_path:
                fig.savefig(self.cfg.save_path, dpi=150)
                print(f"Saved: {self.cfg.save_path}")
            if self.cfg.show:
                plt.show()
            plt.close(fig)
        return kernel
