from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from .constants import (
    DEFAULT_DIMENSION, DEFAULT_SIZE, DEFAULT_SPACING, DEFAULT_ORIGIN,
    DEFAULT_ANGULAR_BANDWIDTH, N_JOBS,
)
from .executor import JoblibParallelFor, RegionExecutor
from .params import ParameterSet
from .progress import GenerationProgress


@dataclass
class SourceConfig:
    dimension: int = DEFAULT_DIMENSION

    # Grid; ``None`` keeps the ParameterSet default for every dimension
    size: Optional[Tuple[int, ...]] = None
    spacing: Optional[Tuple[float, ...]] = None
    origin: Optional[Tuple[float, ...]] = None

    # Angular profile
    orientation: Optional[Tuple[float, ...]] = None
    angular_bandwidth: float = DEFAULT_ANGULAR_BANDWIDTH

    # Execution
    n_jobs: Optional[int] = N_JOBS
    n_regions: Optional[int] = None
    split_strategy: str = "slowest"
    pointwise: bool = False
    dtype: str = "float32"

    # IO/visual
    display_axes: Tuple[int, int] = (0, 1)
    save_path: Optional[str] = "steerable_kernel.png"
    show: bool = False

    def build_parameters(self) -> ParameterSet:
        params = ParameterSet(self.dimension)
        params.set_size(self.size or (DEFAULT_SIZE,) * self.dimension)
        params.set_spacing(self.spacing or (DEFAULT_SPACING,) * self.dimension)
        params.set_origin(self.origin or (DEFAULT_ORIGIN,) * self.dimension)
        if self.orientation is not None:
            params.set_orientation(self.orientation)
        params.set_angular_bandwidth(self.angular_bandwidth)
        return params

    def build_executor(self, progress: Optional[GenerationProgress] = None) -> RegionExecutor:
        """``n_jobs=None`` runs every region in the calling thread."""
        parallel_for = None if self.n_jobs is None else JoblibParallelFor(self.n_jobs)
        return RegionExecutor(
            parallel_for=parallel_for,
            n_regions=self.n_regions,
            strategy=self.split_strategy,
            pointwise=self.pointwise,
            progress=progress,
        )
