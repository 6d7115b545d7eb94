from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import numpy as np
from joblib import Parallel, delayed, effective_n_jobs
from .constants import N_JOBS, SPLIT_STRATEGIES
from .geometry import resolve_geometry
from .kernel import evaluate, evaluate_region
from .params import ParameterSet
from .progress import GenerationProgress

Region = Tuple[slice, ...]
ParallelFor = Callable[[Callable[[Region], None], Sequence[Region]], None]


def split_regions(
    extent: Sequence[int],
    n_regions: int = 1,
    strategy: str = "slowest",
) -> List[Region]:
    """Split ``[0, extent)`` into disjoint rectangular regions.

    Parameters
    ----------
    extent : sequence of int
        Grid extent per dimension.
    n_regions : int, optional
        Requested number of regions. Fewer are returned when the grid cannot
        be split that finely. Default is 1.
    strategy : str, optional
        ``"slowest"`` stripes along axis 0 (the slowest-varying axis of a
        C-ordered buffer); ``"balanced"`` keeps halving the largest region
        along its longest axis. Default is ``"slowest"``.

    Returns
    -------
    list[tuple[slice, ...]]
        Non-empty regions that cover every index exactly once.
    """
    if strategy not in SPLIT_STRATEGIES:
        raise ValueError(
            f"Unknown split strategy '{strategy}', expected one of {SPLIT_STRATEGIES}."
        )
    extent = tuple(int(e) for e in extent)
    if not extent or any(e < 1 for e in extent):
        raise ValueError("Every grid extent must be a positive integer.")
    n_regions = max(1, int(n_regions))
    full = tuple(slice(0, e) for e in extent)

    if strategy == "slowest":
        n = min(n_regions, extent[0])
        bounds = [(k * extent[0]) // n for k in range(n + 1)]
        return [
            (slice(lo, hi),) + full[1:]
            for lo, hi in zip(bounds[:-1], bounds[1:])
        ]

    regions = [full]
    while len(regions) < n_regions:
        sizes = [_region_cells(r) for r in regions]
        target = int(np.argmax(sizes))
        region = regions[target]
        lengths = [s.stop - s.start for s in region]
        axis = int(np.argmax(lengths))
        if lengths[axis] < 2:
            break
        mid = region[axis].start + lengths[axis] // 2
        lower = region[:axis] + (slice(region[axis].start, mid),) + region[axis + 1:]
        upper = region[:axis] + (slice(mid, region[axis].stop),) + region[axis + 1:]
        regions[target:target + 1] = [lower, upper]
    return regions


def _region_cells(region: Region) -> int:
    cells = 1
    for s in region:
        cells *= s.stop - s.start
    return cells


def sequential_for(func: Callable[[Region], None], regions: Iterable[Region]) -> None:
    """Run ``func`` on each region in order, in the calling thread."""
    for region in regions:
        func(region)


class JoblibParallelFor:
    """Run ``func`` over regions with joblib worker threads.

    ``require="sharedmem"`` keeps every worker in this process so that all of
    them write into the same buffer.
    """

    def __init__(self, n_jobs: int = N_JOBS) -> None:
        self.n_jobs = n_jobs

    @property
    def n_workers(self) -> int:
        return effective_n_jobs(self.n_jobs)

    def __call__(self, func: Callable[[Region], None], regions: Sequence[Region]) -> None:
        Parallel(n_jobs=self.n_jobs, require="sharedmem")(
            delayed(func)(region) for region in regions
        )


class RegionExecutor:
    """Fill an output buffer with kernel values, one region at a time.

    Regions are disjoint and the evaluator is pure, so regions need no
    locking and may run in any order on any number of workers.

    Parameters
    ----------
    parallel_for : callable, optional
        ``parallel_for(func, regions)``; defaults to :func:`sequential_for`.
    n_regions : int, optional
        Number of regions to request from :func:`split_regions`. Defaults to
        the worker count of ``parallel_for`` (1 when it has none).
    strategy : str, optional
        Region splitting strategy. Default is ``"slowest"``.
    pointwise : bool, optional
        Evaluate index by index with :func:`evaluate` instead of the
        vectorized :func:`evaluate_region`. Default is False.
    progress : GenerationProgress, optional
        Advisory progress collector.
    """

    def __init__(
        self,
        parallel_for: Optional[ParallelFor] = None,
        n_regions: Optional[int] = None,
        strategy: str = "slowest",
        pointwise: bool = False,
        progress: Optional[GenerationProgress] = None,
    ) -> None:
        self.parallel_for = sequential_for if parallel_for is None else parallel_for
        if n_regions is None:
            n_regions = getattr(self.parallel_for, "n_workers", 1)
        self.n_regions = n_regions
        self.strategy = strategy
        self.pointwise = pointwise
        self.progress = progress

    def generate(self, buffer: np.ndarray, params: ParameterSet) -> np.ndarray:
        """Populate ``buffer`` in place and return it."""
        extent = resolve_geometry(params).extent
        if tuple(buffer.shape) != extent:
            raise ValueError(
                f"Buffer shape {tuple(buffer.shape)} does not match extent {extent}."
            )
        regions = split_regions(extent, self.n_regions, self.strategy)

        def fill(region: Region) -> None:
            if self.pointwise:
                starts = [s.start for s in region]
                shape = tuple(s.stop - s.start for s in region)
                for offset in np.ndindex(*shape):
                    index = tuple(o + st for o, st in zip(offset, starts))
                    buffer[index] = evaluate(index, params)
            else:
                buffer[region] = evaluate_region(region, params)
            if self.progress is not None:
                self.progress.record_region(region)

        self.parallel_for(fill, regions)
        return buffer


def generate(buffer: np.ndarray, params: ParameterSet, **kwargs) -> np.ndarray:
    """Populate ``buffer`` with a :class:`RegionExecutor` built from ``kwargs``."""
    return RegionExecutor(**kwargs).generate(buffer, params)
