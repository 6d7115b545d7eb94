from __future__ import annotations
from typing import Callable, List, Optional, Tuple


class GenerationProgress:
    """Advisory progress of a generation run.

    Regions report themselves through :meth:`record_region` once written.
    Nothing in the executor depends on these numbers.

    Parameters
    ----------
    total_cells : int
        Number of cells in the output grid.
    callback : callable, optional
        Called with the completed fraction after every region.
    """

    def __init__(
        self,
        total_cells: int,
        callback: Optional[Callable[[float], None]] = None,
    ):
        self.total_cells = int(total_cells)
        self.callback = callback
        self.region_cells: List[int] = []

    def record_region(self, region: Tuple[slice, ...]) -> None:
        cells = 1
        for s in region:
            cells *= s.stop - s.start
        self.region_cells.append(cells)
        if self.callback is not None:
            self.callback(self.fraction())

    @property
    def regions_done(self) -> int:
        return len(self.region_cells)

    @property
    def completed_cells(self) -> int:
        return sum(self.region_cells)

    def fraction(self) -> float:
        if self.total_cells <= 0:
            return 1.0
        return min(1.0, self.completed_cells / self.total_cells)
