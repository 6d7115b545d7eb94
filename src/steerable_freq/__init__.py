from .constants import (
    DEFAULT_SIZE, DEFAULT_SPACING, DEFAULT_ORIGIN, DEFAULT_DIMENSION,
    FWHM_TO_SIGMA, DEFAULT_ANGULAR_BANDWIDTH, CENTER_VALUE,
    SPLIT_STRATEGIES, N_JOBS, IMSHOW_INTERPOLATION, KERNEL_CMAP,
)

from .params import ParameterSet
from .geometry import GridGeometry, resolve_geometry, allocate_buffer
from .kernel import evaluate, evaluate_region, geodesic_angle, angular_gaussian
from .progress import GenerationProgress
from .executor import (
    RegionExecutor, JoblibParallelFor, sequential_for, split_regions, generate,
)
from .viz import central_slice, plot_kernel_slice
from .config import SourceConfig
from .app import SourceApp

__all__ = [
    # constants
    "DEFAULT_SIZE", "DEFAULT_SPACING", "DEFAULT_ORIGIN", "DEFAULT_DIMENSION",
    "FWHM_TO_SIGMA", "DEFAULT_ANGULAR_BANDWIDTH", "CENTER_VALUE",
    "SPLIT_STRATEGIES", "N_JOBS", "IMSHOW_INTERPOLATION", "KERNEL_CMAP",
    # modules
    "ParameterSet",
    "GridGeometry", "resolve_geometry", "allocate_buffer",
    "evaluate", "evaluate_region", "geodesic_angle", "angular_gaussian",
    "GenerationProgress",
    "RegionExecutor", "JoblibParallelFor", "sequential_for", "split_regions", "generate",
    "central_slice", "plot_kernel_slice",
    "SourceConfig", "SourceApp",
]
