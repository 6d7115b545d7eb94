import math

# ------------------------- Grid defaults ------------------------------------

#: Default grid extent along every dimension.
DEFAULT_SIZE = 64
#: Default physical size of one cell.
DEFAULT_SPACING = 1.0
#: Default physical coordinate of index zero.
DEFAULT_ORIGIN = 0.0
#: Default dimensionality of a new parameter set.
DEFAULT_DIMENSION = 2

# ------------------- Angular Gaussian parameters ----------------------------

#: FWHM -> sigma conversion, sqrt(2 ln 2).
FWHM_TO_SIGMA = 1.1774
#: Default angular full width at half maximum (radians).
DEFAULT_ANGULAR_BANDWIDTH = math.pi / 2
#: Value reported at the grid center, where the angle is undefined.
CENTER_VALUE = 1.0

# ------------------- Execution ----------------------------------------------

#: Region splitting strategies understood by ``split_regions``.
SPLIT_STRATEGIES = ("slowest", "balanced")
#: joblib worker count (-1 == all cores).
N_JOBS = -1

# ------------------- Visualization -----------------------------------------

#: Matplotlib ``imshow`` interpolation.
IMSHOW_INTERPOLATION = "nearest"
#: Colormap for kernel slices.
KERNEL_CMAP = "viridis"
