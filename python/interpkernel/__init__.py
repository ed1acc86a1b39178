"""Package with pure interpolation functions for scalars and points in 3D.

This file re-exports types and functions that are expected to be used by
users. Every function is stateless and can be called from any thread.
"""

import logging

# Blending weights
from interpkernel.basis import CATMULL_ROM_BASIS as CATMULL_ROM_BASIS
from interpkernel.basis import SMOOTHSTEP_BASIS as SMOOTHSTEP_BASIS
from interpkernel.basis import catmull_rom_weights as catmull_rom_weights
from interpkernel.basis import cubic_smooth_weight as cubic_smooth_weight
from interpkernel.basis import (
    cubic_smooth_weight_derivative as cubic_smooth_weight_derivative,
)
from interpkernel.basis import quadratic_bezier_weights as quadratic_bezier_weights

# Catmull-Rom
from interpkernel.catmull_rom import (
    DEFAULT_CATMULL_ROM_ALPHA as DEFAULT_CATMULL_ROM_ALPHA,
)
from interpkernel.catmull_rom import catmull_rom_spline as catmull_rom_spline

# Point type
from interpkernel.point3 import Point3 as Point3
from interpkernel.point3 import add as add
from interpkernel.point3 import scale as scale
from interpkernel.point3 import subtract as subtract

# Sampling
from interpkernel.sampling import linspace_progress as linspace_progress
from interpkernel.sampling import sample_points as sample_points
from interpkernel.sampling import sample_values as sample_values

# Scalar curves
from interpkernel.scalar import cubic_smooth_value as cubic_smooth_value
from interpkernel.scalar import linear_value as linear_value
from interpkernel.scalar import quadratic_bezier_value as quadratic_bezier_value
from interpkernel.scalar import (
    quadratic_de_casteljau_value as quadratic_de_casteljau_value,
)

# Vector curves
from interpkernel.vector import cubic_smooth_vector as cubic_smooth_vector
from interpkernel.vector import linear_vector as linear_vector
from interpkernel.vector import quadratic_bezier_vector as quadratic_bezier_vector
from interpkernel.vector import (
    quadratic_de_casteljau_vector as quadratic_de_casteljau_vector,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
