r"""
Scalar Curves
=============

All scalar curves in :mod:`interpkernel` take their control values and the
progress :math:`t`. Here they are all plotted between 0 and 1, with the
progress running a bit past both ends to show how they extrapolate.
"""  # noqa

import numpy as np
from interpkernel import (
    cubic_smooth_value,
    linear_value,
    linspace_progress,
    quadratic_bezier_value,
    quadratic_de_casteljau_value,
)
from matplotlib import pyplot as plt

t = linspace_progress(201, -0.25, 1.25)

# %%
#
# Since the functions only use plain arithmetic, the whole array of progress
# values can be passed in at once.

plt.figure()
plt.plot(t, linear_value(0.0, 1.0, t), label="linear")
plt.plot(t, cubic_smooth_value(0.0, 1.0, t), label="smoothstep")
plt.plot(t, quadratic_bezier_value(0.0, 1.5, 1.0, t), label="Bézier")
plt.plot(
    t[::10],
    quadratic_de_casteljau_value(0.0, 1.5, 1.0, t[::10]),
    "x",
    label="De Casteljau",
)
plt.gca().set(xlabel="$t$", ylabel="value")
plt.legend()
plt.grid()
plt.show()

# %%
#
# The two forms of the quadratic Bézier curve give the same result.

print(
    "Largest difference:",
    np.max(
        np.abs(
            quadratic_bezier_value(0.0, 1.5, 1.0, t)
            - quadratic_de_casteljau_value(0.0, 1.5, 1.0, t)
        )
    ),
)
