r"""
Catmull-Rom Path
================

A path through several points can be built from Catmull-Rom segments, where
each segment uses four consecutive points. The first and last point only
steer the tangents, so the path runs from the second to the second to last
point.
"""  # noqa

from interpkernel import Point3, catmull_rom_spline, linspace_progress, sample_points
from matplotlib import pyplot as plt

points = [
    Point3(0, 0, 0),
    Point3(1, 1, 0),
    Point3(2, 0, 0),
    Point3(3, 2, 0),
    Point3(4, 1, 0),
    Point3(5, 3, 0),
]

t = linspace_progress(32)

plt.figure()
for i in range(len(points) - 3):
    p0, p1, p2, p3 = points[i : i + 4]
    xyz = sample_points(lambda s: catmull_rom_spline(p0, p1, p2, p3, s), t)
    plt.plot(xyz[:, 0], xyz[:, 1], label=f"segment {i}")
plt.scatter([p.x for p in points], [p.y for p in points], color="black")
plt.gca().set(xlabel="$x$", ylabel="$y$", aspect="equal")
plt.legend()
plt.grid()
plt.show()

# %%
#
# The ``alpha`` argument scales the whole result, so any value other than the
# default moves the segment away from its points.

p0, p1, p2, p3 = points[:4]
plt.figure()
for alpha in (0.4, 0.5, 0.6):
    xyz = sample_points(lambda s: catmull_rom_spline(p0, p1, p2, p3, s, alpha), t)
    plt.plot(xyz[:, 0], xyz[:, 1], label=f"$\\alpha = {alpha}$")
plt.scatter([p.x for p in points[:4]], [p.y for p in points[:4]], color="black")
plt.gca().set(xlabel="$x$", ylabel="$y$")
plt.legend()
plt.grid()
plt.show()
