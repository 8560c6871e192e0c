from __future__ import annotations

from numba import njit

# Squared escape radius. Slightly above 4.0; changing it changes output pixels.
ESCAPE_RADIUS2 = 4.001


@njit(cache=True)
def escape_count(cr: float, ci: float, limit: int) -> int:
    """
    Number of iterations of z <- z*z + c (starting at z = 0) that complete before
    |z|^2 reaches ESCAPE_RADIUS2, or `limit` if the orbit never gets there.
    """
    zr = 0.0
    zi = 0.0
    zr2 = 0.0
    zi2 = 0.0
    count = 0
    while count < limit and zr2 + zi2 < ESCAPE_RADIUS2:
        zi = 2.0 * zr * zi + ci
        zr = zr2 - zi2 + cr
        zr2 = zr * zr
        zi2 = zi * zi
        count += 1
    return count
