from __future__ import annotations

from typing import Tuple

from numba import njit

INSIDE_COLOR = (0, 0, 0, 255)


@njit(cache=True)
def zigzag(v: float) -> float:
    # Triangle wave with period 2 and range [0, 1], zigzag(0) == 0.
    y = abs(v) % 2.0
    if y > 1.0:
        y = 2.0 - y
    return y


@njit(cache=True)
def colorize(count: int, limit: int) -> Tuple[int, int, int, int]:
    """
    Returns an (R, G, B, A) tuple for an escape count. Points that never escaped
    are black. Escaped points cycle through three zigzag waves with different
    frequencies and phases, one per channel. Channels are truncated, not rounded.
    """
    if count >= limit:
        return (0, 0, 0, 255)

    x = count / (limit - 1.0)
    r = int(255.0 * zigzag(0.5 + 7.0 * x))
    g = int(255.0 * zigzag(0.2 + 9.0 * x))
    b = int(255.0 * zigzag(0.7 + 11.0 * x))
    return (r, g, b, 255)
