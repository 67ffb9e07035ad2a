"""
Cubic Bézier Kernel
===================
Pure vector math used by the curve model, the edit controller and the renderer.

Why is this file needed?
------------------------
1. Evaluation: It turns the four control points of a segment into points on
   the curve, either one parameter at a time or as a sampled polyline.
2. Tangent symmetry: `reflect` is what keeps a knot's two handles collinear
   and equidistant while the user drags out a new knot.

Nothing in here holds state; every function returns new values.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from bezierspline.config import SAMPLE_STEP
from bezierspline.model.geometry_primitives import Vec2

if TYPE_CHECKING:
    import numpy.typing as npt


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation between `a` (t=0) and `b` (t=1)."""
    return a + (b - a) * t


def reflect(point: Vec2, pivot: Vec2) -> Vec2:
    """Mirror `point` through `pivot`."""
    return pivot * 2 - point


def evaluate_cubic_bezier(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    """
    Point at parameter `t` on the cubic Bézier segment, de Casteljau style.

    Three rounds of linear interpolation: the control polygon is collapsed
    3 -> 2 -> 1 points.
    """
    a = lerp(p0, p1, t)
    b = lerp(p1, p2, t)
    c = lerp(p2, p3, t)
    d = lerp(a, b, t)
    e = lerp(b, c, t)
    return lerp(d, e, t)


def bezier_coefficients(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> tuple[Vec2, Vec2, Vec2]:
    """
    Coefficients of the expanded polynomial B(t) = p0 + c1*t + c2*t^2 + c3*t^3.
    """
    c1 = (p1 - p0) * 3
    c2 = p0 * 3 - p1 * 6 + p2 * 3
    c3 = -p0 + p1 * 3 - p2 * 3 + p3
    return c1, c2, c3


def evaluate_cubic_bezier_polynomial(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    """Same point as `evaluate_cubic_bezier`, using the expanded polynomial form."""
    c1, c2, c3 = bezier_coefficients(p0, p1, p2, p3)
    return p0 + c1 * t + c2 * (t * t) + c3 * (t * t * t)


def sample_parameters(step: float = SAMPLE_STEP) -> npt.NDArray[np.float64]:
    """
    Parameter values used to flatten a segment.

    Args:
        step: Distance between consecutive parameters, in (0, 1].

    Returns:
        Strictly increasing array starting at 0.0 and ending exactly at 1.0.
        For step=0.01 this is 101 values.

    Raises:
        ValueError: If the step is not in (0, 1].
    """
    if not (0.0 < step <= 1.0):
        raise ValueError(f"Sample step must be in (0, 1], got {step}.")

    # number of whole steps strictly below t=1; the tolerance absorbs 1/step rounding
    n = max(1, math.ceil(1.0 / step - 1e-9))
    return np.append(np.arange(n, dtype=np.float64) * step, 1.0)


def sample_segment(
    p0: Vec2,
    p1: Vec2,
    p2: Vec2,
    p3: Vec2,
    step: float = SAMPLE_STEP
) -> npt.NDArray[np.float64]:
    """
    Approximate a cubic Bézier segment by a polyline.

    Args:
        p0, p3: Segment end points (knot positions).
        p1, p2: Inner control points (the handles facing each other).
        step: Parameter step, see `sample_parameters`.

    Returns:
        An array of shape (N, 2); the first row is p0, the last row is p3.
    """
    t = sample_parameters(step)[:, np.newaxis]  # (N, 1)
    c1, c2, c3 = (c.to_array() for c in bezier_coefficients(p0, p1, p2, p3))
    return p0.to_array() + c1 * t + c2 * t ** 2 + c3 * t ** 3
