# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector length and angle, evaluated in extended precision.

Components are taken as IEEE doubles, which convert to the working
precision exactly; only the sums, the square root and the arccosine
round.
"""

import logging
from typing import Optional

import mpmath
import numpy as np
from mpmath.libmp import from_float, mpf_gt, mpf_lt, mpf_mul, mpf_sign, to_float

from .bigfloat.arcsin import acos_mpf
from .bigfloat.context import MPF, Context, get_context
from .bigfloat.root import sqrt_mpf
from .radian import Radian
from .tolerance import DEFAULT_TOLERANCE, is_within

logger = logging.getLogger(__name__)


def _as_vector(v) -> np.ndarray:
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise ValueError(f"expected a 1-D vector, got shape {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError("vector components must be finite")
    return v


def _dot(u: np.ndarray, v: np.ndarray, ctx: Context) -> MPF:
    total = ctx.zero
    for a, b in zip(u, v):
        # products are exact, only the running sum rounds
        total = ctx.add(total, mpf_mul(from_float(float(a)), from_float(float(b))))
    return total


def is_zero_vector(v, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if every component of `v` is within `tolerance` of zero."""
    return all(is_within(float(x), 0.0, tolerance) for x in _as_vector(v))


def magnitude(v, ctx: Optional[Context] = None) -> mpmath.mpf:
    """
    Euclidean length of `v`.

    Parameters
    ----------
    v : (n,) array_like
    ctx : Context or None
        Working precision, the process-wide default if omitted.

    Returns
    -------
    mpmath.mpf
    """
    ctx = ctx or get_context()
    v = _as_vector(v)
    return ctx.make(sqrt_mpf(_dot(v, v, ctx), ctx))


def angle_between(u, v, ctx: Optional[Context] = None) -> Radian:
    """
    Angle between `u` and `v`, acos(u·v / (|u| |v|)).

    Raises
    ------
    ValueError : if the dimensions differ or either vector has zero length.
    """
    ctx = ctx or get_context()
    u = _as_vector(u)
    v = _as_vector(v)
    if u.shape != v.shape:
        raise ValueError(
            "cannot calculate the angle between vectors of different "
            f"dimensions ({u.shape[0]} and {v.shape[0]})"
        )

    u_len = sqrt_mpf(_dot(u, u, ctx), ctx)
    v_len = sqrt_mpf(_dot(v, v, ctx), ctx)
    if mpf_sign(u_len) == 0 or mpf_sign(v_len) == 0:
        raise ValueError("Angle undefined for zero-length vector")

    cos_theta = ctx.div(_dot(u, v, ctx), ctx.mul(u_len, v_len))
    # rounding can push parallel vectors just past ±1
    if mpf_gt(cos_theta, ctx.one):
        logger.debug(f"clamping cosine {ctx.to_string(cos_theta, 20)} to 1")
        cos_theta = ctx.one
    elif mpf_lt(cos_theta, ctx.minus_one):
        logger.debug(f"clamping cosine {ctx.to_string(cos_theta, 20)} to -1")
        cos_theta = ctx.minus_one
    return Radian(to_float(acos_mpf(cos_theta, ctx)))
