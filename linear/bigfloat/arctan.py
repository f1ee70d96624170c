# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

import mpmath
from mpmath.libmp import fhalf, mpf_abs, mpf_gt, mpf_lt, mpf_neg, mpf_shift, mpf_sign

from .context import MPF, Context, get_context
from .errors import ConvergenceError
from .loop import ConvergenceMonitor
from .root import sqrt_mpf

logger = logging.getLogger(__name__)

# Nested Euler steps allowed in one call. Every step moves the argument
# out of (0.5, 1.5) or down towards 0.2, so two are the most ever needed.
MAX_EULER_DEPTH: int = 3


def atan(x, ctx: Optional[Context] = None) -> mpmath.mpf:
    """
    Arctangent of `x` in radians, for any real `x`.

    Two Taylor series are used: one around 0 for |x| <= 1 and one around
    infinity for |x| > 1. Both crawl near 1, so arguments there are first
    shifted away with an Euler identity.
    """
    ctx = ctx or get_context()
    return ctx.make(atan_mpf(ctx.convert(x), ctx))


def atan_mpf(x: MPF, ctx: Context, depth: int = 0) -> MPF:
    # atan(-x) == -atan(x); do this first so the crossover test below
    # only has to look at one side of 1.
    if mpf_sign(x) < 0:
        return mpf_neg(atan_mpf(mpf_neg(x), ctx, depth))

    # Near 1 either series needs on the order of a million terms. Use
    #   atan(x) = atan(y) + atan((x - y) / (1 + xy))
    # with y = √2 - 1, because atan(√2 - 1) = π/8. Crossing over at a
    # distance of 0.5 keeps (x - y) / (1 + xy) below 0.66.
    if mpf_lt(mpf_abs(ctx.sub(ctx.one, x)), fhalf):
        if depth >= MAX_EULER_DEPTH:
            msg = f"atan {ctx.to_string(x, 20)}: Euler reduction nested {depth} deep"
            logger.error(msg)
            raise ConvergenceError(msg)
        return _atan_euler(x, ctx, depth + 1)

    if mpf_gt(x, ctx.one):
        return _atan_large(x, ctx)
    return _atan_small(x, ctx)


def _atan_euler(x: MPF, ctx: Context, depth: int) -> MPF:
    z = mpf_shift(ctx.pi, -3)
    y = ctx.sub(sqrt_mpf(ctx.two, ctx), ctx.one)
    num = ctx.sub(x, y)
    den = ctx.add(ctx.mul(x, y), ctx.one)
    logger.debug(f"atan Euler step {depth}")
    return ctx.add(z, atan_mpf(ctx.div(num, den), ctx, depth))


def _atan_small(x: MPF, ctx: Context) -> MPF:
    """atan(x) = x - x³/3 + x⁵/5 - x⁷/7 + ...  for 0 <= x <= 1"""
    x_n = x
    x_squared = ctx.mul(x, x)
    z = ctx.zero

    loop = ConvergenceMonitor("atan", x, 4, ctx)
    while True:
        term = ctx.div(x_n, ctx.integer(2 * loop.iterations + 1))
        z = ctx.add(z, term)
        x_n = mpf_neg(x_n)
        if loop.done(z):
            return z
        x_n = ctx.mul(x_n, x_squared)


def _atan_large(x: MPF, ctx: Context) -> MPF:
    """atan(x) = π/2 - 1/x + 1/3x³ - 1/5x⁵ + 1/7x⁷ - ...  for x > 1"""
    x_n = x
    x_squared = ctx.mul(x, x)
    z = ctx.half_pi

    loop = ConvergenceMonitor("atan", x, 4, ctx)
    while True:
        x_n = mpf_neg(x_n)
        term = ctx.mul(x_n, ctx.integer(2 * loop.iterations + 1))
        z = ctx.add(z, ctx.div(ctx.one, term))
        if loop.done(z):
            return z
        x_n = ctx.mul(x_n, x_squared)
