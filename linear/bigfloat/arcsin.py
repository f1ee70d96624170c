# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import mpmath
from mpmath.libmp import mpf_abs, mpf_eq, mpf_gt, mpf_neg

from .arctan import atan_mpf
from .context import MPF, Context, get_context
from .errors import DomainError
from .root import sqrt_mpf


def asin(x, ctx: Optional[Context] = None) -> mpmath.mpf:
    """
    Arcsine of `x` in radians, for x in [-1, 1].

    Raises
    ------
    DomainError : if |x| > 1.
    """
    ctx = ctx or get_context()
    return ctx.make(asin_mpf(ctx.convert(x), ctx))


def acos(x, ctx: Optional[Context] = None) -> mpmath.mpf:
    """Arccosine of `x` in radians, computed as π/2 - asin(x)."""
    ctx = ctx or get_context()
    return ctx.make(acos_mpf(ctx.convert(x), ctx))


def asin_mpf(x: MPF, ctx: Context) -> MPF:
    # The asin series is hopeless near ±1, but atan behaves everywhere:
    #   asin(x) = atan(x / √(1 - x²))
    # which divides by zero at |x| = 1, so those are answered directly.
    if mpf_gt(mpf_abs(x), ctx.one):
        raise DomainError(f"asin argument {ctx.to_string(x, 20)} outside [-1, 1]")
    if mpf_eq(x, ctx.one):
        return ctx.half_pi
    if mpf_eq(x, ctx.minus_one):
        return mpf_neg(ctx.half_pi)

    z = ctx.sub(ctx.one, ctx.mul(x, x))
    z = sqrt_mpf(z, ctx)
    return atan_mpf(ctx.div(x, z), ctx)


def acos_mpf(x: MPF, ctx: Context) -> MPF:
    return ctx.sub(ctx.half_pi, asin_mpf(x, ctx))
