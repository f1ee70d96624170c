# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import mpmath
from mpmath.libmp import mpf_sign

from .context import MPF, Context, get_context
from .errors import DomainError
from .loop import ConvergenceMonitor


def sqrt(x, ctx: Optional[Context] = None) -> mpmath.mpf:
    """
    Square root of `x` by Newton's method.

    Raises
    ------
    DomainError : if `x` is negative.
    """
    ctx = ctx or get_context()
    return ctx.make(sqrt_mpf(ctx.convert(x), ctx))


def sqrt_mpf(x: MPF, ctx: Context) -> MPF:
    sign = mpf_sign(x)
    if sign < 0:
        raise DomainError(f"square root of negative number {ctx.to_string(x, 20)}")
    if sign == 0:
        return ctx.zero

    # Seed with the binary exponent halved; the mantissa in [0.5, 1) is
    # left as is. Newton then needs only a handful of steps.
    _sign, man, exp, bc = x
    e = exp + bc
    half = e // 2 if e >= 0 else -(-e // 2)
    z = (0, man, half - bc, bc)

    loop = ConvergenceMonitor("sqrt", x, 1, ctx)
    while True:
        # z = z - (z² - x) / 2z
        num = ctx.sub(ctx.mul(z, z), x)
        den = ctx.mul(ctx.two, z)
        z = ctx.sub(z, ctx.div(num, den))
        if loop.done(z):
            return z
