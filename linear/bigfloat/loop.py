# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional

from mpmath.libmp import fone, mpf_abs, mpf_cmp, mpf_shift, mpf_sign, to_str

from .context import MPF, Context
from .errors import ConvergenceError

logger = logging.getLogger(__name__)


def ulp(z: MPF, precision: int) -> MPF:
    """
    One unit in the last place of `z` at `precision` bits.

    With z = m * 2**e and 0.5 <= |m| < 1 this is 2**(e - precision).
    Zero is treated as having e = 0.
    """
    _sign, _man, exp, bc = z
    return mpf_shift(fone, exp + bc - precision)


class ConvergenceMonitor:
    """
    Decide when a fixed-point style loop has stopped improving.

    A loop has converged once consecutive iterates differ by no more than
    one ULP of the latest one. The iteration bound grows with precision,
    ``10 + iters_per_bit * precision``, so callers state their cost per bit
    and never deal with the precision themselves.

    Parameters
    ----------
    name : str
        Function being evaluated (diagnostics only).
    arg : raw value
        Original argument of that function (diagnostics only).
    iters_per_bit : int
        Iterations allowed per bit of working precision.
    ctx : Context
        Working precision.
    max_iterations : int or None
        Override the derived bound.
    """

    def __init__(
        self,
        name: str,
        arg: MPF,
        iters_per_bit: int,
        ctx: Context,
        max_iterations: Optional[int] = None,
    ):
        self.name = name
        self.arg = arg
        self.ctx = ctx
        self.iterations = 0
        if max_iterations is None:
            max_iterations = 10 + iters_per_bit * ctx.precision
        self.max_iterations = max_iterations
        self.prev = ctx.zero
        self.delta = ctx.zero

    def done(self, z: MPF) -> bool:
        """Record iterate `z` and report whether the loop may stop."""
        self.delta = mpf_abs(self.ctx.sub(self.prev, z))
        if mpf_sign(self.delta) == 0:
            return self._converged()
        if mpf_cmp(self.delta, ulp(z, self.ctx.precision)) <= 0:
            return self._converged()

        self.iterations += 1
        if self.iterations == self.max_iterations:
            msg = (
                f"{self.name} {self._fmt(self.arg)}: did not converge after "
                f"{self.max_iterations} iterations; prev,last result "
                f"{self._fmt(self.prev)},{self._fmt(z)} delta {self._fmt(self.delta)}"
            )
            logger.error(msg)
            raise ConvergenceError(msg)
        self.prev = z
        return False

    def _converged(self) -> bool:
        logger.debug(f"{self.name} converged after {self.iterations} iterations")
        return True

    def _fmt(self, s: MPF) -> str:
        return to_str(s, 20)
