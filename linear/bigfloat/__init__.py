# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
linear.bigfloat
===============

Square root and inverse trigonometric functions on arbitrary-precision
binary floats (`mpmath.mpf`), evaluated at a fixed working precision with
iteration that stops once the result no longer changes in its last bit.

>>> from linear.bigfloat import Context, sqrt
>>> ctx = Context(256)
>>> ctx.to_string(sqrt(2, ctx=ctx), 30)
'1.41421356237309504880168872421'
"""

from .arcsin import acos, asin
from .arctan import MAX_EULER_DEPTH, atan
from .context import (
    DEFAULT_PRECISION,
    DOUBLE_PRECISION,
    MAX_PRECISION,
    Context,
    configure,
    get_context,
)
from .errors import BigFloatError, ConvergenceError, DomainError
from .loop import ConvergenceMonitor, ulp
from .root import sqrt

__all__ = [
    "sqrt",
    "atan",
    "asin",
    "acos",
    "Context",
    "configure",
    "get_context",
    "ConvergenceMonitor",
    "ulp",
    "BigFloatError",
    "DomainError",
    "ConvergenceError",
    "DEFAULT_PRECISION",
    "DOUBLE_PRECISION",
    "MAX_PRECISION",
    "MAX_EULER_DEPTH",
]
