# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
linear
======

A small, educational linear-algebra toolkit whose vector lengths and
angles are computed in extended precision.

Public API
~~~~~~~~~~
- Extended-precision functions (`linear.bigfloat`)
    - `sqrt`, `atan`, `asin`, `acos`
    - `Context`, `configure`, `get_context`
- Vectors
    - `magnitude`, `angle_between`, `is_zero_vector`
- Angles and comparisons
    - `Radian`, `is_within`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import linear as la
>>> ctx = la.Context(256)
>>> round(la.angle_between([1, 0, 0], [1, 1, 0], ctx=ctx).degrees(), 6)
45.0
"""

from importlib.metadata import version as _pkg_version

from .bigfloat import (
    DEFAULT_PRECISION,
    DOUBLE_PRECISION,
    BigFloatError,
    Context,
    ConvergenceError,
    DomainError,
    acos,
    asin,
    atan,
    configure,
    get_context,
    sqrt,
)
from .radian import Radian
from .tolerance import (
    DEFAULT_TOLERANCE,
    ONE_DECIMAL_PLACE,
    THREE_DECIMAL_PLACES,
    TWO_DECIMAL_PLACES,
    is_within,
)
from .vectors import angle_between, is_zero_vector, magnitude

__all__ = [
    "sqrt",
    "atan",
    "asin",
    "acos",
    "Context",
    "configure",
    "get_context",
    "BigFloatError",
    "DomainError",
    "ConvergenceError",
    "DEFAULT_PRECISION",
    "DOUBLE_PRECISION",
    "magnitude",
    "angle_between",
    "is_zero_vector",
    "Radian",
    "is_within",
    "DEFAULT_TOLERANCE",
    "ONE_DECIMAL_PLACE",
    "TWO_DECIMAL_PLACES",
    "THREE_DECIMAL_PLACES",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show linear”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
