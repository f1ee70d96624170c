# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>


class BigFloatError(Exception):
    """Base class for errors raised by the extended-precision solvers."""


class DomainError(BigFloatError, ValueError):
    """The argument lies outside the domain of the function."""


class ConvergenceError(BigFloatError, RuntimeError):
    """
    An iterative solver exceeded its iteration bound.

    The bound is derived from the working precision and is sufficient for
    every in-domain argument, so this always indicates a defect in the
    solver. Treat it like a failed assertion; retrying cannot succeed.
    """
