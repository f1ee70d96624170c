# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

ONE_DECIMAL_PLACE: float = 0.15
TWO_DECIMAL_PLACES: float = 0.015
THREE_DECIMAL_PLACES: float = 0.0015

DEFAULT_TOLERANCE: float = 1e-10


def is_within(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return True when `a` and `b` are no further than `tolerance` apart."""
    return abs(a - b) <= tolerance
