# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

from linear.radian import Radian
from linear.tolerance import ONE_DECIMAL_PLACE, is_within


def test_radian_to_degree_conversion():
    assert is_within(Radian(1).degrees(), 57.3, ONE_DECIMAL_PLACE)


def test_degree_to_radian_conversion():
    assert is_within(Radian.from_degrees(57.3), 1.0, ONE_DECIMAL_PLACE)


def test_round_trip():
    for deg in [0.0, 30.0, 90.0, 180.0, -45.0, 720.0]:
        assert math.isclose(Radian.from_degrees(deg).degrees(), deg, abs_tol=1e-12)
    assert math.isclose(Radian.from_degrees(180), math.pi)


def test_radian_is_a_float():
    r = Radian(0.5)
    assert r + 1 == 1.5
    assert repr(r) == "Radian(0.5)"
