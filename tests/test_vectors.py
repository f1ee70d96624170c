# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import mpmath
import numpy as np
import pytest

from linear import Context, Radian, angle_between, is_zero_vector, magnitude

CTX = Context(256)


def test_magnitude():
    # perfect squares
    assert float(magnitude([4, 0, 0], ctx=CTX)) == 4.0
    assert float(magnitude(np.array([3.0, 4.0]), ctx=CTX)) == 5.0
    assert math.isclose(float(magnitude([1, 1, 1], ctx=CTX)), 1.7320508076)


def test_magnitude_is_extended_precision():
    m = magnitude([1, 1], ctx=CTX)
    with mpmath.workprec(256):
        assert abs(m - mpmath.sqrt(2)) < mpmath.mpf(10) ** -70


def test_magnitude_zero_vector():
    assert magnitude([0, 0, 0], ctx=CTX) == 0


@pytest.mark.parametrize(
    "u, v, expected",
    [
        ((1, 0, 0), (0, 1, 0), math.pi / 2),
        ((1, 2, 3), (1, 2, 3), 0.0),
        ((1, 0, 0), (-1, 0, 0), math.pi),
        ((1, 0, 0), (1, 1, 0), math.pi / 4),
        ((2, -1, 3), (0, 4, -2), 2.21131864),
        ((123456, -98765, 50), (-23456, 8765, 100), 2.824433709487314),
        ((1e-8, 0, 0), (0, 1e-8, 0), math.pi / 2),
        ((3, -3, 1), (4, 9, 2), 1.8720947029995874),
    ],
)
def test_angle_between(u, v, expected):
    theta = angle_between(u, v, ctx=CTX)
    assert isinstance(theta, Radian)
    assert theta == pytest.approx(expected, abs=1e-7)


def test_angle_between_parallel_vectors_clamps():
    # cosine rounds past 1 for some parallel pairs
    for k in range(1, 20):
        u = np.array([0.1 * k, 0.3, 0.7])
        assert angle_between(u, 3 * u, ctx=CTX) == pytest.approx(0.0, abs=1e-12)
        assert angle_between(u, -u, ctx=CTX) == pytest.approx(math.pi, abs=1e-12)


def test_angle_between_dimension_mismatch():
    with pytest.raises(ValueError, match="different dimensions"):
        angle_between([1, 0], [1, 0, 0], ctx=CTX)


def test_angle_between_zero_vector():
    with pytest.raises(ValueError, match="zero-length"):
        angle_between([0, 0, 0], [1, 2, 3], ctx=CTX)


def test_non_vector_input_rejected():
    with pytest.raises(ValueError):
        magnitude([[1, 2], [3, 4]], ctx=CTX)
    with pytest.raises(ValueError):
        angle_between([1, np.nan], [1, 0], ctx=CTX)


def test_is_zero_vector():
    assert is_zero_vector([0, 0, 0])
    assert is_zero_vector([1e-12, -1e-12])
    assert not is_zero_vector([0, 1e-3])
    assert is_zero_vector([0, 1e-3], tolerance=1e-2)
