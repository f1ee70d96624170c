# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import mpmath
import numpy as np
import pytest
from mpmath.libmp import mpf_neg

import linear.bigfloat.arcsin as arcsin_mod
from linear.bigfloat import Context, DomainError, acos, asin

CTX = Context(256)
TOL = mpmath.mpf(10) ** -70


def test_asin_boundaries_are_exact(monkeypatch):
    def no_series(*args, **kwargs):
        raise AssertionError("asin(±1) must not evaluate a series")

    monkeypatch.setattr(arcsin_mod, "atan_mpf", no_series)
    monkeypatch.setattr(arcsin_mod, "sqrt_mpf", no_series)
    assert asin(1, ctx=CTX)._mpf_ == CTX.half_pi
    assert asin(-1, ctx=CTX)._mpf_ == mpf_neg(CTX.half_pi)


def test_asin_zero_is_zero():
    assert asin(0, ctx=CTX) == 0


def test_acos_boundaries():
    assert acos(1, ctx=CTX) == 0
    assert acos(-1, ctx=CTX)._mpf_ == CTX.pi
    assert acos(0, ctx=CTX)._mpf_ == CTX.half_pi


def test_asin_half_is_sixth_pi():
    r = asin(0.5, ctx=CTX)
    assert CTX.to_string(r, 60).startswith("0.52359877559829887307")
    with mpmath.workprec(256):
        assert abs(r - mpmath.pi / 6) < mpmath.mpf(10) ** -50


@pytest.mark.parametrize("x", np.linspace(-0.99, 0.99, 11))
def test_sin_of_asin_round_trips(x):
    r = asin(float(x), ctx=CTX)
    with mpmath.workprec(256):
        assert abs(mpmath.sin(r) - mpmath.mpf(float(x))) < TOL


@pytest.mark.parametrize("x", [-1, -0.75, -0.5, 0, 0.3, 0.999, 1])
def test_acos_plus_asin_is_half_pi(x):
    a = acos(x, ctx=CTX)
    s = asin(x, ctx=CTX)
    with mpmath.workprec(256):
        assert abs(a + s - mpmath.pi / 2) < TOL


@pytest.mark.parametrize("x", [1.5, -1.0000001, "1.00000000000000000000000000001", 1e10])
def test_out_of_range_is_domain_error(x):
    with pytest.raises(DomainError, match="outside"):
        asin(x, ctx=CTX)
    with pytest.raises(DomainError):
        acos(x, ctx=CTX)


def test_asin_double_precision():
    ctx = Context(53)
    for x in [0.5, -0.25, 0.9]:
        assert math.isclose(float(asin(x, ctx=ctx)), math.asin(x), rel_tol=1e-13)
        assert math.isclose(float(acos(x, ctx=ctx)), math.acos(x), rel_tol=1e-13)
