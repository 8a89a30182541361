"""Pytest configuration for raykernel tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session before any
Canvas allocates its pixel field.
"""

import math

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields allocated by earlier tests.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64)
    yield


@pytest.fixture
def sqrt2_2():
    """Half the square root of two, used by 45-degree cases."""
    return math.sqrt(2.0) / 2.0
