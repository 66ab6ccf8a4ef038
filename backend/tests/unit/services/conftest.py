"""Fixtures for service unit tests."""

from datetime import datetime

import pytest


@pytest.fixture
def d1():
    return datetime(2024, 1, 10, 14, 30)


@pytest.fixture
def d2():
    return datetime(2024, 2, 15, 10, 0)


@pytest.fixture
def d3():
    return datetime(2024, 3, 20, 16, 45)
