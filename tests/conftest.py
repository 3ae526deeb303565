"""Shared pytest fixtures for tzrules tests."""

import pytest

from tzrules import get_zone
from tzrules.rules import make_time


def at(year, month, day, hour=0, minute=0, second=0):
    """Instant for a wall-clock time; reads better than make_time in asserts."""
    return make_time(year, month, day, hour, minute, second)


@pytest.fixture
def eastern():
    """US Eastern: EDT from the second Sunday of March, EST from the first Sunday of November."""
    return get_zone("usET")


@pytest.fixture
def sydney():
    """Australia Eastern: AEDT from the first Sunday of October, AEST from the first Sunday of April."""
    return get_zone("ausET")


@pytest.fixture
def arizona():
    """Mountain Standard Time all year."""
    return get_zone("usAZ")


@pytest.fixture
def central_europe():
    return get_zone("CE")
