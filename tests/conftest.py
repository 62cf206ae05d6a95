"""Global fixtures for enum_field tests."""

import pytest

from enum_field import EnumField, define_enum


@pytest.fixture
def make_host():
    """Factory for fresh host classes, so registries never leak between tests."""

    def _make(name="Host", base=object):
        return type(name, (base,), {})

    return _make


@pytest.fixture
def colors():
    """Colors with red and green on auto ids 1 and 2."""

    class Colors(EnumField):
        pass

    @Colors.define_enum
    def _colors(b):
        b.member("red")
        b.member("green")

    return Colors


@pytest.fixture
def positions():
    """Positions: top, right, bottom on auto ids, left on id 100."""

    class Positions:
        pass

    def _positions(b):
        b.member("top")
        b.member("right")
        b.member("bottom")
        b.member("left", id=100)

    define_enum(Positions, _positions)
    return Positions
