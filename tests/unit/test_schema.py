"""Unit tests for the method-name schema.

Tests cover:
- Default bindings
- Validation of required and optional roles
- Copy-with-changes and per-role lookup
"""

import pytest

from objiterate.core.driver.errors import ConfigurationError
from objiterate.core.iterate import transform
from objiterate.core.schema.iterable import SupportsIterate
from objiterate.core.schema.names import DEFAULT_NAMES, ROLES, MethodNames


def test_default_names():
    """Test the documented default bindings."""
    names = MethodNames()

    assert names.next == "__next__"
    assert names.more == "__more__"
    assert names.init == "__init__"
    assert names.final == "__final__"
    assert names == DEFAULT_NAMES


def test_roles_order():
    """Test that required roles come before the optional hooks."""
    assert ROLES == ("more", "next", "init", "final")


@pytest.mark.parametrize("role", ["next", "more"])
@pytest.mark.parametrize("value", ["", None, 42])
def test_required_role_rejects_invalid_name(role, value):
    """Test that required roles must be non-empty strings."""
    with pytest.raises(ConfigurationError) as exc_info:
        MethodNames(**{role: value})

    assert exc_info.value.role == role
    assert exc_info.value.value == value
    assert isinstance(exc_info.value, ValueError)


def test_optional_roles_accept_none():
    """Test that hooks can be disabled with None."""
    names = MethodNames(init=None, final=None)

    assert names.init is None
    assert names.final is None


def test_optional_role_rejects_non_string():
    """Test that hook names must be strings when given."""
    with pytest.raises(ConfigurationError) as exc_info:
        MethodNames(final=3)

    assert exc_info.value.role == "final"


def test_with_roles_returns_copy():
    """Test that with_roles leaves the original snapshot untouched."""
    renamed = DEFAULT_NAMES.with_roles(more="has_more", next="fetch")

    assert renamed.more == "has_more"
    assert renamed.next == "fetch"
    assert renamed.init == "__init__"
    assert DEFAULT_NAMES.more == "__more__"


def test_with_roles_unknown_role():
    """Test that an unknown role is rejected."""
    with pytest.raises(ConfigurationError, match="Unknown iteration role"):
        DEFAULT_NAMES.with_roles(produce="fetch")


def test_with_roles_validates_values():
    """Test that with_roles applies the same validation as the constructor."""
    with pytest.raises(ConfigurationError):
        DEFAULT_NAMES.with_roles(next="")


def test_for_role():
    """Test looking up a binding by role name."""
    names = MethodNames(final="close")

    assert names.for_role("final") == "close"
    assert names.for_role("more") == "__more__"
    with pytest.raises(ConfigurationError):
        names.for_role("start")


def test_names_are_frozen():
    """Test that a snapshot cannot be changed in place."""
    names = MethodNames()

    with pytest.raises(AttributeError):
        names.more = "other"


def test_to_dict():
    """Test serializing a snapshot."""
    assert MethodNames(init=None).to_dict() == {
        "next": "__next__",
        "more": "__more__",
        "init": None,
        "final": "__final__",
    }


def test_supports_iterate_protocol():
    """Test the structural protocol for the default contract."""

    class Countdown:
        def __more__(self):
            return False

        def __next__(self):
            return None

    class OnlyNext:
        def __next__(self):
            return None

    assert isinstance(Countdown(), SupportsIterate)
    assert not isinstance(OnlyNext(), SupportsIterate)


class Countdown:
    """Countdown from a class-level start value; __init__ rewinds it."""

    start = 3

    def __init__(self):
        self.n = self.start

    def __more__(self):
        return self.n > 0

    def __next__(self):
        self.n -= 1
        return self.n + 1


def test_documented_countdown_example():
    """Test the SupportsIterate docstring example end to end."""
    class FromFive(Countdown):
        start = 5

    countdown = FromFive()
    countdown.n = 1

    assert isinstance(countdown, SupportsIterate)
    assert transform(lambda x: x, countdown) == [5, 4, 3, 2, 1]
    assert transform(lambda x: x, Countdown()) == [3, 2, 1]
