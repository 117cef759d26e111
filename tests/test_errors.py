"""Tests for failure kinds and the message table."""

import pickle

import pytest

pytestmark = pytest.mark.unit

import runtime_ensure
from runtime_ensure import ArgumentError, ArgumentNullError
from runtime_ensure.messages import CHECK_FAILURES


class TestArgumentError:
    """Test ArgumentError semantics."""

    def test_is_value_error(self):
        """Both kinds are ValueErrors; a null argument is an invalid one."""
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(ArgumentNullError, ArgumentError)

    def test_str_includes_argument_name(self):
        """The argument name is appended to the message."""
        assert str(ArgumentError("Cannot be empty.", "name")) == "Cannot be empty. (argument 'name')"
        assert str(ArgumentError("Cannot be empty.")) == "Cannot be empty."

    def test_null_error_default_message(self):
        """ArgumentNullError has a fixed default message."""
        exc = ArgumentNullError("client")
        assert exc.message == "Value cannot be None."
        assert exc.argument_name == "client"

    @pytest.mark.parametrize("exc", [ArgumentError("bad", "x"), ArgumentNullError("x")])
    def test_survives_pickling(self, exc):
        """Errors cross process boundaries intact."""
        restored = pickle.loads(pickle.dumps(exc))
        assert type(restored) is type(exc)
        assert restored.message == exc.message
        assert restored.argument_name == exc.argument_name


class TestCheckFailures:
    """Test the failure table against the public API."""

    def test_every_public_check_is_listed(self):
        """Each documented check is exported and vice versa."""
        exported = {
            name for name in runtime_ensure.__all__
            if name not in {"config", "ArgumentError", "ArgumentNullError", "is_nullable_type"}
        }
        assert exported == set(CHECK_FAILURES)
