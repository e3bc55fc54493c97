"""Tests for custom exceptions."""

import errno

from tree_export.exceptions import ConfigurationError, TraversalError


class TestConfigurationError:
    """Test ConfigurationError exception."""

    def test_is_value_error(self):
        error = ConfigurationError("Invalid --max-depth value")
        assert isinstance(error, ValueError)
        assert str(error) == "Invalid --max-depth value"


class TestTraversalError:
    """Test TraversalError exception."""

    def test_wraps_cause(self):
        cause = PermissionError(errno.EACCES, "Permission denied")
        error = TraversalError("/srv/private", cause)

        assert isinstance(error, OSError)
        assert error.path == "/srv/private"
        assert error.cause is cause
        assert error.errno == errno.EACCES
        assert str(error) == "Cannot read /srv/private: Permission denied"

    def test_cause_without_strerror(self):
        error = TraversalError("/tmp/x", OSError("disk on fire"))
        assert str(error) == "Cannot read /tmp/x: disk on fire"

    def test_without_cause(self):
        error = TraversalError("/tmp/x")
        assert error.cause is None
        assert str(error) == "Cannot read /tmp/x: unknown error"
