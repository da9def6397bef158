"""Tests for error kinds."""

import pytest

from repokit.errors import ErrorKind, OperationError, require_argument


def test_every_kind_has_distinct_nonzero_exit_code():
    codes = [kind.exit_code for kind in ErrorKind]
    assert 0 not in codes
    assert len(set(codes)) == len(codes)


def test_operation_error_message():
    err = OperationError(ErrorKind.NOT_FOUND, "missing")
    assert str(err) == "missing"
    assert err.kind is ErrorKind.NOT_FOUND


class TestRequireArgument:
    def test_returns_stripped_value(self):
        assert require_argument("  main ", "branch name") == "main"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_raise_validation_error(self, value):
        with pytest.raises(OperationError) as excinfo:
            require_argument(value, "branch name")
        assert excinfo.value.kind is ErrorKind.VALIDATION
        assert "branch name" in excinfo.value.message
