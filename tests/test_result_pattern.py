"""Tests for the Result pattern implementation.

Subject resolution reports its failures through these types.
"""

import pytest

from workflow_entity.domain.result import (
    DomainError,
    Failure,
    InvalidPathError,
    NotFoundError,
    Success,
    TagNotFoundError,
    failure,
    success,
    try_catch,
)


class TestSuccess:
    """Test the Success result type."""

    def test_success_creation(self):
        result = Success(42)
        assert result.is_success() is True
        assert result.is_failure() is False
        assert result.value() == 42

    def test_success_repr(self):
        assert repr(Success("test")) == "Success('test')"

    def test_success_error_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from Success result"):
            Success(42).error()

    def test_success_map(self):
        mapped = Success(5).map(lambda x: x * 2)
        assert isinstance(mapped, Success)
        assert mapped.value() == 10

    def test_success_map_propagates_unexpected_errors(self):
        with pytest.raises(ZeroDivisionError):
            Success(0).map(lambda x: 1 / x)

    def test_success_flat_map(self):
        assert Success(5).flat_map(lambda x: Success(x * 2)).value() == 10

    def test_success_flat_map_to_failure(self):
        flat_mapped = Success(0).flat_map(lambda x: failure(NotFoundError("zero")))
        assert isinstance(flat_mapped, Failure)
        assert str(flat_mapped.error()) == "zero"

    def test_success_or_else(self):
        result = Success(42)
        assert result.or_else(0) == 42


class TestFailure:
    """Test the Failure result type."""

    def test_failure_creation(self):
        error = NotFoundError("missing")
        result = Failure(error)
        assert result.is_success() is False
        assert result.is_failure() is True
        assert result.error() is error

    def test_failure_value_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from Failure result"):
            Failure(NotFoundError("missing")).value()

    def test_failure_map_is_skipped(self):
        result = Failure(NotFoundError("missing"))
        assert result.map(lambda x: x * 2) is result
        assert result.flat_map(lambda x: Success(x)) is result

    def test_failure_or_else(self):
        result = Failure(NotFoundError("missing"))
        assert result.or_else("") == ""

    def test_failure_repr(self):
        assert repr(Failure(NotFoundError("x"))) == "Failure(NotFoundError('x'))"


class TestHelpers:
    """Test helper functions."""

    def test_success_and_failure(self):
        assert success(1).value() == 1
        assert isinstance(failure(NotFoundError()).error(), NotFoundError)

    def test_try_catch_success(self):
        assert try_catch(lambda: 3).value() == 3

    def test_try_catch_matching_error(self):
        def lookup():
            raise NotFoundError("gone")

        result = try_catch(lookup, NotFoundError)
        assert result.is_failure()
        assert str(result.error()) == "gone"

    def test_try_catch_error_tuple(self):
        def link():
            raise InvalidPathError("bad")

        assert try_catch(link, (InvalidPathError, NotFoundError)).is_failure()

    def test_try_catch_lets_other_errors_through(self):
        def broken():
            raise KeyError("route")

        with pytest.raises(KeyError):
            try_catch(broken, NotFoundError)


class TestDomainErrors:
    """Test the domain error hierarchy."""

    @pytest.mark.parametrize("error_class", [NotFoundError, InvalidPathError, TagNotFoundError])
    def test_errors_are_domain_errors(self, error_class):
        assert issubclass(error_class, DomainError)

    def test_tag_not_found_carries_missing_ids(self):
        error = TagNotFoundError("missing", missing=["3"])
        assert error.missing == ["3"]
        assert TagNotFoundError("missing").missing == []
