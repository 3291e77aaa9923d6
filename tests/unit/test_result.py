"""
Unit tests for lifecycle Result values.
"""

import pytest
from confvault.domain.result import Result, RUN, SESSION
from confvault.errors import CleanupError, StorageError, ValidationError


def test_success_is_truthy():
    """Test successful result."""
    result = Result.success("abc")

    assert result
    assert result.ok
    assert result.value == "abc"
    assert result.fatal is None
    assert result.message is None
    assert result.unwrap() == "abc"


def test_storage_failure_is_fatal_for_scope():
    """Test storage errors abort the hook's scope."""
    run_result = Result.failure(StorageError("disk full"), RUN)
    session_result = Result.failure(StorageError("disk full"), SESSION)

    assert not run_result
    assert run_result.fatal == "run"
    assert session_result.fatal == "session"
    assert run_result.message == "disk full"


def test_validation_failure_is_not_fatal():
    """Test validation errors never abort."""
    result = Result.failure(ValidationError("empty value"), SESSION)

    assert not result
    assert result.fatal is None


def test_cleanup_failed():
    """Test cleanup-only failure is flagged and not fatal."""
    result = Result.failure(CleanupError("rmtree failed"), RUN)

    assert not result
    assert result.cleanup_failed
    assert result.fatal is None
    assert not Result.failure(StorageError("x"), RUN).cleanup_failed


def test_unwrap_raises_carried_error():
    """Test unwrap re-raises."""
    result = Result.failure(ValidationError("empty value"), SESSION)

    with pytest.raises(ValidationError, match="empty value"):
        result.unwrap()
