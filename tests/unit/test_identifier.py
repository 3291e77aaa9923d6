"""
Unit tests for the identifier function.
"""

import secrets

import pytest
from confvault.domain.identifier import identify, IDENTIFIER_LENGTH
from confvault.errors import ValidationError


def test_identify_is_deterministic():
    """Test equal values give equal identifiers."""
    assert identify("hunter2") == identify("hunter2")


def test_identify_text_and_bytes_agree():
    """Test text is hashed as its UTF-8 bytes."""
    assert identify("pässword") == identify("pässword".encode("utf-8"))


def test_identify_format():
    """Test identifier is fixed-length lowercase hex."""
    identifier = identify("secretA")

    assert len(identifier) == IDENTIFIER_LENGTH
    assert identifier == identifier.lower()
    int(identifier, 16)  # Valid hex
    assert "\t" not in identifier


def test_identify_distinct_values():
    """Test distinct values give distinct identifiers."""
    values = {secrets.token_hex(16) for _ in range(500)}
    identifiers = {identify(v) for v in values}

    assert len(identifiers) == len(values)


def test_identify_near_values_differ():
    """Test values differing in one character differ."""
    assert identify("secret1") != identify("secret2")
    assert identify("secret") != identify("secret ")


@pytest.mark.parametrize("value", ["", b"", None])
def test_identify_rejects_empty(value):
    """Test empty input is a validation error."""
    with pytest.raises(ValidationError):
        identify(value)
