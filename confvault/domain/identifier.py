"""
Identifier - Content address of a captured secret.

The identifier is both the deduplication key of the store and the
token embedded in redacted configuration text.
"""

import hashlib
from typing import Union

from confvault.errors import ValidationError


IDENTIFIER_LENGTH = 64


def identify(value: Union[str, bytes]) -> str:
    """
    Compute the identifier of a secret value.

    Args:
        value: Raw secret, as text (UTF-8 encoded before hashing) or bytes

    Returns:
        Lowercase hex SHA-256 digest

    Raises:
        ValidationError: If value is empty or None
    """
    if not value:
        raise ValidationError("empty value")

    if isinstance(value, str):
        value = value.encode("utf-8")

    return hashlib.sha256(value).hexdigest()
