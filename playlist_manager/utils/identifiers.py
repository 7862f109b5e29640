"""Generation of user and playlist identities."""

import uuid
from typing import Callable

IdentifierFactory = Callable[[], str]


def new_identifier() -> str:
    """
    Return a fresh, globally unique identifier.

    Returns:
        32-character lowercase hexadecimal string.
    """
    return uuid.uuid4().hex
