"""Receipt identifier allocation."""

from __future__ import annotations

import uuid
from typing import Callable


def new_receipt_id() -> str:
    """Return a random UUID4 in canonical hyphenated form."""
    return str(uuid.uuid4())


class IdentifierAllocator:
    """Mint identifiers that are not already taken.

    ``factory`` produces candidates; it is swappable so tests can force
    collisions.
    """

    def __init__(self, factory: Callable[[], str] = new_receipt_id) -> None:
        self._factory = factory

    def allocate(self, exists: Callable[[str], bool]) -> str:
        """Return the first candidate for which ``exists`` is false."""
        while True:
            candidate = self._factory()
            if not exists(candidate):
                return candidate
