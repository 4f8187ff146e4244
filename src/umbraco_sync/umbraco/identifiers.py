"""Element identifiers (UDIs) for Umbraco block list items.

Umbraco addresses block list elements by ``umb://element/{guid}`` where the
guid is a version-4 UUID written without hyphens.
"""

from __future__ import annotations

import random
import uuid

UDI_PREFIX = "umb://element/"


def to_udi(guid: str) -> str:
    """Render a canonical hyphenated guid as an element UDI."""
    return f"{UDI_PREFIX}{guid.replace('-', '')}"


class UdiGenerator:
    """Source of fresh element UDIs.

    Without an explicit ``rng`` guids come from ``uuid.uuid4()``. Passing a
    seeded ``random.Random`` makes the sequence reproducible for tests.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def new_guid(self) -> str:
        """Return a canonical hyphenated version-4 guid."""
        if self._rng is None:
            return str(uuid.uuid4())
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def new_udi(self) -> str:
        return to_udi(self.new_guid())
