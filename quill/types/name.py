"""Identifiers for variable bindings."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """Hashable identifier, compared by its text; the text is interned."""

    id: str

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Name must be a non-empty string, got {self.id!r}")
        object.__setattr__(self, "id", sys.intern(self.id))

    # Names are immutable; environments and values share them freely.
    def __copy__(self) -> Name:
        return self

    def __deepcopy__(self, memo) -> Name:
        return self

    def __str__(self) -> str:
        return self.id
