"""Symbol identifier allocation with batch-wide uniqueness."""

import re
from typing import Iterator

FALLBACK_ID = "symbol"


class IdentifierRegistry:
    """Allocates unique symbol ids for one compilation.

    Create a fresh registry per compilation and discard it afterwards.
    Allocation order decides which duplicate gets which ``-N`` suffix, so
    a registry must only be used from a single sequential pass.

    Attributes:
        strict: Replace every character outside ``[a-z0-9-]`` rather than
            only whitespace
        prefix: String prepended to every sanitized candidate
    """

    def __init__(self, strict: bool = False, prefix: str = ""):
        self.strict = strict
        self.prefix = prefix
        self._allocated: dict[str, None] = {}
        self._next_suffix: dict[str, int] = {}

    def sanitize(self, name: str) -> str:
        """Derive the candidate id for a name (before uniqueness is applied)."""
        candidate = name.strip().lower()
        if self.strict:
            candidate = re.sub(r"[^a-z0-9-]+", "-", candidate).strip("-")
        else:
            candidate = re.sub(r"\s+", "-", candidate)
        return self.prefix + (candidate or FALLBACK_ID)

    def allocate(self, name: str) -> str:
        """Reserve and return a unique id derived from name.

        The bare candidate is used when free, otherwise ``candidate-1``,
        ``candidate-2`` and so on.
        """
        candidate = self.sanitize(name)
        symbol_id = candidate
        if symbol_id in self._allocated:
            counter = self._next_suffix.get(candidate, 1)
            symbol_id = f"{candidate}-{counter}"
            while symbol_id in self._allocated:
                counter += 1
                symbol_id = f"{candidate}-{counter}"
            self._next_suffix[candidate] = counter + 1
        self._allocated[symbol_id] = None
        return symbol_id

    @property
    def allocated(self) -> tuple[str, ...]:
        return tuple(self._allocated)

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self._allocated

    def __len__(self) -> int:
        return len(self._allocated)

    def __iter__(self) -> Iterator[str]:
        return iter(self._allocated)
