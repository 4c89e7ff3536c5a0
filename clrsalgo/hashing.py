"""Hash tables with chaining and direct-address tables."""

from __future__ import annotations

from collections import deque


class ChainedHashTable:
    """Keys hashed by ``key % slots`` into chains; new keys go to the chain's head."""

    def __init__(self, slots: int = 10) -> None:
        if slots <= 0:
            raise ValueError(f"slot count must be positive: {slots}")
        self._chains: list[deque[int]] = [deque() for _ in range(slots)]

    def _chain_for(self, key: int) -> deque[int]:
        return self._chains[key % len(self._chains)]

    def insert(self, key: int) -> None:
        """Add key unless it is already present."""
        chain = self._chain_for(key)
        if key not in chain:
            chain.appendleft(key)

    def search(self, key: int) -> bool:
        """Tell whether key is present."""
        return key in self._chain_for(key)

    def delete(self, key: int) -> None:
        """Remove key; raise KeyError if it is absent."""
        try:
            self._chain_for(key).remove(key)
        except ValueError:
            raise KeyError(key) from None

    def chain(self, index: int) -> list[int]:
        """Return the keys in slot index, head first."""
        return list(self._chains[index])

    def format(self) -> str:
        """Render every slot as a header line followed by its keys."""
        return "".join(
            f"the {i} line\n" + "".join(f"{k} " for k in chain) + "\n"
            for i, chain in enumerate(self._chains)
        )


class DirectAddressTable:
    """A table indexed directly by key, for keys in [0, size)."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"table size must not be negative: {size}")
        self._slots: list[int | None] = [None] * size

    def _check(self, key: int) -> None:
        if not 0 <= key < len(self._slots):
            raise IndexError(f"key {key} out of range for {len(self._slots)} slots")

    def insert(self, key: int) -> None:
        """Store key in its slot."""
        self._check(key)
        self._slots[key] = key

    def search(self, key: int) -> int | None:
        """Return the key stored in key's slot, or None if it is empty."""
        self._check(key)
        return self._slots[key]

    def delete(self, key: int) -> None:
        """Empty key's slot."""
        self._check(key)
        self._slots[key] = None