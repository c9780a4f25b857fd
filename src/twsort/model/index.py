"""SelectorIndex: the canonical rank table of known selectors."""

from __future__ import annotations

from typing import Iterable, Iterator


class SelectorIndex:
    """Immutable, ordered, duplicate-free sequence of selectors.

    A selector's position in the sequence is its sort rank. Duplicates in the
    input are dropped, keeping the first occurrence.
    """

    __slots__ = ("_selectors", "_positions")

    def __init__(self, selectors: Iterable[str] = ()) -> None:
        positions: dict[str, int] = {}
        for selector in selectors:
            if selector not in positions:
                positions[selector] = len(positions)
        self._positions = positions
        self._selectors = tuple(positions)

    @property
    def selectors(self) -> tuple[str, ...]:
        return self._selectors

    def position(self, selector: str) -> int:
        """Return the rank of *selector*, or ``-1`` when it is unknown."""
        return self._positions.get(selector, -1)

    def __contains__(self, selector: object) -> bool:
        return selector in self._positions

    def __len__(self) -> int:
        return len(self._selectors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._selectors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectorIndex):
            return self._selectors == other._selectors
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._selectors)

    def __repr__(self) -> str:
        return f"SelectorIndex({len(self._selectors)} selectors)"
