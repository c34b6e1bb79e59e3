"""Ordered, insertion-preserving card storage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from todoban.model.card import BoardLine, Card


class CardStore:
    """Cards in insertion order.

    Nothing here re-sorts: grouping by line and title lookups both walk the
    sequence front to back, and removals keep the survivors' order.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def append(self, card: Card) -> None:
        self._cards.append(card)

    def in_line(self, line: BoardLine) -> list[Card]:
        """Cards on a line, in store order."""
        return [card for card in self._cards if card.line is line]

    def matching(self, title: str) -> list[Card]:
        """Every card whose title matches, ignoring case."""
        return [card for card in self._cards if card.matches(title)]

    def first_matching(self, title: str) -> Card | None:
        """Earliest-inserted card whose title matches, or None."""
        for card in self._cards:
            if card.matches(title):
                return card
        return None

    def remove_matching(self, title: str) -> list[Card]:
        """Remove all cards matching title. Returns the removed cards."""
        removed = []
        kept = []
        for card in self._cards:
            (removed if card.matches(title) else kept).append(card)
        self._cards = kept
        return removed
