"""The board: roster plus card store, and the startup seed."""

from __future__ import annotations

from dataclasses import dataclass, field

from todoban.model.card import BoardLine, Card, CardSize
from todoban.model.roster import Roster, TeamMember
from todoban.model.store import CardStore

SEED_MEMBERS = (
    TeamMember(1, "John Doe"),
    TeamMember(2, "Jane Smith"),
    TeamMember(3, "Peter Jones"),
    TeamMember(4, "Alice Brown"),
)

SEED_CARDS = (
    ("Frontend Dev", "Develop user interface", 1, CardSize.M, BoardLine.TODO),
    ("Backend API", "Create RESTful endpoints", 2, CardSize.L, BoardLine.IN_PROGRESS),
    ("Database Setup", "Configure SQL database", 1, CardSize.S, BoardLine.DONE),
    ("User Auth", "Implement user authentication", 3, CardSize.XL, BoardLine.TODO),
)


@dataclass
class Board:
    """All session state. One instance per session, passed explicitly."""

    roster: Roster
    store: CardStore = field(default_factory=CardStore)


def seed_board(seed_cards: bool = True) -> Board:
    """Build the startup board.

    The roster is always seeded; the sample cards only when seed_cards is set.
    """
    roster = Roster(SEED_MEMBERS)
    store = CardStore()
    if seed_cards:
        for title, content, person_id, size, line in SEED_CARDS:
            store.append(Card(title, content, person_id, size, line))
    return Board(roster=roster, store=store)
