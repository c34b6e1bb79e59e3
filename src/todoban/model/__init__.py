"""Board state: roster, cards and their store."""

from todoban.model.board import Board, seed_board
from todoban.model.card import BoardLine, Card, CardSize
from todoban.model.roster import UNKNOWN_MEMBER, Roster, TeamMember
from todoban.model.store import CardStore

__all__ = [
    "UNKNOWN_MEMBER",
    "Board",
    "BoardLine",
    "Card",
    "CardSize",
    "CardStore",
    "Roster",
    "TeamMember",
    "seed_board",
]
