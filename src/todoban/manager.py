"""Board operations, one per menu command.

Every operation runs to completion and reports its own outcome through the
ConsoleIO. Bad input never raises out of here: it is either re-prompted
(size) or reported and turned into an Outcome without touching the board.
"""

import logging
from enum import Enum

from todoban.console import ConsoleIO
from todoban.model.board import Board
from todoban.model.card import BoardLine, Card, CardSize, parse_number

logger = logging.getLogger(__name__)

EMPTY_MARKER = "~ EMPTY ~"
SEPARATOR = "*" * 24


class Outcome(Enum):
    """How an operation ended."""

    DONE = "done"
    CANCELLED = "cancelled"
    INVALID = "invalid"
    NOT_FOUND = "not-found"


class BoardManager:
    """Runs List, Add, Delete and Move against one Board."""

    def __init__(self, board: Board, io: ConsoleIO) -> None:
        self.board = board
        self.io = io

    # --- List ---

    def list_board(self) -> Outcome:
        """Show every line in order, cards in store order, empty lines marked."""
        for line in BoardLine:
            self.io.say()
            self.io.header(f"--- {line.label} Line ---")
            self.io.say(SEPARATOR)
            cards = self.board.store.in_line(line)
            if not cards:
                self.io.say(EMPTY_MARKER)
            for card in cards:
                self._show_card(card)
        return Outcome.DONE

    def _show_card(self, card: Card, with_line: bool = False) -> None:
        self.io.say(f"Title       : {card.title}")
        self.io.say(f"Content     : {card.content}")
        self.io.say(f"Assigned To : {self.board.roster.name_or_unknown(card.assigned_person_id)}")
        self.io.say(f"Size        : {card.size.name}")
        if with_line:
            self.io.say(f"Line        : {card.line.name}")
        self.io.say("-")

    # --- Add ---

    def add_card(self) -> Outcome:
        """Create a card in TODO. An unknown assignee cancels the whole add."""
        title = self.io.ask("Enter Title   : ")
        content = self.io.ask("Enter Content : ")
        size = self._ask_size()

        person_id = self._ask_person_id()
        if person_id is None:
            self.io.error("Invalid entries made! Operation cancelled.")
            return Outcome.CANCELLED

        self.board.store.append(Card(title, content, person_id, size))
        logger.info("added card %r (size %s, assignee %d)", title, size.name, person_id)
        self.io.success("Card added successfully to TODO line!")
        return Outcome.DONE

    def _ask_size(self) -> CardSize:
        """Prompt until a valid size token is entered."""
        while True:
            raw = self.io.ask(f"Select Size -> {CardSize.menu()} : ")
            size = CardSize.parse(raw)
            if size is not None:
                return size
            logger.debug("rejected size input %r", raw)
            self.io.error(f"Invalid size input. Please enter a number between 1 and {len(CardSize)}.")

    def _ask_person_id(self) -> int | None:
        """Prompt once for an assignee. None if the input isn't a known member id."""
        self.io.say("Available Team Members:")
        for member in self.board.roster:
            self.io.say(f"- {member.id}: {member.name}")
        raw = self.io.ask("Select Person ID : ")
        person_id = parse_number(raw)
        if person_id is None:
            logger.debug("rejected assignee input %r", raw)
            self.io.error("Invalid input. Please enter a numeric ID.")
            return None
        if not self.board.roster.exists(person_id):
            logger.debug("no team member with id %d", person_id)
            self.io.error("Invalid ID. No team member found with that ID.")
            return None
        return person_id

    # --- Delete ---

    def delete_card(self) -> Outcome:
        """Delete every card with the given title (case-insensitive)."""
        while True:
            title = self.io.ask(
                "\nFirst, you need to select the card you want to delete. Please enter the card title: "
            )
            removed = self.board.store.remove_matching(title)
            if removed:
                logger.info("deleted %d card(s) titled %r", len(removed), title)
                noun = "card" if len(removed) == 1 else "cards"
                self.io.success(f"Deleted {len(removed)} {noun} with title '{title}' successfully!")
                return Outcome.DONE
            outcome = self._not_found("delete")
            if outcome is not None:
                return outcome

    # --- Move ---

    def move_card(self) -> Outcome:
        """Move the first card with the given title to another line."""
        while True:
            title = self.io.ask(
                "\nFirst, you need to select the card you want to move. Please enter the card title: "
            )
            card = self.board.store.first_matching(title)
            if card is not None:
                return self._move(card)
            outcome = self._not_found("move")
            if outcome is not None:
                return outcome

    def _move(self, card: Card) -> Outcome:
        self.io.say()
        self.io.header("Found Card Information:")
        self.io.say("*" * 38)
        self._show_card(card, with_line=True)

        self.io.say()
        self.io.say("Please select the Line you want to move to:")
        for line in BoardLine:
            self.io.say(f"({line.token}) {line.label}")
        raw = self.io.ask("Your choice: ")
        target = BoardLine.parse(raw)
        if target is None:
            logger.debug("rejected line choice %r", raw)
            self.io.error("You made an invalid selection! Operation cancelled.")
            return Outcome.INVALID

        source = card.line
        card.line = target
        logger.info("moved card %r from %s to %s", card.title, source.name, target.name)
        self.io.success(f"Card '{card.title}' moved to {target.name} line successfully!")
        self.list_board()
        return Outcome.DONE

    # --- Not-found recovery ---

    def _not_found(self, operation: str) -> Outcome | None:
        """Offer end-or-retry after a failed title lookup.

        Returns None when the user asks to retry, otherwise how the
        operation ended.
        """
        self.io.error("No card matching your criteria was found on the board. Please make a selection.")
        self.io.say(f"* To end the {operation}: (1)")
        self.io.say("* To try again: (2)")
        choice = self.io.ask("Your choice: ")
        if choice == "2":
            logger.debug("retrying %s", operation)
            return None
        if choice == "1":
            return Outcome.NOT_FOUND
        self.io.error("Invalid choice. Returning to main menu.")
        return Outcome.INVALID
