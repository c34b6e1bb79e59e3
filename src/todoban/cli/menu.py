"""Main menu loop: read a command token, run the matching operation."""

import logging

from todoban.console import ConsoleIO
from todoban.manager import BoardManager

logger = logging.getLogger(__name__)

EXIT = "0"

COMMANDS = {
    "1": ("List Board", BoardManager.list_board),
    "2": ("Add Card to Board", BoardManager.add_card),
    "3": ("Delete Card from Board", BoardManager.delete_card),
    "4": ("Move Card", BoardManager.move_card),
}


def show_menu(io: ConsoleIO) -> None:
    io.say()
    io.header("Please select an operation you want to perform :)")
    io.say("*" * 43)
    for token, (label, _) in COMMANDS.items():
        io.say(f"({token}) {label}")
    io.say(f"({EXIT}) Exit Application")


def run_menu(manager: BoardManager, io: ConsoleIO, pause: bool = True) -> int:
    """Dispatch commands until the user picks 0. Returns the exit code."""
    while True:
        show_menu(io)
        choice = io.ask("Your choice: ")

        if choice == EXIT:
            io.say("Exiting ToDo Application. Goodbye!")
            return 0

        command = COMMANDS.get(choice)
        if command is None:
            io.error("Invalid choice. Please try again.")
        else:
            label, operation = command
            outcome = operation(manager)
            logger.debug("%s finished: %s", label, outcome.value)

        if pause:
            io.ask("\nPress Enter to return to the main menu...")
