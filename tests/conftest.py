"""Shared fixtures: seeded boards and scripted console sessions."""

from io import StringIO

import pytest

from todoban.console import ConsoleIO, make_console
from todoban.manager import BoardManager
from todoban.model.board import seed_board


class ScriptedIO(ConsoleIO):
    """ConsoleIO fed from a list of answers, output captured in a buffer.

    Raises EOFError once the answers run out, like a closed stdin.
    """

    def __init__(self, answers):
        self.buffer = StringIO()
        super().__init__(make_console(color=False, file=self.buffer), ask=self._next)
        self.answers = list(answers)
        self.prompts = []

    def _next(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def output(self):
        return self.buffer.getvalue()


@pytest.fixture
def scripted():
    """Factory: scripted(["1", "0"]) → ScriptedIO."""
    return ScriptedIO


@pytest.fixture
def board():
    """Board seeded with the four team members and four sample cards."""
    return seed_board()


@pytest.fixture
def empty_board():
    return seed_board(seed_cards=False)


@pytest.fixture
def run_op(board):
    """Run one manager operation against the seeded board with scripted input.

    Returns (outcome, io).
    """

    def _run(operation, answers, target=None):
        io = ScriptedIO(answers)
        manager = BoardManager(target or board, io)
        outcome = getattr(manager, operation)()
        return outcome, io

    return _run
