"""Input source and output sink used by board operations."""

from __future__ import annotations

from typing import IO, Callable

from rich.console import Console
from rich.text import Text

Ask = Callable[[str], str]

STYLE_ERROR = "bold red"
STYLE_SUCCESS = "green"
STYLE_HEADER = "bold cyan"


def make_console(color: bool = True, file: IO[str] | None = None) -> Console:
    """Console that prints text verbatim: no markup, emoji codes, highlighting or wrapping."""
    return Console(
        file=file,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        no_color=not color,
    )


class ConsoleIO:
    """Pairs a rich Console for output with a prompt function for input.

    The prompt function defaults to Console.input. Anything with the same
    signature works, which is how tests script a session.
    """

    def __init__(self, console: Console | None = None, ask: Ask | None = None) -> None:
        self.console = console or make_console()
        self._ask = ask or self.console.input

    def ask(self, prompt: str) -> str:
        return self._ask(prompt)

    def say(self, text: str = "") -> None:
        self.console.print(text)

    def header(self, text: str) -> None:
        self.console.print(Text(text, style=STYLE_HEADER))

    def success(self, text: str) -> None:
        self.console.print(Text(text, style=STYLE_SUCCESS))

    def error(self, text: str) -> None:
        self.console.print(Text(text, style=STYLE_ERROR))
