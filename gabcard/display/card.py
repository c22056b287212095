"""Terminal card display for evolving strings."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console
from rich.text import Text

from gabcard.config import Config


class CardDisplay:
    """Print the current best candidate, coloured per character code.

    Every ``print`` overwrites the previous line, so the card appears to
    settle in place while the population converges.
    """

    def __init__(
        self,
        config: type[Config] | None = None,
        stream: TextIO | None = None,
        color: bool = True,
    ) -> None:
        """Initialize the display.

        Args:
            config: Configuration dataclass.
            stream: Text stream to write to, ``sys.stdout`` by default.
            color: If False, write plain text without colour styles.
        """
        self.config = config or Config
        self.stream = stream or sys.stdout
        self.color = color
        self.colors = self.config.COLOR_PALETTE
        self.console = Console(
            file=self.stream,
            force_terminal=True if color else None,
            color_system="truecolor" if color else None,
            no_color=not color,
            highlight=False,
            soft_wrap=True,
        )
        self.frames = 0

    def get_color(self, code: int) -> str:
        """Return the palette colour for a character code.

        Codes sitting exactly on a threshold fall through to the last colour.
        """
        low, mid, high = self.config.COLOR_THRESHOLDS
        if code < low:
            return self.colors[0]
        if low < code < mid:
            return self.colors[1]
        if mid < code < high:
            return self.colors[2]
        return self.colors[3]

    def paint(self, text: str) -> Text:
        """Style every character of ``text`` with its colour."""
        painted = Text()
        for ch in text:
            painted.append(ch, style=self.get_color(ord(ch)))
        return painted

    def print(self, text: str) -> None:
        """Render callback: overwrite the card line with ``text``."""
        self.stream.write("\r")
        self.console.print(self.paint(text), end="")
        self.stream.flush()
        self.frames += 1

    def show_info(self, generation: int, population_size: int) -> None:
        """Completion summary printed under the finished card."""
        self.console.print()
        self.console.print(
            f"A total of {generation * population_size} creatures were brought "
            f"to life in {generation} generations."
        )
        self.stream.flush()
