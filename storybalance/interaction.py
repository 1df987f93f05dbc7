"""Reading the player's action and showing what happened."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

__all__ = ["ConsoleInput", "print_incident", "PROMPT"]

PROMPT = "Do action:\n"


class ConsoleInput:
    """Reads a multi-line action from a text stream, ended by a blank line."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def get_action(self) -> str:
        """Prompt, then return the lines read until a blank line or end of input."""
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout
        stdout.write(PROMPT)
        stdout.flush()
        parts = []
        for line in iter(stdin.readline, ""):
            if line.endswith("\n"):
                line = line[:-1]
            if not line:
                break
            parts.append(line + "\n")
        return "".join(parts)


def print_incident(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    out = stream if stream is not None else sys.stdout
    out.write(text + "\n")
    out.flush()