"""The record of what has happened so far in a story."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Iterator, Union

__all__ = ["PreviousActions", "DEFAULT_FILE_NAME"]

DEFAULT_FILE_NAME = "SavesPreviousActions.txt"

StrPath = Union[str, "PathLike[str]"]


class PreviousActions:
    """Model responses collected turn by turn and saved as numbered JSON."""

    def __init__(self, path: StrPath = DEFAULT_FILE_NAME) -> None:
        self.path = Path(path)
        self._actions: list[Any] = []

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._actions)

    def add(self, action: str) -> None:
        """Record one response, given as a JSON document.

        Raises ValueError if ``action`` is not valid JSON.
        """
        self._actions.append(json.loads(action))

    def to_json(self) -> str:
        """Return the responses as a JSON object keyed "1", "2", ... in turn order."""
        if not self._actions:
            return "{}"
        numbered = {str(index): action for index, action in enumerate(self._actions, 1)}
        return json.dumps(numbered, indent=4, sort_keys=True, ensure_ascii=False)

    def save(self) -> None:
        """Write the responses to the history file, replacing its contents."""
        self.path.write_text(self.to_json() + "\n", encoding="utf-8")