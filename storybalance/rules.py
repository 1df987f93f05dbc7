"""Actions, ending rules and the catalog that matches action paths against them."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = ["Action", "Rule", "ActionCatalog", "UnknownActionError"]


class UnknownActionError(LookupError):
    """Raised when an action name or id is not in the catalog."""


@dataclass(frozen=True)
class Action:
    """A single action a player can take."""

    id: int
    name: str
    description: str = ""


@dataclass(frozen=True)
class Rule:
    """An ordered action sequence that ends the story well or badly."""

    action_sequence: tuple[int, ...]
    is_good_rule: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "action_sequence", tuple(self.action_sequence))


def _dump(value: object) -> str:
    return json.dumps(value, indent=4, sort_keys=True, ensure_ascii=False)


class ActionCatalog:
    """Known actions together with the rules that decide endings."""

    def __init__(self, actions: Iterable[Action], rules: Iterable[Rule]) -> None:
        self._actions = list(actions)
        self._rules = list(rules)
        self._name_to_id = {action.name: action.id for action in self._actions}
        self._id_to_name = {action.id: action.name for action in self._actions}

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def action_id_by_name(self, name: str) -> int:
        """Return the id of the action called ``name``."""
        try:
            return self._name_to_id[name]
        except KeyError:
            raise UnknownActionError(f"Action name not found: {name}") from None

    def action_name_by_id(self, action_id: int) -> str:
        """Return the name of the action with ``action_id``."""
        try:
            return self._id_to_name[action_id]
        except KeyError:
            raise UnknownActionError(f"Action id not found: {action_id}") from None

    def action_ids(self) -> list[int]:
        """Return the ids of all actions in catalog order."""
        return [action.id for action in self._actions]

    def compare_with_rules(self, path: Sequence[int]) -> int:
        """Return 1 if a good rule matches ``path``, -1 for a bad one, else 0.

        A rule matches when its sequence occurs in ``path`` as a
        subsequence; rules are tried in order and the first match wins.
        """
        for rule in self._rules:
            sequence = rule.action_sequence
            if not sequence:
                continue
            matched = 0
            for action in path:
                if action == sequence[matched]:
                    matched += 1
                    if matched == len(sequence):
                        return 1 if rule.is_good_rule else -1
        return 0

    def actions_json(self) -> str:
        """Return the actions' names and descriptions as indented JSON."""
        if not self._actions:
            return "null"
        return _dump(
            [{"name": a.name, "description": a.description} for a in self._actions]
        )

    def rules_as_words(self) -> str:
        """Return the rules as JSON lists of action names, split by ending."""
        good: list[list[str]] = []
        bad: list[list[str]] = []
        for rule in self._rules:
            words = [
                self._actions[i].name
                if 0 <= i < len(self._actions)
                else f"[UNKNOWN_ID_{i}]"
                for i in rule.action_sequence
            ]
            (good if rule.is_good_rule else bad).append(words)
        return _dump({"good_ending": good, "bad_ending": bad})