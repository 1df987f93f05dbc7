"""A tree of every action path with the odds of each ending below it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from .rules import ActionCatalog

__all__ = ["Node", "BalancingTree", "NavigationError"]


class NavigationError(LookupError):
    """Raised when the current node has no child for the requested action."""


@dataclass(eq=False)
class Node:
    """One point in the action tree."""

    depth: int
    path: tuple[int, ...] = ()
    action_id: int = -1
    children: list[Node] = field(default_factory=list)
    good_prob: float = 0.0
    neut_prob: float = 0.0
    bad_prob: float = 0.0
    is_leaf: bool = False


class BalancingTree:
    """Every action path up to a depth, with good/neutral/bad ending odds."""

    def __init__(self, max_depth: int, catalog: ActionCatalog) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._catalog = catalog
        self._root = Node(depth=0)
        self._root.children = [
            self._build(self._root, action_id) for action_id in catalog.action_ids()
        ]
        self._compute_probabilities(self._root)
        self._current = self._root

    @property
    def root(self) -> Node:
        return self._root

    @property
    def current(self) -> Node:
        return self._current

    def _build(self, parent: Node, action_id: int) -> Node:
        node = Node(
            depth=parent.depth + 1,
            path=parent.path + (action_id,),
            action_id=action_id,
        )
        reward = self._catalog.compare_with_rules(node.path)
        if node.depth == self.max_depth or reward != 0:
            node.is_leaf = True
            if reward < 0:
                node.bad_prob = 1.0
            elif reward > 0:
                node.good_prob = 1.0
            else:
                node.neut_prob = 1.0
            return node
        node.children = [
            self._build(node, child_id) for child_id in self._catalog.action_ids()
        ]
        return node

    def _compute_probabilities(self, node: Node) -> None:
        if node.is_leaf:
            return
        good = neut = bad = 0.0
        for child in node.children:
            self._compute_probabilities(child)
            good += child.good_prob
            neut += child.neut_prob
            bad += child.bad_prob
        total = good + neut + bad
        if total > 0.0:
            node.good_prob = good / total
            node.neut_prob = neut / total
            node.bad_prob = bad / total

    def is_current_node_leaf(self) -> bool:
        return self._current.is_leaf

    def navigate_to_action(self, name: str) -> None:
        """Move the current node to its child for the action ``name``."""
        action_id = self._catalog.action_id_by_name(name)
        for child in self._current.children:
            if child.action_id == action_id:
                self._current = child
                return
        raise NavigationError(f"current node does not accept action: {name}")

    def json_state(self) -> str:
        """Return the current node and the odds of each next action as JSON."""
        node = self._current
        state = {
            "current_action": (
                self._catalog.action_name_by_id(node.action_id)
                if node.action_id >= 0
                else "root"
            ),
            "maximum_remaining_moves": (
                f"{self.max_depth - 1 - node.depth}/{self.max_depth - 1}"
            ),
            "next_actions": [
                {
                    "action": self._catalog.action_name_by_id(child.action_id),
                    "good_prob": f"{child.good_prob:.2f}",
                    "neut_prob": f"{child.neut_prob:.2f}",
                    "bad_prob": f"{child.bad_prob:.2f}",
                }
                for child in node.children
            ],
        }
        return json.dumps(state, indent=4, sort_keys=True, ensure_ascii=False)

    def actions_json(self) -> str:
        return self._catalog.actions_json()

    def reward_probabilities(self) -> str:
        """Return a small table of the root's ending odds."""
        root = self._root
        return (
            f"{'Root Reward Probabilities':>30}\n"
            f"{'Good':>10}{'Neutral':>10}{'Bad':>10}\n"
            f"{root.good_prob:>10.2f}{root.neut_prob:>10.2f}{root.bad_prob:>10.2f}\n"
        )