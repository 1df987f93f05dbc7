import json

import pytest

from storybalance.rules import Action, ActionCatalog, Rule, UnknownActionError
from storybalance.tree import BalancingTree, NavigationError


@pytest.fixture
def catalog():
    actions = [
        Action(0, "attack", "Hit the enemy"),
        Action(1, "defend", "Raise the shield"),
        Action(2, "flee", "Run away"),
    ]
    return ActionCatalog(actions, [Rule([0, 1], True), Rule([2], False)])


@pytest.fixture
def tree(catalog):
    return BalancingTree(3, catalog)


def _walk(node):
    yield node
    for child in node.children:
        yield from _walk(child)


def test_probabilities_sum_to_one(tree):
    for node in _walk(tree.root):
        total = node.good_prob + node.neut_prob + node.bad_prob
        assert total == pytest.approx(1.0)


def test_leaves_follow_rules(tree, catalog):
    for node in _walk(tree.root):
        if not node.is_leaf:
            assert node.children
            continue
        reward = catalog.compare_with_rules(node.path)
        assert node.depth == tree.max_depth or reward != 0
        expected = {1: (1.0, 0.0, 0.0), -1: (0.0, 0.0, 1.0), 0: (0.0, 1.0, 0.0)}
        assert (node.good_prob, node.neut_prob, node.bad_prob) == expected[reward]


def test_paths_extend_parent(tree):
    for node in _walk(tree.root):
        for child in node.children:
            assert child.path == node.path + (child.action_id,)
            assert child.depth == node.depth + 1


def test_root_state(tree):
    state = json.loads(tree.json_state())
    assert state["current_action"] == "root"
    assert state["maximum_remaining_moves"] == f"{tree.max_depth - 1}/{tree.max_depth - 1}"
    assert [item["action"] for item in state["next_actions"]] == [
        "attack",
        "defend",
        "flee",
    ]


def test_flee_child_is_certain_bad(tree):
    state = json.loads(tree.json_state())
    flee = state["next_actions"][2]
    assert flee["bad_prob"] == "1.00"
    assert flee["good_prob"] == "0.00"


def test_navigate_moves_current(tree):
    tree.navigate_to_action("attack")
    state = json.loads(tree.json_state())
    assert state["current_action"] == "attack"
    assert tree.current.path == (0,)
    assert not tree.is_current_node_leaf()


def test_navigate_into_leaf(tree):
    tree.navigate_to_action("flee")
    assert tree.is_current_node_leaf()
    assert json.loads(tree.json_state())["next_actions"] == []


def test_navigate_from_leaf_raises(tree):
    tree.navigate_to_action("flee")
    with pytest.raises(NavigationError):
        tree.navigate_to_action("attack")
    assert tree.current.path == (2,)


def test_navigate_unknown_action(tree):
    with pytest.raises(UnknownActionError):
        tree.navigate_to_action("dance")


def test_invalid_depth(catalog):
    with pytest.raises(ValueError):
        BalancingTree(0, catalog)


def test_depth_one_children_are_leaves(catalog):
    small = BalancingTree(1, catalog)
    assert all(child.is_leaf for child in small.root.children)
    assert len(small.root.children) == 3


def test_actions_json_delegates(tree, catalog):
    assert tree.actions_json() == catalog.actions_json()


def test_reward_probabilities_table(tree):
    lines = tree.reward_probabilities().split("\n")
    assert lines[0].strip() == "Root Reward Probabilities"
    assert len(lines[0]) == 30
    assert lines[1].split() == ["Good", "Neutral", "Bad"]
    values = [float(v) for v in lines[2].split()]
    assert values == [
        pytest.approx(round(p, 2))
        for p in (tree.root.good_prob, tree.root.neut_prob, tree.root.bad_prob)
    ]
    assert lines[3] == ""