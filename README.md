# storybalance

Building blocks for a text story. A narrator writes each turn, and a decision
tree records how likely each ending still is from the current point.

## Modules

- `storybalance.rules`: `Action`, `Rule` and `ActionCatalog`. A catalog holds
  the story's actions and the rules that end the story well or badly.
  `compare_with_rules(path)` returns `1` when a good rule's sequence appears in
  the path as a subsequence, `-1` for a bad rule and `0` when no rule matches.
  Rules are checked in order, and the first match decides. `actions_json()` and
  `rules_as_words()` return indented JSON text. An unknown name or id raises
  `UnknownActionError`.
- `storybalance.tree`: `BalancingTree` and `Node`. The tree expands every
  sequence of actions up to `max_depth`, or until a rule matches. It then works
  out the share of good, neutral and bad endings below each node.
  `navigate_to_action(name)` moves the current node to the matching child. It
  raises `NavigationError` when there is no such child. `json_state()`
  describes the current node and the odds of each next action.
  `reward_probabilities()` returns a small table of the root's odds, and
  `is_current_node_leaf()` reports whether the story has ended.
- `storybalance.prompt`: `RequestTemplate`, `load_request_template(paths_file)`
  and `ProgramRequest`.
  - `load_request_template` reads a file that lists one section file per line.
    The first nine sections fill the template. Missing files, or fewer than nine
    sections, raise `RequestTemplateError`.
  - `ProgramRequest` has four attributes that change on every turn:
    `previous_actions`, `actions_names`, `current_state` and `current_action`.
  - `ProgramRequest.render()` joins the template with those four attributes and
    wraps each of them in a code fence.
- `storybalance.history`: `PreviousActions` collects responses given as JSON
  text through `add()`. `to_json()` returns them as an object keyed `"1"`,
  `"2"`, and so on, and `save()` writes that object to its file.
- `storybalance.interaction`: `ConsoleInput.get_action()` writes a prompt, then
  reads lines until the first blank line or the end of input.
  `print_incident(text, stream)` writes the text followed by a newline.

## Example

```python
from storybalance.rules import Action, Rule, ActionCatalog
from storybalance.tree import BalancingTree

catalog = ActionCatalog(
    [Action(0, "open", "open the door"), Action(1, "run", "run away")],
    [Rule([0, 0], True), Rule([1], False)],
)
tree = BalancingTree(3, catalog)
print(tree.reward_probabilities())
tree.navigate_to_action("open")
print(tree.json_state())
```

## What it does not do

The package has no command to run and no main dialogue loop. It does not send
requests to a narrating model, and it does not check or parse the model's
replies. It reads no configuration file and has no scripted input source. To
build a playable game, write your own loop around these modules that does
the following:

1. Fill a `ProgramRequest`.
2. Send `render()` to a model of your choice.
3. Record the reply with `PreviousActions.add()`.
4. Show the narrated incident with `print_incident()`.
5. Move the tree with `navigate_to_action()`.

## Tests

```
pip install -e ".[test]"
pytest
```