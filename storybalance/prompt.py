"""Prompt templates and the request text sent to the story model."""

from __future__ import annotations

from dataclasses import dataclass, fields
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = [
    "RequestTemplate",
    "ProgramRequest",
    "RequestTemplateError",
    "load_request_template",
    "DEFAULT_PATHS_FILE",
]

DEFAULT_PATHS_FILE = "RequestStructure/StructureElementPaths.txt"

_FENCE = "```\n"

StrPath = Union[str, "PathLike[str]"]


class RequestTemplateError(Exception):
    """Raised when a request template cannot be loaded."""


@dataclass(frozen=True)
class RequestTemplate:
    """The fixed text blocks that frame every request, in prompt order."""

    task: str = ""
    input_description: str = ""
    situation: str = ""
    endings: str = ""
    previous_actions: str = ""
    actions_names: str = ""
    current_state: str = ""
    current_action: str = ""
    output_format: str = ""


def _read_lines(path: Path) -> list[str]:
    text = path.read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_request_template(paths_file: StrPath = DEFAULT_PATHS_FILE) -> RequestTemplate:
    """Load a template from a file listing one element file path per line.

    Each element file is read line by line and every line is kept with a
    trailing newline. The first nine listed files fill the template fields
    in order; further files are ignored.
    """
    try:
        element_paths = _read_lines(Path(paths_file))
    except OSError as exc:
        raise RequestTemplateError(
            "Cannot open structure element paths file"
        ) from exc

    elements = []
    for element_path in element_paths:
        try:
            lines = _read_lines(Path(element_path))
        except OSError as exc:
            raise RequestTemplateError(
                f"Cannot open structure element file: {element_path}"
            ) from exc
        elements.append("".join(line + "\n" for line in lines))

    names = [f.name for f in fields(RequestTemplate)]
    if len(elements) < len(names):
        raise RequestTemplateError(
            f"Cannot input structure elements: expected {len(names)}, "
            f"got {len(elements)}"
        )
    return RequestTemplate(**dict(zip(names, elements)))


class ProgramRequest:
    """A request built from a fixed template and the parts that change per turn."""

    def __init__(self, template: RequestTemplate) -> None:
        self.template = template
        self.previous_actions = ""
        self.actions_names = ""
        self.current_state = ""
        self.current_action = ""

    def render(self) -> str:
        """Return the full request text."""
        t = self.template
        return "".join(
            [
                t.task,
                t.input_description,
                t.situation,
                t.endings,
                t.previous_actions,
                _FENCE, self.previous_actions, _FENCE,
                t.actions_names,
                _FENCE, self.actions_names, _FENCE,
                t.current_state,
                _FENCE, self.current_state, _FENCE,
                t.current_action,
                _FENCE, self.current_action, _FENCE,
                t.output_format,
            ]
        )