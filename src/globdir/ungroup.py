from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

__all__ = ["GlobUngrouper", "ungroup_globs"]


class NodeKind(Enum):
    SEQUENCE = "sequence"
    CHOICE = "choice"
    TEXT = "text"


@dataclass
class _Node:
    kind: NodeKind
    parent: Optional[int]
    children: List[int] = field(default_factory=list)
    text: List[str] = field(default_factory=list)


class GlobUngrouper:
    """Builds the tree of brace groups of a pattern and flattens it to the list of alternatives.

    Nodes live in a flat list and reference their parent by index. A sequence holds text and choice
    nodes in order, a choice holds one sequence per comma separated branch. `current` always points to
    the sequence that receives the next character.
    """

    def __init__(self) -> None:
        self._nodes: List[_Node] = []
        self._root = self._new_node(NodeKind.SEQUENCE, None)
        self._current = self._root
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    def _new_node(self, kind: NodeKind, parent: Optional[int]) -> int:
        index = len(self._nodes)
        self._nodes.append(_Node(kind, parent))
        if parent is not None:
            self._nodes[parent].children.append(index)
        return index

    def _parent(self, index: int) -> int:
        parent = self._nodes[index].parent
        if parent is None:
            raise ValueError("root node has no parent")
        return parent

    def add_char(self, c: str) -> None:
        sequence = self._nodes[self._current]
        if sequence.children and self._nodes[sequence.children[-1]].kind == NodeKind.TEXT:
            text = sequence.children[-1]
        else:
            text = self._new_node(NodeKind.TEXT, self._current)
        self._nodes[text].text.append(c)

    def start_level(self) -> None:
        choice = self._new_node(NodeKind.CHOICE, self._current)
        self._current = self._new_node(NodeKind.SEQUENCE, choice)
        self._level += 1

    def add_group(self) -> None:
        self._current = self._new_node(NodeKind.SEQUENCE, self._parent(self._current))

    def finish_level(self) -> None:
        self._current = self._parent(self._parent(self._current))
        self._level -= 1

    def _flatten(self, index: int) -> List[str]:
        node = self._nodes[index]

        if node.kind == NodeKind.TEXT:
            return ["".join(node.text)]

        if node.kind == NodeKind.CHOICE:
            return [s for child in node.children for s in self._flatten(child)]

        return ["".join(p) for p in itertools.product(*(self._flatten(child) for child in node.children))]

    def flatten(self) -> List[str]:
        if self._level != 0:
            return []

        return self._flatten(self._root)


def ungroup_globs(pattern: str, no_escape: bool) -> List[str]:
    """Expands the ``{a,b}`` groups of a pattern to the cross product of all alternatives.

    An unbalanced ``{`` or ``}`` anywhere in the pattern yields no alternatives at all.
    Escaped ``,``, ``{`` and ``}`` lose their backslash, every other escape is kept for the later
    matching stages.
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a str, not {type(pattern).__name__}")

    ungrouper = GlobUngrouper()

    in_escape = False
    for c in pattern:
        if in_escape:
            if c not in ",{}":
                ungrouper.add_char("\\")
            ungrouper.add_char(c)
            in_escape = False
            continue

        if c == "\\" and not no_escape:
            in_escape = True
            continue

        if c == "{":
            ungrouper.start_level()
        elif c == ",":
            if ungrouper.level < 1:
                ungrouper.add_char(c)
            else:
                ungrouper.add_group()
        elif c == "}":
            if ungrouper.level < 1:
                return []
            ungrouper.finish_level()
        else:
            ungrouper.add_char(c)

    if in_escape:
        ungrouper.add_char("\\")

    return ungrouper.flatten()
