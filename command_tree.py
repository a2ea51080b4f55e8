#!/usr/bin/env python3
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

NODE_KINDS = ("root", "literal", "argument")

# Path of child names from the root; the root itself is ()
NodePath = Tuple[str, ...]


class CommandGraphError(Exception):
    pass


class CommandTreeError(CommandGraphError, ValueError):
    pass


@dataclass(frozen=True)
class CommandNode:
    kind: str
    children: Dict[str, "CommandNode"] = field(default_factory=dict)
    executable: bool = False
    parser: Optional[str] = None
    redirects: Tuple[str, ...] = ()

    def iter_nodes(self, path: NodePath = ()):
        """Yield (path, node) for this node and every descendant, in pre-order."""
        yield path, self
        for name, child in self.children.items():
            yield from child.iter_nodes(path + (name,))

    def count(self) -> int:
        return sum(1 for _ in self.iter_nodes())


def _expect(value: Any, kind: type, what: str, where: str) -> Any:
    if not isinstance(value, kind):
        raise CommandTreeError(f"{where}: '{what}' must be {kind.__name__}, got {type(value).__name__}")
    return value


def node_from_json(data: Any, where: str = "(root)") -> CommandNode:
    """
    Build a CommandNode from one decoded JSON object of commands.json.
    Unknown keys (e.g. argument "properties") are ignored.
    """
    _expect(data, dict, "node", where)
    if "type" not in data:
        raise CommandTreeError(f"{where}: missing required key 'type'")
    kind = _expect(data["type"], str, "type", where)
    if kind not in NODE_KINDS:
        raise CommandTreeError(f"{where}: unknown node type {kind!r}")

    raw_children = data.get("children")
    children: Dict[str, CommandNode] = {}
    if raw_children is not None:
        _expect(raw_children, dict, "children", where)
        for name, payload in raw_children.items():
            children[name] = node_from_json(payload, where=f"{where}/{name}")

    executable = data.get("executable")
    if executable is None:
        executable = False
    _expect(executable, bool, "executable", where)

    parser = data.get("parser")
    if parser is not None:
        _expect(parser, str, "parser", where)

    raw_redirects = data.get("redirect")
    redirects: Tuple[str, ...] = ()
    if raw_redirects is not None:
        _expect(raw_redirects, list, "redirect", where)
        for target in raw_redirects:
            _expect(target, str, "redirect entry", where)
        redirects = tuple(raw_redirects)

    return CommandNode(kind=kind, children=children, executable=executable,
                       parser=parser, redirects=redirects)


def parse_command_tree(text: str) -> CommandNode:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CommandTreeError(str(e)) from e
    return node_from_json(data)


def load_command_tree(path: str) -> CommandNode:
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_command_tree(text)
