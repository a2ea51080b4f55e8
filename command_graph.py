#!/usr/bin/env python3
"""
Turn a command tree into an ordered sequence of DOT graph elements.

Two passes over the same tree:
  1. build()             - pre-order walk assigning ids 0..N-1, emitting a node
                           element and its parent edge for every tree node.
  2. resolve_redirects() - second walk emitting a dashed edge for every redirect,
                           looked up against the root's direct children only.

The ids from pass 1 are handed to pass 2 as a path -> id mapping; the parsed
tree itself is never annotated.
"""
import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

import networkx as nx

from command_tree import CommandGraphError, CommandNode, NodePath

PALE_GREEN = "palegreen"
WHITE = "white"
BLACK = "black"


class MissingNamespace(CommandGraphError, ValueError):
    pass


MalformedParserId = MissingNamespace


class RedirectTargetNotFound(CommandGraphError, LookupError):
    def __init__(self, name: str, source: NodePath):
        self.name = name
        self.source = source
        where = "/".join(source) or "(root)"
        super().__init__(f"Redirect target {name!r} of {where} is not a direct child of the root")


@dataclass(frozen=True)
class GraphNode:
    id: int
    label: str
    fillcolor: str
    shape: str = "box"
    style: str = "filled"
    fontcolor: str = BLACK
    color: str = BLACK


@dataclass(frozen=True)
class GraphEdge:
    src: int
    dst: int
    dashed: bool = False


GraphElement = Union[GraphNode, GraphEdge]


def remove_namespace(parser_id: Optional[str]) -> str:
    # "brigadier:integer" -> "integer"
    if parser_id is None or ":" not in parser_id:
        raise MissingNamespace(f"The parser id {parser_id} does not contain a namespace.")
    return parser_id.split(":", 1)[1]


def node_label(node: CommandNode, name: Optional[str]) -> str:
    if node.kind == "argument":
        return f"<{name}>\n({remove_namespace(node.parser)})"
    if node.kind == "literal":
        return f'"{name}"'
    return "(root)"


def build(root: CommandNode) -> Tuple[List[GraphElement], Dict[NodePath, int]]:
    """
    Pre-order walk of the tree. Returns the emitted elements (each node directly
    followed by the edge from its parent) and the path -> id mapping.
    """
    elements: List[GraphElement] = []
    ids: Dict[NodePath, int] = {}
    counter = itertools.count()

    def visit(node: CommandNode, path: NodePath, parent: Optional[int]) -> None:
        node_id = next(counter)
        ids[path] = node_id
        name = path[-1] if path else None
        elements.append(GraphNode(
            id=node_id,
            label=node_label(node, name),
            fillcolor=PALE_GREEN if node.executable else WHITE,
        ))
        if parent is not None:
            elements.append(GraphEdge(parent, node_id))
        for child_name, child in node.children.items():
            visit(child, path + (child_name,), node_id)

    visit(root, (), None)
    return elements, ids


def resolve_redirects(root: CommandNode, ids: Dict[NodePath, int]) -> List[GraphEdge]:
    """
    Dashed edge for every redirect name of every node. Names resolve against
    root.children only, however deep the redirecting node sits.
    """
    edges: List[GraphEdge] = []
    for path, node in root.iter_nodes():
        for target in node.redirects:
            if target not in root.children:
                raise RedirectTargetNotFound(target, path)
            edges.append(GraphEdge(ids[path], ids[(target,)], dashed=True))
    return edges


def command_graph(root: CommandNode) -> List[GraphElement]:
    elements, ids = build(root)
    elements.extend(resolve_redirects(root, ids))
    return elements


def iter_edges(elements: List[GraphElement]) -> Iterator[GraphEdge]:
    return (e for e in elements if isinstance(e, GraphEdge))


def to_networkx(elements: List[GraphElement]) -> nx.DiGraph:
    G = nx.DiGraph()
    for e in elements:
        if isinstance(e, GraphNode):
            G.add_node(e.id, label=e.label, fillcolor=e.fillcolor)
        else:
            G.add_edge(e.src, e.dst, style="dashed" if e.dashed else "solid")
    return G


def summarize(elements: List[GraphElement]) -> Dict[str, object]:
    G = to_networkx(elements)
    edges = list(iter_edges(elements))
    redirects = sum(1 for e in edges if e.dashed)
    return {
        "nodes": G.number_of_nodes(),
        "edges": len(edges) - redirects,
        "redirects": redirects,
        "acyclic": nx.is_directed_acyclic_graph(G),
    }
