#!/usr/bin/env python3
from typing import List

import pydot

from command_graph import GraphElement, GraphNode

GRAPH_NAME = "MC commands"


def dot_quote(text: str) -> str:
    # pydot leaves an already double-quoted string untouched
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def to_pydot(elements: List[GraphElement], name: str = GRAPH_NAME) -> pydot.Dot:
    """
    Strict digraph with one statement per element, kept in emission order
    (pydot orders statements by the sequence they were added in).
    """
    graph = pydot.Dot(dot_quote(name), graph_type="digraph", strict=True)
    for e in elements:
        if isinstance(e, GraphNode):
            graph.add_node(pydot.Node(
                str(e.id),
                shape=e.shape,
                label=dot_quote(e.label),
                style=e.style,
                fillcolor=e.fillcolor,
                fontcolor=e.fontcolor,
                color=e.color,
            ))
        elif e.dashed:
            graph.add_edge(pydot.Edge(str(e.src), str(e.dst), style="dashed"))
        else:
            graph.add_edge(pydot.Edge(str(e.src), str(e.dst)))
    return graph


def render_dot(elements: List[GraphElement], name: str = GRAPH_NAME) -> str:
    return to_pydot(elements, name).to_string()


def write_dot(elements: List[GraphElement], out_path: str, name: str = GRAPH_NAME) -> None:
    text = render_dot(elements, name)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(text)
