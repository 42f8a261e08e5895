"""Graphviz DOT serialization for handing a graph to an external renderer."""

import os
from typing import List, Union

from graph_metrics.graph_store import GraphStore

NODE_STYLE = 'fontname="SansSerif", fontsize=12, style=filled, fillcolor="#C0C0C0"'


def _quote(value: object) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def to_dot(graph: GraphStore, name: str = "G") -> str:
    """
    Serialize the graph as an undirected DOT ``graph`` block.

    Vertices are emitted in ascending order and edges sorted by their
    (smaller, larger) endpoint pair, one line per stored edge, so the same
    graph always produces the same text.

    Args:
        graph: The graph to serialize
        name: Graph identifier written after the ``graph`` keyword

    Returns:
        DOT source text ending with a newline
    """
    lines: List[str] = [f"graph {_quote(name)} {{",
                        "    rankdir=LR;",
                        f"    node [{NODE_STYLE}];"]

    for vertex in graph.sorted_vertices():
        lines.append(f"    {_quote(vertex)} [label={_quote(vertex)}];")

    edges = sorted((min(u, v), max(u, v)) for u, v in graph.edges())
    for u, v in edges:
        lines.append(f"    {_quote(u)} -- {_quote(v)};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: GraphStore, path: Union[str, os.PathLike], name: str = "G") -> None:
    """Write to_dot(graph, name) to path."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_dot(graph, name=name))
