"""Matplotlib views of a graph and of its degree distribution."""

from typing import Optional

import matplotlib.pyplot as plt
import networkx as nx
from matplotlib.figure import Figure

from graph_metrics.degree import DegreeDistribution
from graph_metrics.graph_store import GraphStore


def plot_graph(graph: GraphStore, title: Optional[str] = None, show: bool = False) -> Figure:
    """
    Draw the graph with a seeded spring layout and labeled nodes.

    Args:
        graph: The graph to draw
        title: Figure title; defaults to the graph name with its counts
        show: Call plt.show() after drawing

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, 8))
    nx_graph = graph.to_networkx()
    pos = nx.spring_layout(nx_graph, seed=42)

    if title is None:
        title = f"{graph.name or 'Graph'}\n{graph.vertex_count} nodes, {graph.edge_count} edges"
    fig.suptitle(title, fontsize=14, fontweight='bold', y=0.98)

    nx.draw(nx_graph,
            pos=pos,
            ax=ax,
            with_labels=True,
            node_color="#C0C0C0",
            node_size=500,
            edge_color="gray",
            font_size=12,
            font_family="sans-serif")

    ax.axis("off")
    if show:
        plt.show()
    return fig


def plot_degree_distribution(distribution: DegreeDistribution, title: Optional[str] = None,
                             show: bool = False) -> Figure:
    """
    Bar chart of vertex count per degree.

    Args:
        distribution: Histogram returned by degree_distribution()
        title: Axes title
        show: Call plt.show() after drawing

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))
    degrees = list(distribution)
    counts = [distribution[d] for d in degrees]

    ax.bar(degrees, counts, color='steelblue', edgecolor='black')
    ax.set_xlabel('Degree')
    ax.set_ylabel('Number of vertices')
    ax.set_title(title or 'Degree Distribution', fontsize=13, fontweight='bold')

    plt.tight_layout()
    if show:
        plt.show()
    return fig
