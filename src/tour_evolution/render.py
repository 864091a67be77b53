"""
Tour rendering.

Draws cities and the closed visiting cycle on matplotlib axes. The
engine never depends on this module.
"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .core.cities import CityTable


def tour_graph(cities: CityTable, order: Sequence[int]) -> nx.Graph:
    """City graph with one edge per leg of the closed tour."""
    G = cities.graph()
    if len(order) > 1:
        nx.add_cycle(G, order)
    return G


def plot_tour(
    cities: CityTable,
    order: Sequence[int],
    *,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    show_labels: bool = True,
) -> plt.Axes:
    """
    Draw a closed tour.

    Args:
        cities: City table
        order: Visiting order
        ax: Axes to draw on (a new figure is created if None)
        title: Optional plot title
        show_labels: Draw city names next to the nodes

    Returns:
        The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 8))

    G = tour_graph(cities, order)
    pos = nx.get_node_attributes(G, "pos")

    nx.draw_networkx_edges(G, pos, ax=ax, edge_color="blue", width=2)
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color="red", node_size=60)
    if show_labels:
        labels = nx.get_node_attributes(G, "name")
        nx.draw_networkx_labels(
            G, pos, labels=labels, ax=ax, font_size=8, verticalalignment="bottom"
        )

    ax.set_title(title or "Shortest Path Visualization")
    ax.set_aspect("equal", adjustable="datalim")
    return ax


def save_tour_plot(cities: CityTable, order: Sequence[int], path, **kwargs) -> None:
    """Render a tour to an image file."""
    fig, ax = plt.subplots(figsize=(12, 8))
    try:
        plot_tour(cities, order, ax=ax, **kwargs)
        fig.savefig(path, bbox_inches="tight")
    finally:
        plt.close(fig)
