"""Export to networkx for inspection and drawing."""

import logging

import networkx as nx

from .graph import Graph

logger = logging.getLogger(__name__)


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Converts a Graph into a networkx MultiDiGraph.

    Every vertex becomes a node and every edge becomes its own networkx edge
    with a "weight" attribute, so parallel edges and self-loops are kept.
    """
    G = nx.MultiDiGraph()
    G.add_nodes_from(graph.vertex_keys())
    for u, v, weight in graph.edges():
        G.add_edge(u, v, weight=weight)
    logger.debug(
        "Converted graph to networkx (%d nodes, %d edges)",
        G.number_of_nodes(), G.number_of_edges(),
    )
    return G
