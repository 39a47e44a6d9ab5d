import matplotlib.pyplot as plt
import networkx as nx

from adjgraph import Graph
from adjgraph.convert import to_networkx

# Build a small weighted digraph with adjgraph
g = Graph()
g.add_edge("0", "1", 4)
g.add_edge("1", "2", 2)
g.add_edge("1", "3", 7)
g.add_edge("3", "4", 1)
g.add_edge("4", "1", 3)

G = to_networkx(g)

# Draw the graph using circular layout
pos = nx.circular_layout(G)
plt.figure(figsize=(6, 6))
nx.draw(
    G,
    pos,
    with_labels=True,
    node_color="lightblue",
    edge_color="gray",
    node_size=800,
    font_size=10,
    font_weight="bold",
    arrows=True,
)
plt.title(f"Graph Visualization (networkx): {g!r}")
plt.tight_layout()
plt.show()
