import logging
from typing import Dict, Generic, Iterator, List, Optional, Tuple

from .exceptions import DuplicateVertexError, VertexNotFoundError
from .vertex import K, Vertex

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1


class Graph(Generic[K]):
    """
    A directed, weighted graph backed by an adjacency list.

    Each vertex keeps its outgoing edges as (neighbor key, weight) pairs.
    Vertex and edge counts are maintained on every mutation, so reading them
    is O(1). Parallel edges and self-loops are allowed and counted like any
    other edge.
    """

    def __init__(self) -> None:
        self._vertices: Dict[K, Vertex[K]] = {}  # Stores key -> vertex
        self._vertex_count = 0
        self._edge_count = 0

    def is_empty(self) -> bool:
        """Returns True if the graph has no vertices."""
        return self._vertex_count == 0

    def vertex_count(self) -> int:
        """Returns the number of vertices in the graph."""
        return self._vertex_count

    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        return self._edge_count

    def contains(self, key: K) -> bool:
        """Checks if a vertex exists in the graph."""
        return key in self._vertices

    def add_vertex(self, key: K) -> None:
        """
        Adds a vertex with no edges to the graph.

        Args:
            key: The unique identifier for the vertex.

        Raises:
            DuplicateVertexError: If the vertex already exists. The graph is
                left unchanged.
        """
        if key in self._vertices:
            raise DuplicateVertexError(key)
        self._vertices[key] = Vertex(key)
        self._vertex_count += 1
        logger.debug("Added vertex %r", key)

    def get_vertex(self, key: K) -> Optional[Vertex[K]]:
        """
        Returns a snapshot of the vertex stored under key, or None if there is
        none.

        The returned vertex is a copy; adding or removing its neighbors does
        not change the graph. Use add_edge and remove_edge for that.
        """
        vertex = self._vertices.get(key)
        if vertex is None:
            return None
        return vertex.copy()

    def vertex_keys(self) -> List[K]:
        """Returns the keys of all vertices, each exactly once."""
        return list(self._vertices)

    def remove_vertex(self, key: K) -> Optional[Vertex[K]]:
        """
        Removes a vertex together with its outgoing and incoming edges.

        Every edge pointing at key from another vertex is removed, including
        parallel edges, and the edge count drops accordingly.

        Args:
            key: The key of the vertex to remove.

        Returns:
            The removed vertex with its outgoing edges as they were, or None if
            the vertex does not exist (in which case nothing changes).
        """
        vertex = self._vertices.pop(key, None)
        if vertex is None:
            return None

        self._vertex_count -= 1
        self._edge_count -= vertex.out_degree

        incoming = 0
        for other in self._vertices.values():
            incoming += other.remove_neighbors(key)
        self._edge_count -= incoming

        logger.debug(
            "Removed vertex %r with %d outgoing and %d incoming edges",
            key, vertex.out_degree, incoming,
        )
        return vertex

    def add_edge(self, u: K, v: K, weight: int = DEFAULT_WEIGHT) -> None:
        """
        Appends a directed edge from vertex u to vertex v, alongside any edges
        already running from u to v.
        If the vertices do not exist, they will be added to the graph.

        Args:
            u: The starting vertex of the edge.
            v: The ending vertex of the edge.
            weight: The weight of the edge (default is 1).
        """
        # Look up both keys before inserting either.
        missing_u = u not in self._vertices
        missing_v = v not in self._vertices
        if missing_u:
            self.add_vertex(u)
        if missing_v and v not in self._vertices:
            self.add_vertex(v)

        self._vertices[u].add_neighbor(v, weight)
        self._edge_count += 1
        logger.debug("Added edge %r -> %r (weight %r)", u, v, weight)

    def remove_edge(self, u: K, v: K) -> Optional[int]:
        """
        Removes the first edge from u to v.

        Args:
            u: The starting vertex.
            v: The ending vertex.

        Returns:
            The weight of the removed edge, or None if there is no edge from u
            to v.

        Raises:
            VertexNotFoundError: If u does not exist.
        """
        weight = self._require(u).remove_neighbor(v)
        if weight is not None:
            self._edge_count -= 1
            logger.debug("Removed edge %r -> %r (weight %r)", u, v, weight)
        return weight

    def adjacent(self, u: K, v: K) -> bool:
        """
        Checks if there is an edge from u to v.

        v does not have to exist in the graph.

        Raises:
            VertexNotFoundError: If u does not exist.
        """
        return self._require(u).adjacent_key(v)

    def neighbors(self, key: K) -> List[K]:
        """
        Returns the targets of the outgoing edges of a vertex.

        Targets appear in insertion order, once per edge.

        Raises:
            VertexNotFoundError: If the vertex does not exist.
        """
        return self._require(key).neighbor_keys()

    def neighbor_weight(self, u: K, v: K) -> Optional[int]:
        """
        Gets the weight of the first edge from u to v.

        Returns:
            The weight of the edge if it exists, otherwise None.

        Raises:
            VertexNotFoundError: If u does not exist.
        """
        return self._require(u).neighbor_weight(v)

    def edges(self) -> Iterator[Tuple[K, K, int]]:
        """Yields every edge as a (u, v, weight) triple."""
        for key, vertex in self._vertices.items():
            for nbr, weight in vertex:
                yield key, nbr, weight

    def _require(self, key: K) -> Vertex[K]:
        vertex = self._vertices.get(key)
        if vertex is None:
            raise VertexNotFoundError(key)
        return vertex

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __iter__(self) -> Iterator[K]:
        return iter(self._vertices)

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return self._vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertices={self._vertex_count}, edges={self._edge_count})"
