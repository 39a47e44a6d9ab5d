from typing import Any, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)


class Vertex(Generic[K]):
    """
    A graph vertex: a key plus its outgoing edges.

    Edges are stored as (neighbor key, weight) pairs in insertion order.
    Parallel edges to the same neighbor and self-loops are allowed. Neighbors
    are referenced by key only; the vertex never checks that they exist.
    """

    def __init__(self, key: K) -> None:
        self._key = key
        self._neighbors: List[Tuple[K, int]] = []  # (neighbor key, weight), in insertion order

    @property
    def key(self) -> K:
        return self._key

    @property
    def neighbors(self) -> Tuple[Tuple[K, int], ...]:
        """The outgoing (neighbor key, weight) pairs, in insertion order."""
        return tuple(self._neighbors)

    @property
    def out_degree(self) -> int:
        """Number of outgoing edges, counting parallel edges separately."""
        return len(self._neighbors)

    def adjacent_key(self, key: K) -> bool:
        """Checks whether any outgoing edge points to key."""
        for nbr, _ in self._neighbors:
            if nbr == key:
                return True
        return False

    def add_neighbor(self, key: K, weight: int) -> None:
        """
        Appends an outgoing edge to key.

        No deduplication is done: calling this twice with the same key
        produces two parallel edges.

        Args:
            key: The key of the neighbor vertex.
            weight: The weight of the edge.
        """
        self._neighbors.append((key, weight))

    def neighbor_keys(self) -> List[K]:
        """Returns the edge targets in insertion order, one entry per edge."""
        return [nbr for nbr, _ in self._neighbors]

    def neighbor_weight(self, key: K) -> Optional[int]:
        """
        Gets the weight of the first edge to key.

        Args:
            key: The key of the neighbor vertex.

        Returns:
            The weight of the first matching edge, or None if there is no edge
            to key. A stored weight of 0 is returned as 0.
        """
        for nbr, weight in self._neighbors:
            if nbr == key:
                return weight
        return None

    def remove_neighbor(self, key: K) -> Optional[int]:
        """
        Removes the first edge to key.

        Returns:
            The weight of the removed edge, or None if there was no edge to key.
        """
        for i, (nbr, weight) in enumerate(self._neighbors):
            if nbr == key:
                del self._neighbors[i]
                return weight
        return None

    def remove_neighbors(self, key: K) -> int:
        """
        Removes every edge to key.

        Returns:
            The number of edges removed.
        """
        before = len(self._neighbors)
        self._neighbors = [(nbr, wt) for nbr, wt in self._neighbors if nbr != key]
        return before - len(self._neighbors)

    def copy(self) -> "Vertex[K]":
        """Returns a vertex with the same key and its own copy of the edges."""
        vertex = Vertex(self._key)
        vertex._neighbors = list(self._neighbors)
        return vertex

    def __iter__(self) -> Iterator[Tuple[K, int]]:
        return iter(self._neighbors)

    def __len__(self) -> int:
        return len(self._neighbors)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._key == other._key and self._neighbors == other._neighbors

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vertex({self._key!r}, neighbors={self._neighbors!r})"
