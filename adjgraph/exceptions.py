from typing import Hashable


class GraphError(ValueError):
    """Base class for errors raised by graph operations."""


class VertexNotFoundError(GraphError):
    """Raised when an operation needs a vertex that is not in the graph."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"Vertex {key!r} does not exist.")
        self.key = key


class DuplicateVertexError(GraphError):
    """Raised when adding a vertex under a key that is already taken."""

    def __init__(self, key: Hashable) -> None:
        super().__init__(f"Vertex {key!r} already exists.")
        self.key = key
