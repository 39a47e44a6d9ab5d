from .exceptions import DuplicateVertexError, GraphError, VertexNotFoundError
from .graph import DEFAULT_WEIGHT, Graph
from .vertex import Vertex

__all__ = [
    "Graph", "Vertex", "DEFAULT_WEIGHT",
    "GraphError", "VertexNotFoundError", "DuplicateVertexError",
]
