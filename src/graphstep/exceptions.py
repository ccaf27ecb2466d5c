"""Custom exceptions for graphstep."""


class GraphError(Exception):
    """Base exception for graph and traversal operations."""


class EmptyGraphError(GraphError):
    """Raised when a traversal is requested on a graph with no nodes."""


class NotFoundError(GraphError, KeyError):
    """Raised when a node identifier is not present in the graph."""

    def __init__(self, node_id: str):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node not found: {self.node_id!r}"


class InvalidIdentifierError(GraphError, ValueError):
    """Raised when a node identifier is empty or whitespace-only."""


class TraversalCancelledError(GraphError):
    """Raised from a traversal that was superseded by a newer run."""
