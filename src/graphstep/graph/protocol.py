"""GraphStore protocol -- the interface the traversal engine and UI rely on.

Public API:
    GraphStore: Runtime-checkable protocol defining the graph store contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types import Edge


@runtime_checkable
class GraphStore(Protocol):
    """Adjacency-list directed graph over string identifiers.

    Every concrete implementation (in-memory, Kuzu) must satisfy this
    protocol so the engine and session can swap backends without changes.
    Identifiers passed in are trimmed before use.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    # ── node operations ───────────────────────────────────────

    def add_node(self, node_id: str) -> bool:
        """Insert a node with no successors.

        Returns:
            True if the node was inserted, False if the id was empty or
            already present (both are silent no-ops).
        """
        ...

    def delete_node(self, node_id: str) -> None:
        """Remove a node and every edge pointing at it.

        Raises:
            NotFoundError: If *node_id* is not in the graph.
        """
        ...

    def has_node(self, node_id: str) -> bool:
        """Return True if *node_id* is in the graph."""
        ...

    def node_ids(self) -> list[str]:
        """Return all node identifiers in insertion order."""
        ...

    # ── edge operations ───────────────────────────────────────

    def add_edge(self, source: str, target: str) -> bool:
        """Append *target* to the successors of *source*.

        Returns:
            True if the edge was recorded, False if an endpoint is missing
            or the edge already exists (both are silent no-ops).
        """
        ...

    def neighbors(self, node_id: str) -> list[str]:
        """Return successors of *node_id* in edge-creation order.

        An absent id yields an empty list rather than an error.
        """
        ...

    def edges(self) -> list[Edge]:
        """Return every edge, grouped by source in node insertion order."""
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def clear(self) -> None:
        """Remove all nodes and edges."""
        ...

    def close(self) -> None:
        """Release resources held by the store."""
        ...

    def __len__(self) -> int:
        ...


__all__ = ["GraphStore"]
