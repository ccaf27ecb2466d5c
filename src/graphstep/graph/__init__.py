"""Graph store layer: adjacency-list directed graphs over string ids.

Public API:
    TraversalMode: BFS or DFS frontier discipline.
    RunState: Traversal engine lifecycle state.
    Edge: Immutable directed edge.
    TraversalStep: One visited node plus frontier snapshot.
    TraversalResult: Final visit order of a run.
    GraphStore: Protocol all backends implement.
    InMemoryGraphStore: Dict-based default implementation.
    KuzuGraphStore: Kuzu-backed implementation on an in-memory database.
    normalize_identifier: Trim an id, returning None when empty.
    validate_identifier: Trim an id, raising InvalidIdentifierError when empty.
"""

from __future__ import annotations

from .identifiers import normalize_identifier, validate_identifier
from .kuzu_store import KuzuGraphStore
from .memory_store import InMemoryGraphStore
from .protocol import GraphStore
from .types import Edge, RunState, TraversalMode, TraversalResult, TraversalStep

__all__ = [
    "TraversalMode",
    "RunState",
    "Edge",
    "TraversalStep",
    "TraversalResult",
    "GraphStore",
    "InMemoryGraphStore",
    "KuzuGraphStore",
    "normalize_identifier",
    "validate_identifier",
]
