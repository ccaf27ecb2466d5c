"""Graph and traversal data structures.

Public API:
    TraversalMode: Frontier discipline (BFS queue or DFS stack).
    RunState: Lifecycle of a single traversal run.
    Edge: Immutable directed edge, used for listing and drawing.
    TraversalStep: One visited node plus a snapshot of the frontier.
    TraversalResult: Final visit order of a completed run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TraversalMode(Enum):
    """Frontier discipline for a traversal."""

    BFS = "bfs"
    DFS = "dfs"


class RunState(Enum):
    """State of the traversal engine."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Edge:
    """A directed, unweighted edge.

    Attributes:
        source: Identifier of the tail node.
        target: Identifier of the head node.
    """

    source: str
    target: str


@dataclass(frozen=True)
class TraversalStep:
    """A single visit emitted by a traversal.

    Attributes:
        node: The node that was just visited.
        frontier: Pending identifiers after *node* was removed, in storage
            order (front of queue first for BFS, bottom of stack first for DFS).
        index: Zero-based position of *node* in the visit order.
    """

    node: str
    frontier: tuple[str, ...] = ()
    index: int = 0


@dataclass(frozen=True)
class TraversalResult:
    """Completed visit order of a traversal run.

    Attributes:
        order: Node identifiers in the order they were visited.
        mode: The frontier discipline used.
        start: The start node, or "" for an empty result.
    """

    order: tuple[str, ...] = field(default_factory=tuple)
    mode: TraversalMode = TraversalMode.BFS
    start: str = ""

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self):
        return iter(self.order)


__all__ = ["TraversalMode", "RunState", "Edge", "TraversalStep", "TraversalResult"]
