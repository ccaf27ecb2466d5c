"""graphstep: graph store and animated BFS/DFS engine for teaching tools."""

__version__ = "0.1.0"

from .engine import TraversalEngine, resolve_start, walk
from .exceptions import (
    EmptyGraphError,
    GraphError,
    InvalidIdentifierError,
    NotFoundError,
    TraversalCancelledError,
)
from .graph import (
    Edge,
    GraphStore,
    InMemoryGraphStore,
    KuzuGraphStore,
    RunState,
    TraversalMode,
    TraversalResult,
    TraversalStep,
    normalize_identifier,
    validate_identifier,
)
from .layout import NodePositions, Position
from .observers import LoggingObserver, RecordingObserver, TraversalObserver, format_order
from .session import GraphSession
from .settings import CanvasSettings, TraversalSettings

__all__ = [
    # Session facade
    "GraphSession",
    # Graph store
    "GraphStore",
    "InMemoryGraphStore",
    "KuzuGraphStore",
    "Edge",
    "normalize_identifier",
    "validate_identifier",
    # Traversal
    "TraversalEngine",
    "TraversalMode",
    "TraversalResult",
    "TraversalStep",
    "RunState",
    "resolve_start",
    "walk",
    # Observers
    "TraversalObserver",
    "RecordingObserver",
    "LoggingObserver",
    "format_order",
    # Layout and settings
    "NodePositions",
    "Position",
    "CanvasSettings",
    "TraversalSettings",
    # Exceptions
    "GraphError",
    "EmptyGraphError",
    "NotFoundError",
    "InvalidIdentifierError",
    "TraversalCancelledError",
]
