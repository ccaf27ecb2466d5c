"""GraphSession -- the surface a UI layer drives.

Combines a graph store, canvas positions and a traversal engine.  Raw
input from text fields is trimmed here; empty node names on add and
unknown names on delete surface as exceptions the UI can show, while
duplicate adds and edges with a missing endpoint are silently ignored.
"""

from __future__ import annotations

import logging
import random

from .engine import StepCallback, TraversalEngine
from .exceptions import NotFoundError, TraversalCancelledError
from .graph.identifiers import normalize_identifier, validate_identifier
from .graph.memory_store import InMemoryGraphStore
from .graph.protocol import GraphStore
from .graph.types import Edge, TraversalMode, TraversalResult
from .layout import NodePositions, Position
from .observers import TraversalObserver
from .settings import CanvasSettings, TraversalSettings

logger = logging.getLogger(__name__)


class GraphSession:
    """One user's graph, canvas and traversal controls.

    Attributes:
        store: Graph store, an ``InMemoryGraphStore`` unless one is given
        positions: Canvas positions of the nodes
        engine: Traversal engine sharing ``settings``
        settings: Pacing configuration (the speed slider)
    """

    def __init__(
        self,
        store: GraphStore | None = None,
        settings: TraversalSettings | None = None,
        canvas: CanvasSettings | None = None,
        observer: TraversalObserver | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize a session.

        Args:
            store: Backend to hold the graph (defaults to in-memory)
            settings: Pacing configuration
            canvas: Canvas dimensions for node placement
            observer: Renderer that follows traversals
            rng: Random source for node placement
        """
        self.store = store if store is not None else InMemoryGraphStore()
        self.settings = settings or TraversalSettings()
        self.positions = NodePositions(canvas, rng=rng)
        self.engine = TraversalEngine(self.settings, observer)

    # ── graph editing ─────────────────────────────────────────

    def add_node(self, raw: str) -> bool:
        """Add a node named by *raw* and place it on the canvas.

        Returns:
            True if added, False if a node with that name already exists

        Raises:
            InvalidIdentifierError: If *raw* is empty or whitespace-only
        """
        node_id = validate_identifier(raw)
        if not self.store.add_node(node_id):
            return False
        self.positions.place(node_id)
        return True

    def add_edge(self, source: str, target: str) -> bool:
        """Add a directed edge; a no-op if either end is missing."""
        return self.store.add_edge(source, target)

    def delete_node(self, raw: str) -> None:
        """Delete a node, its edges and its position.

        Raises:
            NotFoundError: If no node has that name
        """
        self.store.delete_node(raw)
        node_id = normalize_identifier(raw)
        if node_id is not None:
            self.positions.forget(node_id)

    def move_node(self, node_id: str, x: float, y: float) -> Position:
        """Drag a node to a new canvas position.

        Raises:
            NotFoundError: If no node has that name
        """
        nid = normalize_identifier(node_id)
        if nid is None or not self.store.has_node(nid):
            raise NotFoundError(node_id)
        if nid not in self.positions:
            self.positions.place(nid)
        return self.positions.move(nid, x, y)

    def clear(self) -> None:
        """Remove every node and edge and stop any traversal."""
        self.engine.reset()
        self.store.clear()
        self.positions.clear()

    # ── read surface for rendering ────────────────────────────

    def node_ids(self) -> list[str]:
        return self.store.node_ids()

    def neighbors(self, node_id: str) -> list[str]:
        return self.store.neighbors(node_id)

    def edges(self) -> list[Edge]:
        return self.store.edges()

    def position(self, node_id: str) -> Position | None:
        return self.positions.get(node_id)

    def edge_segments(self) -> list[tuple[Edge, tuple[float, float], tuple[float, float]]]:
        """Return each edge with the center points its line joins."""
        segments = []
        for edge in self.store.edges():
            if edge.source not in self.positions or edge.target not in self.positions:
                continue
            segments.append(
                (edge, self.positions.center(edge.source), self.positions.center(edge.target))
            )
        return segments

    # ── traversal controls ────────────────────────────────────

    @property
    def step_delay_ms(self) -> int:
        return self.settings.step_delay_ms

    @step_delay_ms.setter
    def step_delay_ms(self, value: int) -> None:
        self.settings.set_step_delay(value)
        logger.debug("Step delay set to %d ms", self.settings.step_delay_ms)

    async def traverse(
        self,
        mode: TraversalMode | None = None,
        start: str | None = None,
        on_step: StepCallback | None = None,
    ) -> TraversalResult | None:
        """Run an animated traversal over this session's graph.

        Starting another traversal, or calling ``reset``, supersedes this
        one.  A superseded run returns None instead of raising, so a UI can
        fire each traversal with ``asyncio.create_task`` and never await
        the old task.  ``on_step`` sees every visit; the final order is the
        returned result.

        Raises:
            EmptyGraphError: If the graph has no nodes
            NotFoundError: If *start* is given and not in the graph
        """
        try:
            return await self.engine.traverse(self.store, start=start, mode=mode, on_step=on_step)
        except TraversalCancelledError:
            logger.debug("Traversal superseded before completion")
            return None

    async def bfs(
        self, start: str | None = None, on_step: StepCallback | None = None
    ) -> TraversalResult | None:
        return await self.traverse(TraversalMode.BFS, start, on_step)

    async def dfs(
        self, start: str | None = None, on_step: StepCallback | None = None
    ) -> TraversalResult | None:
        return await self.traverse(TraversalMode.DFS, start, on_step)

    def reset(self) -> None:
        """Stop any traversal and clear highlights, frontier and output."""
        self.engine.reset()

    def close(self) -> None:
        self.engine.reset()
        self.store.close()


__all__ = ["GraphSession"]
