"""Traversal engine: paced, observable breadth-first and depth-first search.

The algorithm itself is the ``walk`` generator.  It yields one
``TraversalStep`` per newly visited node and only asks the graph for that
node's successors once it is resumed, so a paused run sees edits made
while it was paused.  ``TraversalEngine`` drives ``walk`` under asyncio,
sleeping after every step and abandoning a run as soon as a newer run (or
a reset) has superseded it.

Public API:
    resolve_start: Pick and check the start node of a run.
    walk: Synchronous step generator for BFS/DFS.
    TraversalEngine: Async driver with pacing, observers and cancellation.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable, Iterator

from .exceptions import EmptyGraphError, NotFoundError, TraversalCancelledError
from .graph.identifiers import normalize_identifier
from .graph.protocol import GraphStore
from .graph.types import RunState, TraversalMode, TraversalResult, TraversalStep
from .observers import TraversalObserver
from .settings import TraversalSettings

logger = logging.getLogger(__name__)

StepCallback = Callable[[str, tuple[str, ...]], None]


def resolve_start(graph: GraphStore, start: str | None = None) -> str:
    """Return the start node for a run over *graph*.

    Defaults to the first node in insertion order.

    Raises:
        EmptyGraphError: If the graph has no nodes.
        NotFoundError: If an explicit *start* is not in the graph.
    """
    node_ids = graph.node_ids()
    if not node_ids:
        raise EmptyGraphError("Add at least one node before starting a traversal")
    if start is None:
        return node_ids[0]
    nid = normalize_identifier(start)
    if nid is None or not graph.has_node(nid):
        raise NotFoundError(start)
    return nid


def walk(
    graph: GraphStore,
    start: str | None = None,
    mode: TraversalMode = TraversalMode.BFS,
) -> Iterator[TraversalStep]:
    """Yield a step for each node reachable from *start*, in visit order.

    BFS takes from the front of a queue.  DFS takes from the top of a stack
    and pushes successors in reverse so siblings are still visited left to
    right.  Frontier entries that were visited in the meantime are skipped
    without yielding.
    """
    start = resolve_start(graph, start)
    visited: set[str] = set()
    index = 0

    if mode is TraversalMode.BFS:
        queue: deque[str] = deque([start])
        while queue:
            node = queue.popleft()
            if node in visited:
                continue
            visited.add(node)
            yield TraversalStep(node=node, frontier=tuple(queue), index=index)
            index += 1
            queue.extend(n for n in graph.neighbors(node) if n not in visited)
    else:
        stack: list[str] = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            yield TraversalStep(node=node, frontier=tuple(stack), index=index)
            index += 1
            stack.extend(n for n in reversed(graph.neighbors(node)) if n not in visited)


class TraversalEngine:
    """Runs one animated traversal at a time.

    Starting a run supersedes any run still in progress: the older run
    stops at its next resumption, emits nothing more and raises
    ``TraversalCancelledError`` to its awaiter.

    Args:
        settings: Pacing configuration; the delay is re-read on every step
            so the speed can change mid-run.
        observer: Optional renderer notified of resets, steps and results.
    """

    def __init__(
        self,
        settings: TraversalSettings | None = None,
        observer: TraversalObserver | None = None,
    ) -> None:
        self.settings = settings or TraversalSettings()
        self.observer = observer
        self._state = RunState.IDLE
        self._generation = 0
        self._last_result: TraversalResult | None = None

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def generation(self) -> int:
        """Counter bumped each time a run starts or the engine is reset."""
        return self._generation

    @property
    def last_result(self) -> TraversalResult | None:
        """Result of the most recent completed run, cleared on reset."""
        return self._last_result

    @property
    def is_running(self) -> bool:
        return self._state is RunState.RUNNING

    def reset(self) -> None:
        """Abandon any run in progress and clear the display state."""
        self._supersede()

    async def traverse(
        self,
        graph: GraphStore,
        start: str | None = None,
        mode: TraversalMode | None = None,
        step_delay_ms: float | None = None,
        on_step: StepCallback | None = None,
    ) -> TraversalResult:
        """Run a paced traversal over *graph* and return its visit order.

        Args:
            graph: Store to read successors from.
            start: Start node; defaults to the first node added.
            mode: BFS or DFS; defaults to ``settings.default_mode``.
            step_delay_ms: Fixed delay for this run.  When None the current
                ``settings.step_delay_ms`` is used at each step.
            on_step: Called as ``on_step(node, frontier)`` for each visit.
                It is not called at the end; the final order is the return
                value and is also passed to ``observer.on_complete``.

        Raises:
            EmptyGraphError: If the graph has no nodes.
            NotFoundError: If *start* is given and not in the graph.
            TraversalCancelledError: If a newer run or reset superseded this one.
        """
        if step_delay_ms is not None and step_delay_ms < 0:
            raise ValueError("step_delay_ms cannot be negative")
        mode = mode or self.settings.default_mode
        generation = self._supersede()
        start = resolve_start(graph, start)

        steps = walk(graph, start, mode)
        order: list[str] = []
        self._state = RunState.RUNNING
        logger.info("Starting %s traversal from %s (run %d)", mode.name, start, generation)

        try:
            for step in steps:
                order.append(step.node)
                self._emit(step, on_step)
                delay = self.settings.step_delay_ms if step_delay_ms is None else step_delay_ms
                await asyncio.sleep(delay / 1000)
                if generation != self._generation:
                    logger.warning(
                        "Traversal run %d superseded after %d steps", generation, len(order)
                    )
                    raise TraversalCancelledError(f"traversal run {generation} was superseded")
        except BaseException:
            # Task cancelled or a callback raised; a superseded run leaves state alone.
            if generation == self._generation:
                self._state = RunState.IDLE
            raise
        finally:
            steps.close()

        result = TraversalResult(order=tuple(order), mode=mode, start=start)
        self._state = RunState.COMPLETED
        self._last_result = result
        if self.observer is not None:
            self.observer.on_complete(result)
        logger.info("%s traversal finished with %d nodes", mode.name, len(order))
        return result

    def _supersede(self) -> int:
        self._generation += 1
        self._state = RunState.IDLE
        self._last_result = None
        if self.observer is not None:
            self.observer.on_reset()
        return self._generation

    def _emit(self, step: TraversalStep, on_step: StepCallback | None) -> None:
        logger.debug("Step %d: %s frontier=%s", step.index, step.node, step.frontier)
        if on_step is not None:
            on_step(step.node, step.frontier)
        if self.observer is not None:
            self.observer.on_step(step)


__all__ = ["TraversalEngine", "resolve_start", "walk"]
