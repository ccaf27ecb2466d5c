"""Traversal observers: the seam between the engine and a renderer.

Public API:
    TraversalObserver: Protocol a renderer implements to follow a run.
    RecordingObserver: Keeps the display state a renderer would show.
    LoggingObserver: Writes traversal events to the standard logger.
    format_order: Render a visit order as "A → B → C".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .graph.types import TraversalResult, TraversalStep

logger = logging.getLogger(__name__)

ORDER_SEPARATOR = " → "


def format_order(order: Iterable[str]) -> str:
    """Join a visit order for display."""
    return ORDER_SEPARATOR.join(order)


@runtime_checkable
class TraversalObserver(Protocol):
    """Receives the events of a traversal run.

    ``on_reset`` is called before every run (and on an explicit reset),
    ``on_step`` once per visited node, and ``on_complete`` once with the
    final order.  A superseded run calls nothing after it is superseded.
    """

    def on_reset(self) -> None:
        ...

    def on_step(self, step: TraversalStep) -> None:
        ...

    def on_complete(self, result: TraversalResult) -> None:
        ...


class RecordingObserver:
    """Observer that records events and mirrors the display state.

    Attributes:
        highlighted: Nodes highlighted as visited since the last reset.
        frontier: Frontier snapshot from the latest step.
        output: Formatted final order, empty until a run completes.
        steps: Every step seen since construction.
        results: Every completed result seen since construction.
        resets: Number of resets seen.
    """

    def __init__(self) -> None:
        self.highlighted: list[str] = []
        self.frontier: tuple[str, ...] = ()
        self.output = ""
        self.steps: list[TraversalStep] = []
        self.results: list[TraversalResult] = []
        self.resets = 0

    def on_reset(self) -> None:
        self.highlighted.clear()
        self.frontier = ()
        self.output = ""
        self.resets += 1

    def on_step(self, step: TraversalStep) -> None:
        self.highlighted.append(step.node)
        self.frontier = step.frontier
        self.steps.append(step)

    def on_complete(self, result: TraversalResult) -> None:
        self.output = format_order(result.order)
        self.results.append(result)

    @property
    def visited(self) -> list[str]:
        """Nodes of every recorded step, in emission order."""
        return [step.node for step in self.steps]


class LoggingObserver:
    """Observer that logs traversal events.

    Args:
        level: Log level for per-step messages.
        log: Logger to write to; defaults to this module's logger.
    """

    def __init__(self, level: int = logging.DEBUG, log: logging.Logger | None = None) -> None:
        self.level = level
        self._log = log or logger

    def on_reset(self) -> None:
        self._log.log(self.level, "Traversal display reset")

    def on_step(self, step: TraversalStep) -> None:
        self._log.log(
            self.level,
            "Visited %s (#%d), frontier: [%s]",
            step.node,
            step.index + 1,
            ", ".join(step.frontier),
        )

    def on_complete(self, result: TraversalResult) -> None:
        self._log.info(
            "%s from %s finished: %s",
            result.mode.name,
            result.start,
            format_order(result.order),
        )


__all__ = [
    "TraversalObserver",
    "RecordingObserver",
    "LoggingObserver",
    "format_order",
]
