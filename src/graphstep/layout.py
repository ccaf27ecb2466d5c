"""Canvas positions for rendered nodes.

Positions are arbitrary: new nodes land at a random spot and users drag
them around.  Nothing here looks at graph structure.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .exceptions import NotFoundError
from .settings import CanvasSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """Top-left corner of a rendered node, in canvas pixels."""

    x: float
    y: float


class NodePositions:
    """Tracks where each node sits on the canvas.

    Args:
        canvas: Canvas dimensions; defaults to ``CanvasSettings()``.
        rng: Random source for placement, injectable for repeatable tests.
    """

    def __init__(self, canvas: CanvasSettings | None = None, rng: random.Random | None = None):
        self.canvas = canvas or CanvasSettings()
        self._rng = rng or random.Random()
        self._positions: dict[str, Position] = {}

    def place(self, node_id: str) -> Position:
        """Give *node_id* a random position, keeping an existing one."""
        if node_id in self._positions:
            return self._positions[node_id]
        c = self.canvas
        # Random spot inside the margin, leaving room for the node itself.
        x = c.margin + self._rng.random() * (c.width - c.node_size - c.margin)
        y = c.margin + self._rng.random() * (c.height - c.node_size - c.margin)
        position = Position(x, y)
        self._positions[node_id] = position
        return position

    def move(self, node_id: str, x: float, y: float) -> Position:
        """Drag *node_id* to (x, y), clamped so it stays on the canvas.

        Raises:
            NotFoundError: If *node_id* has no position.
        """
        if node_id not in self._positions:
            raise NotFoundError(node_id)
        c = self.canvas
        position = Position(
            max(0.0, min(float(x), c.width - c.node_size)),
            max(0.0, min(float(y), c.height - c.node_size)),
        )
        self._positions[node_id] = position
        logger.debug("Moved %r to (%.1f, %.1f)", node_id, position.x, position.y)
        return position

    def forget(self, node_id: str) -> None:
        self._positions.pop(node_id, None)

    def get(self, node_id: str) -> Position | None:
        return self._positions.get(node_id)

    def center(self, node_id: str) -> tuple[float, float]:
        """Return the center point of a node, where edge lines attach.

        Raises:
            NotFoundError: If *node_id* has no position.
        """
        position = self._positions.get(node_id)
        if position is None:
            raise NotFoundError(node_id)
        half = self.canvas.node_size / 2
        return (position.x + half, position.y + half)

    def clear(self) -> None:
        self._positions.clear()

    def as_dict(self) -> dict[str, Position]:
        return dict(self._positions)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)


__all__ = ["Position", "NodePositions"]
