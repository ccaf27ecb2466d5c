"""Configuration for traversal pacing and the node canvas."""

from dataclasses import dataclass

from .graph.types import TraversalMode


@dataclass
class TraversalSettings:
    """Pacing configuration for animated traversals.

    Attributes:
        step_delay_ms: Pause after each visited node, in milliseconds
        min_step_delay_ms: Lower bound of the speed control
        max_step_delay_ms: Upper bound of the speed control
        default_mode: Mode used when a traversal does not name one
    """

    step_delay_ms: int = 500
    min_step_delay_ms: int = 100
    max_step_delay_ms: int = 2000
    default_mode: TraversalMode = TraversalMode.BFS

    def __post_init__(self):
        """Validate bounds and the initial delay."""
        if self.min_step_delay_ms < 0:
            raise ValueError("min_step_delay_ms cannot be negative")
        if self.max_step_delay_ms < self.min_step_delay_ms:
            raise ValueError("max_step_delay_ms must be >= min_step_delay_ms")
        if not isinstance(self.default_mode, TraversalMode):
            raise TypeError("default_mode must be TraversalMode enum")
        self.set_step_delay(self.step_delay_ms)

    def set_step_delay(self, step_delay_ms: int) -> None:
        """Change the delay, as the speed slider does.

        The value is rounded to whole milliseconds before it is checked.

        Raises:
            ValueError: If the value is outside the slider bounds
        """
        if isinstance(step_delay_ms, bool) or not isinstance(step_delay_ms, (int, float)):
            raise TypeError("step_delay_ms must be a number")
        delay = round(step_delay_ms)
        if not (self.min_step_delay_ms <= delay <= self.max_step_delay_ms):
            raise ValueError(
                f"step_delay_ms must be between {self.min_step_delay_ms} "
                f"and {self.max_step_delay_ms}"
            )
        self.step_delay_ms = delay


@dataclass
class CanvasSettings:
    """Dimensions of the drawing area, in pixels.

    Attributes:
        width: Canvas width
        height: Canvas height
        node_size: Width and height of a rendered node
        margin: Minimum distance of a randomly placed node from the top-left edge
    """

    width: float = 640
    height: float = 440
    node_size: float = 40
    margin: float = 50

    def __post_init__(self):
        if self.node_size <= 0:
            raise ValueError("node_size must be positive")
        if self.margin < 0:
            raise ValueError("margin cannot be negative")
        if self.width < self.node_size + self.margin or self.height < self.node_size + self.margin:
            raise ValueError("canvas is too small for node_size and margin")
