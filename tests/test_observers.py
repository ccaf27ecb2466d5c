"""Unit tests for the observer helpers."""

import logging

from graphstep import (
    LoggingObserver,
    RecordingObserver,
    TraversalMode,
    TraversalObserver,
    TraversalResult,
    TraversalStep,
    format_order,
)


class TestFormatOrder:
    def test_joins_with_arrow(self):
        assert format_order(["A", "B", "C"]) == "A → B → C"

    def test_empty(self):
        assert format_order([]) == ""


class TestRecordingObserver:
    """Display state mirrored by the recording observer."""

    def test_is_traversal_observer(self):
        assert isinstance(RecordingObserver(), TraversalObserver)

    def test_tracks_steps_and_output(self):
        obs = RecordingObserver()
        obs.on_step(TraversalStep("A", ("B", "C"), 0))
        obs.on_step(TraversalStep("B", ("C",), 1))
        assert obs.highlighted == ["A", "B"]
        assert obs.frontier == ("C",)
        obs.on_complete(TraversalResult(("A", "B"), TraversalMode.BFS, "A"))
        assert obs.output == "A → B"

    def test_reset_clears_display_but_keeps_history(self):
        obs = RecordingObserver()
        obs.on_step(TraversalStep("A", ("B",), 0))
        obs.on_complete(TraversalResult(("A",), TraversalMode.DFS, "A"))
        obs.on_reset()
        assert obs.highlighted == []
        assert obs.frontier == ()
        assert obs.output == ""
        assert obs.visited == ["A"]
        assert len(obs.results) == 1
        assert obs.resets == 1


class TestLoggingObserver:
    """Events written to the logger."""

    def test_is_traversal_observer(self):
        assert isinstance(LoggingObserver(), TraversalObserver)

    def test_logs_steps_and_result(self, caplog):
        obs = LoggingObserver(level=logging.INFO)
        with caplog.at_level(logging.INFO, logger="graphstep.observers"):
            obs.on_reset()
            obs.on_step(TraversalStep("A", ("B", "C"), 0))
            obs.on_complete(TraversalResult(("A", "B", "C"), TraversalMode.BFS, "A"))
        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "Traversal display reset",
            "Visited A (#1), frontier: [B, C]",
            "BFS from A finished: A → B → C",
        ]
