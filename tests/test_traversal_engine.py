"""Tests for the async TraversalEngine.

Test categories:
- TestRun: results, callbacks, observer events, state transitions
- TestErrors: empty graph, unknown start, negative delay
- TestPacing: delay per step, live speed changes
- TestCancellation: superseding runs and resets
- TestAbnormalEnd: task cancellation and failing callbacks
"""

from __future__ import annotations

import asyncio

import pytest

from graphstep import (
    EmptyGraphError,
    InMemoryGraphStore,
    NotFoundError,
    RecordingObserver,
    RunState,
    TraversalCancelledError,
    TraversalEngine,
    TraversalMode,
    TraversalSettings,
)


@pytest.fixture
def engine(fast_settings, observer):
    return TraversalEngine(fast_settings, observer)


@pytest.fixture
def chain():
    """In-memory store holding n0 -> n1 -> ... -> n5."""
    store = InMemoryGraphStore()
    for i in range(6):
        store.add_node(f"n{i}")
    for i in range(5):
        store.add_edge(f"n{i}", f"n{i + 1}")
    return store


# ── TestRun ───────────────────────────────────────────────────


class TestRun:
    """Completed runs."""

    @pytest.mark.asyncio
    async def test_bfs_result(self, engine, diamond):
        result = await engine.traverse(diamond, mode=TraversalMode.BFS)
        assert result.order == ("A", "B", "C", "D")
        assert result.mode is TraversalMode.BFS
        assert result.start == "A"

    @pytest.mark.asyncio
    async def test_dfs_result(self, engine, diamond):
        result = await engine.traverse(diamond, mode=TraversalMode.DFS)
        assert result.order == ("A", "B", "D", "C")

    @pytest.mark.asyncio
    async def test_default_mode_from_settings(self, observer, diamond):
        settings = TraversalSettings(
            step_delay_ms=0, min_step_delay_ms=0, default_mode=TraversalMode.DFS
        )
        engine = TraversalEngine(settings, observer)
        result = await engine.traverse(diamond)
        assert result.mode is TraversalMode.DFS

    @pytest.mark.asyncio
    async def test_on_step_callback(self, engine, diamond):
        calls = []
        await engine.traverse(
            diamond,
            mode=TraversalMode.BFS,
            on_step=lambda node, frontier: calls.append((node, frontier)),
        )
        assert calls == [("A", ()), ("B", ("C",)), ("C", ("D",)), ("D", ("D",))]

    @pytest.mark.asyncio
    async def test_observer_events(self, engine, observer, diamond):
        result = await engine.traverse(diamond, mode=TraversalMode.DFS)
        assert observer.resets == 1
        assert observer.visited == ["A", "B", "D", "C"]
        assert observer.highlighted == ["A", "B", "D", "C"]
        assert observer.results == [result]
        assert observer.output == "A → B → D → C"

    @pytest.mark.asyncio
    async def test_state_transitions(self, engine, diamond):
        assert engine.state is RunState.IDLE
        seen = []
        await engine.traverse(diamond, on_step=lambda n, f: seen.append(engine.state))
        assert seen == [RunState.RUNNING] * 4
        assert engine.state is RunState.COMPLETED
        assert engine.last_result.order == ("A", "B", "C", "D")

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, engine, diamond):
        first = await engine.traverse(diamond, mode=TraversalMode.DFS)
        second = await engine.traverse(diamond, mode=TraversalMode.DFS)
        assert first == second

    @pytest.mark.asyncio
    async def test_new_run_resets_display(self, engine, observer, diamond):
        await engine.traverse(diamond)
        assert observer.output
        resets_before = observer.resets
        await engine.traverse(diamond, start="C")
        assert observer.resets == resets_before + 1
        assert observer.highlighted == ["C", "D"]

    @pytest.mark.asyncio
    async def test_works_without_observer(self, fast_settings, diamond):
        engine = TraversalEngine(fast_settings)
        result = await engine.traverse(diamond)
        assert len(result) == 4


# ── TestErrors ────────────────────────────────────────────────


class TestErrors:
    """Failures surface before any step is emitted."""

    @pytest.mark.asyncio
    async def test_empty_graph(self, engine, observer, store):
        with pytest.raises(EmptyGraphError):
            await engine.traverse(store)
        assert observer.steps == []
        assert observer.results == []
        assert engine.state is RunState.IDLE

    @pytest.mark.asyncio
    async def test_unknown_start(self, engine, observer, diamond):
        with pytest.raises(NotFoundError):
            await engine.traverse(diamond, start="nope")
        assert observer.steps == []
        assert engine.state is RunState.IDLE

    @pytest.mark.asyncio
    async def test_negative_delay(self, engine, diamond):
        with pytest.raises(ValueError):
            await engine.traverse(diamond, step_delay_ms=-1)


# ── TestPacing ────────────────────────────────────────────────


class TestPacing:
    """The engine sleeps once per visited node."""

    @pytest.mark.asyncio
    async def test_sleeps_once_per_visit(self, engine, diamond, monkeypatch):
        delays = []
        real_sleep = asyncio.sleep

        async def fake_sleep(seconds):
            delays.append(seconds)
            await real_sleep(0)

        monkeypatch.setattr("graphstep.engine.asyncio.sleep", fake_sleep)
        await engine.traverse(diamond, step_delay_ms=250)
        # D is queued twice but only the first copy is paced.
        assert delays == [0.25] * 4

    @pytest.mark.asyncio
    async def test_delay_read_live_from_settings(self, engine, chain, monkeypatch):
        delays = []
        real_sleep = asyncio.sleep

        async def fake_sleep(seconds):
            delays.append(seconds)
            await real_sleep(0)

        def on_step(node, frontier):
            if node == "n2":
                engine.settings.set_step_delay(1000)

        monkeypatch.setattr("graphstep.engine.asyncio.sleep", fake_sleep)
        await engine.traverse(chain, on_step=on_step)
        assert delays == [0, 0, 1.0, 1.0, 1.0, 1.0]


# ── TestCancellation ──────────────────────────────────────────


class TestCancellation:
    """A newer run or a reset silences the older run."""

    @pytest.mark.asyncio
    async def test_second_run_supersedes_first(self, engine, observer, chain):
        steps = []
        first = asyncio.create_task(
            engine.traverse(
                chain, step_delay_ms=50, on_step=lambda n, f: steps.append(("first", n))
            )
        )
        await asyncio.sleep(0)
        assert steps == [("first", "n0")]

        result = await engine.traverse(
            chain, mode=TraversalMode.DFS, on_step=lambda n, f: steps.append(("second", n))
        )
        with pytest.raises(TraversalCancelledError):
            await first

        assert steps[0] == ("first", "n0")
        assert all(tag == "second" for tag, _ in steps[1:])
        assert len(steps) == 7
        assert result.order == tuple(f"n{i}" for i in range(6))
        assert observer.results == [result]
        assert engine.state is RunState.COMPLETED
        assert engine.last_result is result

    @pytest.mark.asyncio
    async def test_superseded_run_does_not_touch_state(self, engine, chain):
        first = asyncio.create_task(engine.traverse(chain, step_delay_ms=50))
        await asyncio.sleep(0)
        second = asyncio.create_task(engine.traverse(chain, step_delay_ms=200))
        await asyncio.sleep(0.1)
        # The first run has resumed and bailed out; the second is still pacing.
        assert first.done()
        assert engine.state is RunState.RUNNING
        with pytest.raises(TraversalCancelledError):
            first.result()
        engine.reset()
        with pytest.raises(TraversalCancelledError):
            await second

    @pytest.mark.asyncio
    async def test_reset_cancels_run(self, engine, observer, chain):
        task = asyncio.create_task(engine.traverse(chain, step_delay_ms=50))
        await asyncio.sleep(0)
        generation = engine.generation
        engine.reset()
        assert engine.generation == generation + 1
        assert engine.state is RunState.IDLE
        with pytest.raises(TraversalCancelledError):
            await task
        assert observer.highlighted == []
        assert observer.results == []
        assert engine.last_result is None

    @pytest.mark.asyncio
    async def test_mutation_mid_run_is_seen(self, engine, chain):
        def on_step(node, frontier):
            if node == "n1":
                chain.delete_node("n3")

        result = await engine.traverse(chain, on_step=on_step)
        assert result.order == ("n0", "n1", "n2")


# ── TestAbnormalEnd ───────────────────────────────────────────


class TestAbnormalEnd:
    """A run that stops for any reason other than completion returns to IDLE."""

    @pytest.mark.asyncio
    async def test_is_running_during_and_after_run(self, engine, diamond):
        seen = []
        await engine.traverse(diamond, on_step=lambda n, f: seen.append(engine.is_running))
        assert seen == [True] * 4
        assert engine.is_running is False

    @pytest.mark.asyncio
    async def test_task_cancel_returns_to_idle(self, engine, chain):
        task = asyncio.create_task(engine.traverse(chain, step_delay_ms=50))
        await asyncio.sleep(0)
        assert engine.is_running
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert engine.state is RunState.IDLE
        assert engine.is_running is False
        assert engine.last_result is None

    @pytest.mark.asyncio
    async def test_failing_callback_returns_to_idle(self, engine, observer, chain):
        def on_step(node, frontier):
            if node == "n2":
                raise RuntimeError("renderer failed")

        with pytest.raises(RuntimeError, match="renderer failed"):
            await engine.traverse(chain, on_step=on_step)
        assert engine.state is RunState.IDLE
        assert engine.is_running is False
        assert observer.visited == ["n0", "n1"]
        assert observer.results == []

    @pytest.mark.asyncio
    async def test_failing_observer_returns_to_idle(self, fast_settings, diamond):
        class BrokenObserver(RecordingObserver):
            def on_step(self, step):
                raise ValueError("cannot draw")

        engine = TraversalEngine(fast_settings, BrokenObserver())
        with pytest.raises(ValueError, match="cannot draw"):
            await engine.traverse(diamond)
        assert engine.state is RunState.IDLE

    @pytest.mark.asyncio
    async def test_cancelled_superseded_run_leaves_newer_run_alone(self, engine, chain):
        first = asyncio.create_task(engine.traverse(chain, step_delay_ms=50))
        await asyncio.sleep(0)
        second = asyncio.create_task(engine.traverse(chain, step_delay_ms=200))
        await asyncio.sleep(0)
        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first
        assert engine.state is RunState.RUNNING
        engine.reset()
        with pytest.raises(TraversalCancelledError):
            await second
