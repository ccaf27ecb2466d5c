"""Pytest configuration and fixtures for graphstep tests."""

import random

import pytest

from graphstep import (
    GraphSession,
    InMemoryGraphStore,
    KuzuGraphStore,
    RecordingObserver,
    TraversalSettings,
)


@pytest.fixture(params=["memory", "kuzu"])
def store(request):
    """Fresh empty store, once per backend."""
    if request.param == "memory":
        s = InMemoryGraphStore(store_id="test-store")
    else:
        s = KuzuGraphStore(store_id="test-store")
    yield s
    s.close()


@pytest.fixture
def diamond(store):
    """Store holding A->B, A->C, B->D, C->D."""
    for node in "ABCD":
        store.add_node(node)
    store.add_edge("A", "B")
    store.add_edge("A", "C")
    store.add_edge("B", "D")
    store.add_edge("C", "D")
    return store


@pytest.fixture
def fast_settings():
    """Settings whose slider allows zero delay."""
    return TraversalSettings(step_delay_ms=0, min_step_delay_ms=0)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def session(fast_settings, observer):
    """Session with zero step delay and a recording observer."""
    s = GraphSession(settings=fast_settings, observer=observer, rng=random.Random(7))
    yield s
    s.close()
