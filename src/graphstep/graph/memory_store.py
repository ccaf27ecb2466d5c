"""InMemoryGraphStore -- dict-based implementation of the GraphStore protocol.

Public API:
    InMemoryGraphStore: Adjacency-list graph held in plain dicts and lists.
"""

from __future__ import annotations

import logging
import threading
import uuid

from ..exceptions import NotFoundError
from .identifiers import normalize_identifier
from .types import Edge

logger = logging.getLogger(__name__)


class InMemoryGraphStore:
    """Dict-based GraphStore.

    Nodes map to an ordered list of successor ids.  Dict insertion order
    gives node order and list order gives edge-creation order.  Guarded
    by a reentrant lock.

    Args:
        store_id: Human-readable identifier for this store instance.
    """

    def __init__(self, store_id: str | None = None) -> None:
        self._store_id = store_id or f"memory-{uuid.uuid4().hex[:8]}"
        self._adjacency: dict[str, list[str]] = {}
        self._lock = threading.RLock()

    @property
    def store_id(self) -> str:
        return self._store_id

    # ── node operations ──────────────────────────────────────

    def add_node(self, node_id: str) -> bool:
        nid = normalize_identifier(node_id)
        if nid is None:
            return False
        with self._lock:
            if nid in self._adjacency:
                return False
            self._adjacency[nid] = []
        logger.debug("Added node %r to %s", nid, self._store_id)
        return True

    def delete_node(self, node_id: str) -> None:
        nid = normalize_identifier(node_id)
        with self._lock:
            if nid is None or nid not in self._adjacency:
                raise NotFoundError(node_id)
            del self._adjacency[nid]
            # Drop every edge pointing at the removed node.
            for source, successors in self._adjacency.items():
                if nid in successors:
                    self._adjacency[source] = [s for s in successors if s != nid]
        logger.debug("Deleted node %r from %s", nid, self._store_id)

    def has_node(self, node_id: str) -> bool:
        nid = normalize_identifier(node_id)
        with self._lock:
            return nid is not None and nid in self._adjacency

    def node_ids(self) -> list[str]:
        with self._lock:
            return list(self._adjacency)

    # ── edge operations ──────────────────────────────────────

    def add_edge(self, source: str, target: str) -> bool:
        src = normalize_identifier(source)
        tgt = normalize_identifier(target)
        with self._lock:
            if src not in self._adjacency or tgt not in self._adjacency:
                return False
            successors = self._adjacency[src]
            if tgt in successors:
                return False
            successors.append(tgt)
        logger.debug("Added edge %r -> %r to %s", src, tgt, self._store_id)
        return True

    def neighbors(self, node_id: str) -> list[str]:
        nid = normalize_identifier(node_id)
        with self._lock:
            return list(self._adjacency.get(nid, ())) if nid is not None else []

    def edges(self) -> list[Edge]:
        with self._lock:
            return [
                Edge(source=source, target=target)
                for source, successors in self._adjacency.items()
                for target in successors
            ]

    # ── lifecycle ────────────────────────────────────────────

    def clear(self) -> None:
        with self._lock:
            self._adjacency.clear()

    def close(self) -> None:
        """No-op; nothing to release."""

    def __len__(self) -> int:
        with self._lock:
            return len(self._adjacency)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.has_node(node_id)


__all__ = ["InMemoryGraphStore"]
