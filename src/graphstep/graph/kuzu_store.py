"""KuzuGraphStore -- Kuzu-backed implementation of the GraphStore protocol.

The graph lives in an in-memory Kuzu database for the lifetime of the
store; nothing is written to disk.  Node and edge order is kept with an
insertion sequence column since Cypher results are otherwise unordered.

Public API:
    KuzuGraphStore: Concrete GraphStore implementation backed by Kuzu.
"""

from __future__ import annotations

import itertools
import logging
import uuid
from typing import Any

import kuzu

from ..exceptions import NotFoundError
from .identifiers import normalize_identifier
from .types import Edge

logger = logging.getLogger(__name__)

NODE_TABLE = "GraphVertex"
REL_TABLE = "SUCCESSOR"


class KuzuGraphStore:
    """Kuzu graph database implementation of the GraphStore protocol.

    All Cypher queries use parameterised bindings; identifiers are never
    interpolated into query text.

    Args:
        store_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, store_id: str | None = None) -> None:
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(":memory:")
        self._conn = kuzu.Connection(self._db)
        self._seq = itertools.count()
        self._ensure_schema()

    @property
    def store_id(self) -> str:
        return self._store_id

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def _ensure_schema(self) -> None:
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {NODE_TABLE}"
            f"(node_id STRING, seq INT64, PRIMARY KEY(node_id))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {REL_TABLE}"
            f"(FROM {NODE_TABLE} TO {NODE_TABLE}, seq INT64)"
        )

    # ── node operations ───────────────────────────────────────

    def add_node(self, node_id: str) -> bool:
        nid = normalize_identifier(node_id)
        if nid is None or self._exists(nid):
            return False
        self._conn.execute(
            f"CREATE (:{NODE_TABLE} {{node_id: $nid, seq: $seq}})",
            {"nid": nid, "seq": next(self._seq)},
        )
        logger.debug("Added node %r to %s", nid, self._store_id)
        return True

    def delete_node(self, node_id: str) -> None:
        nid = normalize_identifier(node_id)
        if nid is None or not self._exists(nid):
            raise NotFoundError(node_id)
        # DETACH removes incoming edges too, so no successor list keeps it.
        self._conn.execute(
            f"MATCH (n:{NODE_TABLE}) WHERE n.node_id = $nid DETACH DELETE n",
            {"nid": nid},
        )
        logger.debug("Deleted node %r from %s", nid, self._store_id)

    def has_node(self, node_id: str) -> bool:
        nid = normalize_identifier(node_id)
        return nid is not None and self._exists(nid)

    def node_ids(self) -> list[str]:
        return self._column(
            f"MATCH (n:{NODE_TABLE}) RETURN n.node_id ORDER BY n.seq"
        )

    # ── edge operations ───────────────────────────────────────

    def add_edge(self, source: str, target: str) -> bool:
        src = normalize_identifier(source)
        tgt = normalize_identifier(target)
        if src is None or tgt is None:
            return False
        if not (self._exists(src) and self._exists(tgt)):
            return False
        params: dict[str, Any] = {"sid": src, "tid": tgt}
        existing = self._scalar(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"WHERE a.node_id = $sid AND b.node_id = $tid RETURN count(r)",
            params,
        )
        if existing:
            return False
        params["seq"] = next(self._seq)
        self._conn.execute(
            f"MATCH (a:{NODE_TABLE}), (b:{NODE_TABLE}) "
            f"WHERE a.node_id = $sid AND b.node_id = $tid "
            f"CREATE (a)-[:{REL_TABLE} {{seq: $seq}}]->(b)",
            params,
        )
        logger.debug("Added edge %r -> %r to %s", src, tgt, self._store_id)
        return True

    def neighbors(self, node_id: str) -> list[str]:
        nid = normalize_identifier(node_id)
        if nid is None:
            return []
        return self._column(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"WHERE a.node_id = $nid RETURN b.node_id ORDER BY r.seq",
            {"nid": nid},
        )

    def edges(self) -> list[Edge]:
        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"RETURN a.node_id, b.node_id ORDER BY a.seq, r.seq"
        )
        edges: list[Edge] = []
        while result.has_next():
            row = result.get_next()
            edges.append(Edge(source=str(row[0]), target=str(row[1])))
        return edges

    # ── lifecycle ─────────────────────────────────────────────

    def clear(self) -> None:
        self._conn.execute(f"MATCH (n:{NODE_TABLE}) DETACH DELETE n")

    def __len__(self) -> int:
        return int(self._scalar(f"MATCH (n:{NODE_TABLE}) RETURN count(n)"))

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.has_node(node_id)

    # ── private helpers ───────────────────────────────────────

    def _exists(self, nid: str) -> bool:
        count = self._scalar(
            f"MATCH (n:{NODE_TABLE}) WHERE n.node_id = $nid RETURN count(n)",
            {"nid": nid},
        )
        return bool(count)

    def _scalar(self, cypher: str, params: dict[str, Any] | None = None) -> Any:
        """Run *cypher* and return the first column of the first row."""
        result = self._conn.execute(cypher, params or {})
        if not result.has_next():
            return None
        return result.get_next()[0]

    def _column(self, cypher: str, params: dict[str, Any] | None = None) -> list[str]:
        """Run *cypher* and return the first column of every row as strings."""
        result = self._conn.execute(cypher, params or {})
        values: list[str] = []
        while result.has_next():
            values.append(str(result.get_next()[0]))
        return values


__all__ = ["KuzuGraphStore"]
