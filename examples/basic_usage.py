"""Basic usage example for graphstep."""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from graphstep import (
    GraphSession,
    LoggingObserver,
    NotFoundError,
    TraversalSettings,
    format_order,
)


def print_step(node, frontier):
    print(f"   visit {node:<3} frontier: [{', '.join(frontier)}]")


async def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("graphstep - Basic Usage Example")
    print("=" * 60)

    # 1. Create a session with a quick animation speed
    print("\n1. Creating GraphSession...")
    session = GraphSession(
        settings=TraversalSettings(step_delay_ms=200),
        observer=LoggingObserver(),
    )
    print(f"   Store: {session.store.store_id}")
    print(f"   Step delay: {session.step_delay_ms} ms")

    # 2. Build a small graph
    print("\n2. Adding nodes and edges...")
    for node in ["A", "B", "C", "D", "E"]:
        session.add_node(node)
    for source, target in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")]:
        session.add_edge(source, target)
    session.add_edge("A", "Z")  # ignored: Z does not exist
    for node in session.node_ids():
        print(f"   {node} -> {session.neighbors(node)}  at {session.position(node)}")

    # 3. Breadth-first traversal
    print("\n3. BFS from the first node...")
    result = await session.bfs(on_step=print_step)
    print(f"   Order: {format_order(result.order)}")

    # 4. Depth-first traversal
    print("\n4. DFS from the first node...")
    result = await session.dfs(on_step=print_step)
    print(f"   Order: {format_order(result.order)}")

    # 5. Delete a node and run again
    print("\n5. Deleting D and re-running BFS...")
    session.delete_node("D")
    try:
        session.delete_node("D")
    except NotFoundError as e:
        print(f"   {e}")
    result = await session.bfs(on_step=print_step)
    print(f"   Order: {format_order(result.order)}")

    session.close()
    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
