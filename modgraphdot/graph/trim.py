"""Reduce a module graph to the paths leading to matching nodes.

Given a stop substring, only edges that lie on some simple path from the root
to a node whose identifier contains the substring are kept. A matching node
ends the path: its own requirements are not followed. Cycles never
contribute edges.

The search is a backtracking depth-first traversal over a :class:`NodeArena`.
It uses an explicit frame stack so deep dependency chains do not hit the
interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from modgraphdot.graph.arena import NodeArena
from modgraphdot.graph.models import Edge, ModuleGraph

logger = logging.getLogger("modgraphdot.graph.trim")

IndexEdge = Tuple[int, int]


def collect_path_edges(
    arena: NodeArena,
    root: int,
    stop: str,
    allowed: Optional[Sequence[bool]] = None,
) -> List[IndexEdge]:
    """Collect edges on every root-to-match path.

    Args:
        arena: Node arena to search.
        root: Index of the start node.
        stop: Substring a node identifier must contain to match.
        allowed: Optional per-index mask. When given, edges into nodes
            whose mask is False are never followed and such nodes never
            count as matches.

    Returns:
        List[IndexEdge]: Kept edges in emission order. The same edge can
        appear more than once when several paths share it.
    """
    matches = [stop in name for name in arena.names]
    on_path = [False] * len(arena)
    kept: List[IndexEdge] = []
    # Frame: [node index, next adjacency position, any branch matched]
    stack: List[list] = []

    def enter(node: int) -> Optional[bool]:
        """Return the result for terminal nodes, or None after pushing a frame."""
        if on_path[node]:
            return False
        if matches[node]:
            return allowed is None or allowed[node]
        on_path[node] = True
        stack.append([node, 0, False])
        return None

    if enter(root) is not None:
        return kept

    while stack:
        frame = stack[-1]
        node, position = frame[0], frame[1]
        neighbours = arena.adjacency[node]

        if position < len(neighbours):
            frame[1] = position + 1
            child = neighbours[position]
            if allowed is not None and not allowed[child]:
                continue
            kept.append((node, child))  # tentative
            result = enter(child)
            if result is None:
                continue
            if result:
                frame[2] = True
            else:
                kept.pop()
            continue

        stack.pop()
        on_path[node] = False
        if stack:
            if frame[2]:
                stack[-1][2] = True
            else:
                # A failed subtree has already popped its own edges, so the
                # edge into it is last.
                kept.pop()

    return kept


def dedupe_edges(edges: Sequence[IndexEdge]) -> List[IndexEdge]:
    """Drop repeated edges, keeping the first occurrence of each pair."""
    return list(dict.fromkeys(edges))


def trim(graph: ModuleGraph, stop: str, picked_only: bool = False) -> None:
    """Reduce ``graph`` in place to the edges leading to ``stop`` matches.

    A root identifier that itself contains ``stop`` matches immediately, which
    leaves the graph empty.

    Args:
        graph: Graph to reduce. Its edges and picked/unpicked lists are
            replaced.
        stop: Stop substring. Empty means no trimming.
        picked_only: Follow only MVS-picked versions; the root always
            qualifies.

    Raises:
        NoRootFoundError: The graph has no root.
        MultipleRootsFoundError: The graph has more than one root.
    """
    if not stop:
        logger.debug("Empty stop string; graph left untouched")
        return

    arena = NodeArena.from_edges(graph.edges)
    root = arena.find_root()

    allowed: Optional[List[bool]] = None
    if picked_only:
        allowed = [False] * len(arena)
        for name in graph.picked:
            if name in arena:
                allowed[arena.index_of(name)] = True
        allowed[root] = True

    raw = collect_path_edges(arena, root, stop, allowed)
    unique = dedupe_edges(raw)

    before = len(graph.edges)
    names = arena.names
    graph.edges = [Edge(names[source], names[target]) for source, target in unique]
    graph.retain_referenced()

    logger.info(
        "Trimmed graph at %r: %d -> %d edges (%d picked, %d unpicked)",
        stop,
        before,
        len(graph.edges),
        len(graph.picked),
        len(graph.unpicked),
    )


__all__ = ["IndexEdge", "collect_path_edges", "dedupe_edges", "trim"]
