"""Core data model: edges and the module graph.

A :class:`ModuleGraph` is produced once by :func:`modgraphdot.graph.convert.convert`,
may be reduced in place by :func:`modgraphdot.graph.trim.trim`, and is then only
read by the exporters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Set, Tuple

import networkx as nx

VERSION_SEPARATOR = "@"


class Edge(NamedTuple):
    """Directed requirement ``source -> target`` between two identifiers."""

    source: str
    target: str


def split_identifier(identifier: str) -> Optional[Tuple[str, str]]:
    """Split ``module@version`` into its module path and version.

    Args:
        identifier: Node identifier as it appears in the input.

    Returns:
        Optional[Tuple[str, str]]: ``(module, version)``, or None for a root
        identifier that carries no version.
    """
    module, sep, version = identifier.partition(VERSION_SEPARATOR)
    if not sep:
        return None
    return module, version


def is_root_identifier(identifier: str) -> bool:
    """Return True if ``identifier`` has no version separator."""
    return VERSION_SEPARATOR not in identifier


@dataclass
class ModuleGraph:
    """Edge list plus MVS classification of every versioned identifier.

    Attributes:
        edges: Edges in input order, duplicates included.
        picked: Version selected per module, sorted lexicographically.
        unpicked: Superseded versions, in the order they were displaced.
    """

    edges: List[Edge] = field(default_factory=list)
    picked: List[str] = field(default_factory=list)
    unpicked: List[str] = field(default_factory=list)

    def referenced_ids(self) -> Set[str]:
        """Return every identifier that is an endpoint of some edge."""
        referenced: Set[str] = set()
        for edge in self.edges:
            referenced.add(edge.source)
            referenced.add(edge.target)
        return referenced

    def retain_referenced(self) -> None:
        """Drop picked/unpicked labels no longer referenced by any edge."""
        referenced = self.referenced_ids()
        self.picked = _filter_referenced(self.picked, referenced)
        self.unpicked = _filter_referenced(self.unpicked, referenced)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Build a networkx view of the graph.

        Nodes carry an ``mvs`` attribute: ``picked``, ``unpicked`` or
        ``root``. Duplicate edges are kept as parallel edges.

        Returns:
            nx.MultiDiGraph: New graph; mutating it does not affect ``self``.
        """
        graph = nx.MultiDiGraph()
        for edge in self.edges:
            graph.add_edge(edge.source, edge.target)

        for node_id in self.picked:
            graph.add_node(node_id, mvs="picked")
        for node_id in self.unpicked:
            graph.add_node(node_id, mvs="unpicked")
        for node_id in graph.nodes:
            if is_root_identifier(node_id):
                graph.nodes[node_id]["mvs"] = "root"
        return graph


def _filter_referenced(identifiers: Iterable[str], referenced: Set[str]) -> List[str]:
    return [identifier for identifier in identifiers if identifier in referenced]


__all__ = [
    "VERSION_SEPARATOR",
    "Edge",
    "ModuleGraph",
    "split_identifier",
    "is_root_identifier",
]
