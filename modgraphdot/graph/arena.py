"""Index-addressed node arena built from an edge list."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from modgraphdot.errors import MultipleRootsFoundError, NoRootFoundError
from modgraphdot.graph.models import Edge, is_root_identifier

logger = logging.getLogger("modgraphdot.graph.arena")


class NodeArena:
    """Nodes stored by integer position with adjacency as index lists.

    Attributes:
        names: Identifier of each node, by index.
        adjacency: Out-neighbour indices of each node, in edge order.
            Duplicate input edges produce duplicate entries.
    """

    def __init__(self) -> None:
        self.names: List[str] = []
        self.adjacency: List[List[int]] = []
        self._index: Dict[str, int] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "NodeArena":
        """Create an arena holding every endpoint of ``edges``."""
        arena = cls()
        for edge in edges:
            source = arena.add_node(edge.source)
            target = arena.add_node(edge.target)
            arena.adjacency[source].append(target)
        return arena

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def add_node(self, name: str) -> int:
        """Return the index of ``name``, creating the node on first use."""
        index = self._index.get(name)
        if index is None:
            index = len(self.names)
            self._index[name] = index
            self.names.append(name)
            self.adjacency.append([])
        return index

    def index_of(self, name: str) -> int:
        """Return the index of an existing node.

        Raises:
            KeyError: ``name`` is not in the arena.
        """
        return self._index[name]

    def find_root(self) -> int:
        """Return the index of the single un-versioned node.

        Raises:
            NoRootFoundError: No node lacks a version.
            MultipleRootsFoundError: More than one node lacks a version.
        """
        candidates = [
            index for index, name in enumerate(self.names) if is_root_identifier(name)
        ]
        if not candidates:
            raise NoRootFoundError()
        if len(candidates) > 1:
            raise MultipleRootsFoundError([self.names[i] for i in candidates])
        logger.debug("Root node: %s", self.names[candidates[0]])
        return candidates[0]


__all__ = ["NodeArena"]
