"""Public graph API surface."""

from modgraphdot.graph.arena import NodeArena
from modgraphdot.graph.convert import convert
from modgraphdot.graph.models import (
    VERSION_SEPARATOR,
    Edge,
    ModuleGraph,
    is_root_identifier,
    split_identifier,
)
from modgraphdot.graph.trim import collect_path_edges, dedupe_edges, trim

__all__ = [
    "VERSION_SEPARATOR",
    "Edge",
    "ModuleGraph",
    "NodeArena",
    "collect_path_edges",
    "convert",
    "dedupe_edges",
    "is_root_identifier",
    "split_identifier",
    "trim",
]
