"""JSON export for module graphs."""

import json
import logging
from typing import Any, Dict, TextIO

import networkx as nx

from modgraphdot.graph.models import ModuleGraph

logger = logging.getLogger("modgraphdot.export.json")


def graph_to_node_link(graph: ModuleGraph) -> Dict[str, Any]:
    """Return networkx node-link data for ``graph``.

    Nodes carry an ``mvs`` attribute (``picked``, ``unpicked`` or ``root``).
    """
    data = nx.readwrite.json_graph.node_link_data(graph.to_networkx(), edges="edges")
    data["picked"] = list(graph.picked)
    data["unpicked"] = list(graph.unpicked)
    return data


def export_json(graph: ModuleGraph, out: TextIO) -> None:
    """Write ``graph`` to ``out`` as node-link JSON.

    Args:
        graph: Graph to export.
        out: Writable text stream.
    """
    data = graph_to_node_link(graph)
    json.dump(data, out, indent=2, ensure_ascii=False)
    out.write("\n")

    logger.debug(
        "JSON export completed: %d nodes, %d edges",
        len(data["nodes"]),
        len(data["edges"]),
    )
