"""DOT export for module graphs."""

import logging
from typing import List, Optional, TextIO

from modgraphdot.config.schema import RenderConfig
from modgraphdot.graph.models import ModuleGraph

logger = logging.getLogger("modgraphdot.export.dot")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def quote(identifier: str) -> str:
    """Return ``identifier`` as a double-quoted DOT string."""
    return '"%s"' % "".join(_ESCAPES.get(ch, ch) for ch in identifier)


def render_dot(graph: ModuleGraph, config: Optional[RenderConfig] = None) -> str:
    """Render a graph as a DOT digraph.

    Edges come first in graph order, followed by one styled node statement
    per picked and then per unpicked identifier.

    Args:
        graph: Graph to render.
        config: Render settings; defaults to :class:`RenderConfig`.

    Returns:
        str: Complete DOT document ending with a newline.
    """
    cfg = config or RenderConfig.default()
    indent = cfg.indent

    lines: List[str] = ["digraph %s {" % cfg.graph_name]
    for edge in graph.edges:
        lines.append("%s%s -> %s" % (indent, quote(edge.source), quote(edge.target)))
    for node_id in graph.picked:
        lines.append(
            "%s%s [style = filled, fillcolor = %s]"
            % (indent, quote(node_id), cfg.picked_color)
        )
    for node_id in graph.unpicked:
        lines.append(
            "%s%s [style = filled, fillcolor = %s]"
            % (indent, quote(node_id), cfg.unpicked_color)
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_dot(
    graph: ModuleGraph, out: TextIO, config: Optional[RenderConfig] = None
) -> None:
    """Write ``graph`` to ``out`` in DOT format.

    Args:
        graph: Graph to export.
        out: Writable text stream.
        config: Render settings.
    """
    out.write(render_dot(graph, config))
    logger.debug(
        "DOT export completed: %d edges, %d picked, %d unpicked",
        len(graph.edges),
        len(graph.picked),
        len(graph.unpicked),
    )
