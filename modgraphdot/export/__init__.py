"""Graph exporters."""

from modgraphdot.export.dot import export_dot, quote, render_dot
from modgraphdot.export.json import export_json, graph_to_node_link

__all__ = ["export_dot", "export_json", "graph_to_node_link", "quote", "render_dot"]
