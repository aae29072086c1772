"""Configuration schema and loading for modgraphdot."""

from .loader import load_render_config
from .schema import RenderConfig

__all__ = ["RenderConfig", "load_render_config"]
