"""Render configuration validated with Pydantic."""

import re
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

_DOT_ID_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class RenderConfig(BaseModel):
    """Configuration for graph rendering.

    Attributes:
        graph_name: Name of the emitted DOT digraph.
        picked_color: Fill color of MVS-picked versions.
        unpicked_color: Fill color of superseded versions.
        indent: Prefix of every statement inside the digraph body.
    """

    graph_name: str = "gomodgraph"
    picked_color: str = Field(default="green", min_length=1)
    unpicked_color: str = Field(default="gray", min_length=1)
    indent: str = "\t"

    model_config = {"extra": "forbid"}

    @field_validator("graph_name")
    @classmethod
    def validate_graph_name(cls, v: str) -> str:
        """Require a bare DOT identifier so the header needs no quoting."""
        if not _DOT_ID_RE.match(v):
            raise ValueError(f"graph_name must be a DOT identifier, got {v!r}")
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: str) -> str:
        """Only blanks and tabs are allowed as indentation."""
        if v.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return v

    @classmethod
    def default(cls) -> "RenderConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        """Build a config from a mapping, accepting an optional ``render`` table."""
        section = data.get("render", data)
        if not isinstance(section, dict):
            raise ValueError("'render' section must be a mapping")
        return cls.model_validate(section)
