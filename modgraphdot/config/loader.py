"""Load :class:`RenderConfig` from TOML/JSON sources.

Accepted sources:

* None -> default RenderConfig
* dict -> RenderConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from modgraphdot.config.schema import RenderConfig
from modgraphdot.errors import ConfigurationError

logger = logging.getLogger("modgraphdot.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _detect_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def _is_config_file(path: Path) -> bool:
    # Long inline strings raise ENAMETOOLONG instead of returning False.
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


def _parse(text: str, fmt: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Invalid {fmt.upper()} configuration: {exc}") from exc


def load_render_config(source: ConfigSource) -> RenderConfig:
    """Load RenderConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns RenderConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        RenderConfig instance.

    Raises:
        ConfigurationError: The source cannot be parsed or fails validation.
        OSError: The configuration file exists but cannot be read.
    """
    if source is None:
        logger.debug("No config source provided; using default RenderConfig")
        return RenderConfig.default()

    if isinstance(source, dict):
        data: Any = source
    elif isinstance(source, (str, Path)):
        path = Path(source)
        fmt: Optional[str] = None
        if _is_config_file(path):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)
        data = _parse(text, fmt)
    else:
        raise TypeError(f"Unsupported config source type: {type(source)!r}")

    if not isinstance(data, dict):
        raise ConfigurationError("Top-level configuration must be a mapping/dict")

    try:
        return RenderConfig.from_dict(data)
    except (ValidationError, ValueError) as exc:
        raise ConfigurationError(f"Invalid render configuration: {exc}") from exc


__all__ = ["ConfigSource", "load_render_config"]
