"""Parse ``go mod graph`` output and classify versions by MVS.

Each input line is one requirement edge ``from to``. While the edges are
collected, every distinct ``module@version`` identifier is classified: the
greatest version seen for a module is *picked*, every other version ends up
*unpicked*.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Set

from modgraphdot.errors import MalformedLineError
from modgraphdot.graph.models import VERSION_SEPARATOR, Edge, ModuleGraph, split_identifier
from modgraphdot.versions import compare_versions

logger = logging.getLogger("modgraphdot.graph.convert")

VersionComparator = Callable[[str, str], int]


def convert(
    lines: Iterable[str], compare: VersionComparator = compare_versions
) -> ModuleGraph:
    """Build a :class:`ModuleGraph` from edge lines.

    Args:
        lines: Text lines, each blank or ``"<from> <to>"``. Trailing newlines
            are allowed.
        compare: Version comparator returning a negative, zero or positive
            number like :func:`modgraphdot.versions.compare_versions`.

    Returns:
        ModuleGraph: Edges in input order with picked/unpicked lists filled.

    Raises:
        MalformedLineError: A non-blank line does not have exactly two tokens.
    """
    graph = ModuleGraph()
    seen: Set[str] = set()
    best: Dict[str, str] = {}  # module path -> greatest version so far

    for line_no, raw in enumerate(lines, start=1):
        parts = raw.split()
        if not parts:
            continue
        if len(parts) != 2:
            logger.debug("Malformed line %d: %r", line_no, raw)
            raise MalformedLineError(raw.rstrip("\r\n"), len(parts))

        source, target = parts
        graph.edges.append(Edge(source, target))

        for identifier in (source, target):
            if identifier in seen:
                continue
            seen.add(identifier)

            split = split_identifier(identifier)
            if split is None:
                # Root node doesn't have a version.
                continue
            module, version = split

            max_version = best.get(module)
            if max_version is None:
                best[module] = version
            elif compare(max_version, version) < 0:
                graph.unpicked.append(module + VERSION_SEPARATOR + max_version)
                best[module] = version
            else:
                graph.unpicked.append(identifier)

    graph.picked = sorted(
        module + VERSION_SEPARATOR + version for module, version in best.items()
    )

    logger.debug(
        "Parsed %d edges: %d picked, %d unpicked",
        len(graph.edges),
        len(graph.picked),
        len(graph.unpicked),
    )
    return graph


__all__ = ["VersionComparator", "convert"]
