"""Main CLI entry point for modgraphdot.

Converts ``go mod graph`` output read from stdin into Graphviz DOT::

    go mod graph | modgraphdot > graph.dot
    go mod graph | modgraphdot [-p] [stop string] | dot -Tpng -o graph.png
"""

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from modgraphdot.config import RenderConfig, load_render_config
from modgraphdot.errors import ModGraphError
from modgraphdot.export import export_dot, export_json
from modgraphdot.graph import convert, trim

logger = logging.getLogger("modgraphdot.cli")

DESCRIPTION = """\
Convert "go mod graph" output into Graphviz's DOT language.

For each module, the node representing the greatest version (i.e., the
version chosen by Go's minimal version selection algorithm) is colored green.
Other nodes, which aren't in the final build list, are colored grey.

If [stop string] is given, only the edges lying on a path from the main
module to a node whose name contains the stop string are kept. If -p is set
as well, only picked (green) versions are followed.
"""


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for log output. Defaults to stderr so
            stdout only carries the graph.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="modgraphdot",
        usage="go mod graph | %(prog)s [-p] [stop string] | dot -Tpng -o graph.png",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "stop",
        nargs="?",
        default="",
        metavar="stop string",
        help="Keep only paths from the root to modules containing this string",
    )
    parser.add_argument(
        "-p",
        "--picked-only",
        action="store_true",
        help="If set, only the picked versions are followed when trimming",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["dot", "json"],
        default="dot",
        help="Output format (default: dot)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the graph to this file instead of stdout",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional render configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def modgraphdot(
    in_stream: TextIO,
    out_stream: TextIO,
    stop: str = "",
    picked_only: bool = False,
    output_format: str = "dot",
    config: Optional[RenderConfig] = None,
) -> None:
    """Run the conversion pipeline.

    The whole input is consumed and the graph built before anything is
    written.

    Args:
        in_stream: Source of ``go mod graph`` lines.
        out_stream: Destination of the rendered graph.
        stop: Stop substring; empty disables trimming.
        picked_only: Follow only MVS-picked versions while trimming.
        output_format: ``dot`` or ``json``.
        config: Render settings for DOT output.

    Raises:
        MalformedLineError: Input line without exactly two tokens.
        RootError: Trimming was requested on a graph without a single root.
    """
    graph = convert(in_stream)

    if stop:
        if not any(stop in name for name in graph.referenced_ids()):
            logger.warning("No module matches %r; output will be empty", stop)
        trim(graph, stop, picked_only=picked_only)
    elif picked_only:
        logger.warning("-p has no effect without a stop string")

    if output_format == "json":
        export_json(graph, out_stream)
    else:
        export_dot(graph, out_stream, config)


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    setup_logging(args.verbose)

    try:
        config = load_render_config(args.config)
        buffer = io.StringIO()
        modgraphdot(sys.stdin, buffer, args.stop, args.picked_only, args.format, config)
        if args.output:
            Path(args.output).write_text(buffer.getvalue(), encoding="utf-8")
            logger.info("Graph written to %s", args.output)
        else:
            sys.stdout.write(buffer.getvalue())
    except (ModGraphError, ValidationError, OSError) as e:
        logger.error("modgraphdot: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
