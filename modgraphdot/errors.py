"""Exception hierarchy for modgraphdot.

Every error raised by the pipeline derives from :class:`ModGraphError` so the
CLI can report it and exit without a traceback. None of these errors are
recoverable: the tool is a one-shot batch conversion.
"""

from __future__ import annotations

from typing import List


class ModGraphError(Exception):
    """Base class for all modgraphdot failures."""
    pass


class MalformedLineError(ModGraphError):
    """Input line does not hold exactly two whitespace-separated tokens.

    Attributes:
        line: Offending line, verbatim.
        token_count: Number of tokens found on the line.
    """

    def __init__(self, line: str, token_count: int):
        self.line = line
        self.token_count = token_count
        super().__init__(
            f"expected 2 words in line, but got {token_count}: {line}"
        )


class RootError(ModGraphError):
    """The graph does not have exactly one un-versioned identifier."""
    pass


class NoRootFoundError(RootError):
    """No un-versioned identifier exists in the graph."""

    def __init__(self) -> None:
        super().__init__("there is no root node (no identifier without a version)")


class MultipleRootsFoundError(RootError):
    """More than one un-versioned identifier exists in the graph.

    Attributes:
        candidates: Sorted root candidates.
    """

    def __init__(self, candidates: List[str]):
        self.candidates = sorted(candidates)
        super().__init__(
            "expected exactly one root node, found %d: %s"
            % (len(self.candidates), ", ".join(self.candidates))
        )


class ConfigurationError(ModGraphError):
    """Render configuration could not be loaded or is invalid."""
    pass


__all__ = [
    "ModGraphError",
    "MalformedLineError",
    "RootError",
    "NoRootFoundError",
    "MultipleRootsFoundError",
    "ConfigurationError",
]
