"""Tests for edge parsing and MVS classification."""

import pytest

from modgraphdot.errors import MalformedLineError
from modgraphdot.graph import Edge, convert

SCENARIO = [
    "m/root m/a@v1.2.0",
    "m/root m/b@v1.0.0",
    "m/a@v1.2.0 m/b@v1.0.0",
    "m/a@v1.2.0 m/b@v2.0.0",
]


def test_convert_keeps_edges_in_input_order() -> None:
    """Edges are returned exactly as read, duplicates included."""
    lines = SCENARIO + ["m/root m/a@v1.2.0"]
    graph = convert(lines)

    assert graph.edges == [
        Edge("m/root", "m/a@v1.2.0"),
        Edge("m/root", "m/b@v1.0.0"),
        Edge("m/a@v1.2.0", "m/b@v1.0.0"),
        Edge("m/a@v1.2.0", "m/b@v2.0.0"),
        Edge("m/root", "m/a@v1.2.0"),
    ]


def test_convert_classifies_picked_and_unpicked() -> None:
    """The greatest version per module is picked, the rest unpicked."""
    graph = convert(SCENARIO)

    assert graph.picked == ["m/a@v1.2.0", "m/b@v2.0.0"]
    assert graph.unpicked == ["m/b@v1.0.0"]


def test_convert_skips_blank_lines_and_newlines() -> None:
    """Blank lines are ignored and line terminators stripped."""
    graph = convert(["\n", "m/root m/a@v1.0.0\n", "   \n", ""])

    assert graph.edges == [Edge("m/root", "m/a@v1.0.0")]
    assert graph.picked == ["m/a@v1.0.0"]
    assert graph.unpicked == []


def test_convert_tolerates_extra_whitespace() -> None:
    """Tokens may be separated by any run of whitespace."""
    graph = convert(["  m/root \t m/a@v1.0.0  "])

    assert graph.edges == [Edge("m/root", "m/a@v1.0.0")]


@pytest.mark.parametrize("line", ["m/root", "m/root m/a@v1.0.0 m/b@v1.0.0"])
def test_convert_rejects_malformed_line(line: str) -> None:
    """A non-blank line must have exactly two tokens."""
    with pytest.raises(MalformedLineError) as excinfo:
        convert(["m/root m/a@v1.0.0", line + "\n", "m/a@v1.0.0 m/b@v1.0.0"])

    assert excinfo.value.line == line
    assert excinfo.value.token_count == len(line.split())
    assert line in str(excinfo.value)


def test_picked_is_sorted_regardless_of_input_order() -> None:
    """Picked identifiers are sorted lexicographically."""
    graph = convert(
        [
            "root z/mod@v1.0.0",
            "root a/mod@v1.0.0",
            "z/mod@v1.0.0 m/mod@v1.0.0",
        ]
    )

    assert graph.picked == ["a/mod@v1.0.0", "m/mod@v1.0.0", "z/mod@v1.0.0"]


def test_each_version_is_classified_once() -> None:
    """Every versioned identifier lands in exactly one of picked/unpicked."""
    graph = convert(
        [
            "root x@v1.0.0",
            "root x@v1.1.0",
            "x@v1.0.0 x@v1.1.0",
            "x@v1.1.0 x@v0.9.0",
            "x@v0.9.0 x@v1.0.0",
            "root y@v0.1.0",
        ]
    )

    assert graph.picked == ["x@v1.1.0", "y@v0.1.0"]
    assert sorted(graph.unpicked) == ["x@v0.9.0", "x@v1.0.0"]
    assert not set(graph.picked) & set(graph.unpicked)


def test_superseded_best_moves_to_unpicked_in_order() -> None:
    """A displaced maximum is appended when a greater version shows up."""
    graph = convert(
        [
            "root m@v1.0.0",
            "root m@v0.5.0",
            "root m@v2.0.0",
            "root m@v3.0.0-rc.1",
        ]
    )

    assert graph.unpicked == ["m@v0.5.0", "m@v1.0.0", "m@v2.0.0"]
    assert graph.picked == ["m@v3.0.0-rc.1"]


def test_equal_versions_keep_first_occurrence() -> None:
    """Versions of equal precedence do not displace the current maximum."""
    graph = convert(["root m@v2.0.0", "root m@v2.0.0+incompatible"])

    assert graph.picked == ["m@v2.0.0"]
    assert graph.unpicked == ["m@v2.0.0+incompatible"]


def test_convert_uses_supplied_comparator() -> None:
    """A custom comparator decides which version wins."""

    def reverse(a: str, b: str) -> int:
        return (a < b) - (a > b)

    graph = convert(["root m@v1.0.0", "root m@v2.0.0"], compare=reverse)

    assert graph.picked == ["m@v1.0.0"]
    assert graph.unpicked == ["m@v2.0.0"]


def test_root_is_never_classified() -> None:
    """Identifiers without a version are neither picked nor unpicked."""
    graph = convert(["root m@v1.0.0"])

    assert "root" not in graph.picked
    assert "root" not in graph.unpicked
