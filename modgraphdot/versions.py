"""Semantic version ordering for Go module versions.

Module versions in ``go mod graph`` output follow Go's flavour of SemVer:
a mandatory ``v`` prefix, optional shorthand (``v1``, ``v1.2``), optional
prerelease and build metadata. The release triple is ordered with
:mod:`packaging.version`; prerelease identifiers follow SemVer 2.0
precedence. Strings that are not valid versions sort below every valid one
and compare equal to each other.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

from packaging.version import Version

_NUM = r"(?:0|[1-9][0-9]*)"
_PRERELEASE_IDENT = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_SEMVER_RE = re.compile(
    rf"^v(?P<major>{_NUM})"
    rf"(?:\.(?P<minor>{_NUM})"
    rf"(?:\.(?P<patch>{_NUM})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*))?"
    rf"(?:\+(?P<build>{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?"
    r")?)?$"
)


class ParsedVersion(NamedTuple):
    """Comparable pieces of a valid module version."""

    release: Version
    prerelease: Tuple[str, ...]


@lru_cache(maxsize=4096)
def parse_version(value: str) -> Optional[ParsedVersion]:
    """Parse a Go module version.

    Args:
        value: Version string such as ``v1.2.3-rc.1+meta``.

    Returns:
        Optional[ParsedVersion]: Parsed version, or None if ``value`` is not
        a valid Go semantic version. Build metadata is discarded.
    """
    match = _SEMVER_RE.match(value)
    if match is None:
        return None
    release = Version(
        "%s.%s.%s"
        % (match.group("major"), match.group("minor") or "0", match.group("patch") or "0")
    )
    prerelease = match.group("prerelease")
    return ParsedVersion(
        release=release,
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
    )


def _compare_identifier(a: str, b: str) -> int:
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        return (int(a) > int(b)) - (int(a) < int(b))
    if a_num:
        return -1
    if b_num:
        return 1
    return (a > b) - (a < b)


def _compare_prerelease(a: Tuple[str, ...], b: Tuple[str, ...]) -> int:
    # A release without prerelease has higher precedence.
    if a == b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    for left, right in zip(a, b):
        result = _compare_identifier(left, right)
        if result:
            return result
    return (len(a) > len(b)) - (len(a) < len(b))


def compare_versions(a: str, b: str) -> int:
    """Compare two module versions.

    Args:
        a: First version.
        b: Second version.

    Returns:
        int: -1 if ``a < b``, 0 if equal in precedence, +1 if ``a > b``.
    """
    left = parse_version(a)
    right = parse_version(b)
    if left is None or right is None:
        if left is None and right is None:
            return 0
        return -1 if left is None else 1

    if left.release != right.release:
        return 1 if left.release > right.release else -1
    return _compare_prerelease(left.prerelease, right.prerelease)


__all__ = ["ParsedVersion", "parse_version", "compare_versions"]
