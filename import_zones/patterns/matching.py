"""Test a single pattern against an import path."""

from __future__ import annotations

import re
from typing import Any, NoReturn

from import_zones.errors import UnreachablePatternError
from import_zones.patterns.models import AnnotatedPattern, Pattern, SimplePattern

_FLAG_LETTERS: tuple[tuple[int, str], ...] = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def assert_unreachable(value: Any) -> NoReturn:
    raise UnreachablePatternError(value)


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_annotated_pattern(value: Any) -> bool:
    return (
        isinstance(value, AnnotatedPattern)
        and (isinstance(value.pattern, str) or is_regex(value.pattern))
        and isinstance(value.error_message, str)
    )


def matches_pattern(pattern: SimplePattern, path: str) -> bool:
    if isinstance(pattern, str):
        return path == pattern
    if is_regex(pattern):
        return pattern.search(path) is not None
    assert_unreachable(pattern)


def _escape_source(source: str) -> str:
    """Escape bare slashes outside character classes, as RegExp source does."""
    if not source:
        return "(?:)"
    out: list[str] = []
    escaped = in_class = False
    for char in source:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        elif char == "/" and not in_class:
            out.append("\\")
        out.append(char)
    return "".join(out)


def render_pattern(pattern: SimplePattern) -> str:
    if isinstance(pattern, str):
        return pattern
    if is_regex(pattern):
        flags = "".join(
            letter for flag, letter in _FLAG_LETTERS if pattern.flags & flag
        )
        return f"/{_escape_source(pattern.pattern)}/{flags}"
    assert_unreachable(pattern)


def forbidden_entry(pattern: Pattern) -> tuple[SimplePattern, str]:
    """Return the pattern to test and the message a match produces."""
    if isinstance(pattern, str) or is_regex(pattern):
        return pattern, f'Import pattern "{render_pattern(pattern)}" is not allowed.'
    if is_annotated_pattern(pattern):
        return pattern.pattern, pattern.error_message
    assert_unreachable(pattern)
