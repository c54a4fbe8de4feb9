"""Find import specifiers in JavaScript/TypeScript source text.

This is a token-level scan, not a parser: it recognizes the statement shapes
that carry a module specifier string and reports where each string starts.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from import_zones.constants import IGNORED_DIRS, SOURCE_SUFFIXES
from import_zones.patterns.models import ImportReference

_STRING_OR_COMMENT_RE = re.compile(
    r"""(?P<string>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)"""
    r"""|(?P<comment>//[^\n]*|/\*.*?\*/)""",
    re.DOTALL,
)

# Runs on blanked text, so the quoted part is only ever whitespace.
_QUOTED = r"""(?P<quote>["'])[^"'\n]*(?P=quote)"""

_IMPORT_RES: tuple[re.Pattern[str], ...] = (
    # import x from "y" / import {a} from "y" / import "y"
    re.compile(
        r"(?<![\w$.])import\s+(?:type\s+)?(?:[\w$*{}\s,]+?\s*from\s*)?" + _QUOTED
    ),
    # export * from "y" / export {a} from "y"
    re.compile(
        r"(?<![\w$.])export\s+(?:type\s+)?(?:\*(?:\s+as\s+[\w$]+)?|\{[^}]*\})\s*from\s*"
        + _QUOTED
    ),
    # import("y") / require("y") / import x = require("y")
    re.compile(r"(?<![\w$.])(?:import|require)\s*\(\s*" + _QUOTED + r"\s*\)"),
)


def _spaces(text: str) -> str:
    return re.sub(r"[^\n]", " ", text)


def blank_literals(source: str) -> tuple[str, dict[int, str]]:
    """Blank comments and string contents, keeping quotes, offsets and newlines.

    Returns the blanked text and the contents of each quoted string keyed by
    the offset of its opening quote.
    """
    strings: dict[int, str] = {}

    def _blank(match: re.Match[str]) -> str:
        token = match.group(0)
        if match.group("comment") is not None:
            return _spaces(token)
        strings[match.start()] = token[1:-1]
        return token[0] + _spaces(token[1:-1]) + token[-1]

    return _STRING_OR_COMMENT_RE.sub(_blank, source), strings


def _location(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def scan_imports(source: str) -> list[ImportReference]:
    text, strings = blank_literals(source)
    found: dict[int, str] = {}
    for pattern in _IMPORT_RES:
        for match in pattern.finditer(text):
            offset = match.start("quote")
            specifier = strings.get(offset)
            if specifier:
                found.setdefault(offset, specifier)

    references: list[ImportReference] = []
    for offset in sorted(found):
        line, column = _location(text, offset)
        references.append(
            ImportReference(target=found[offset], line=line, column=column)
        )
    return references


def is_source_file(path: Path) -> bool:
    return path.suffix in SOURCE_SUFFIXES


def iter_source_files(
    paths: Iterable[Path], ignored_dirs: Iterable[str] = IGNORED_DIRS
) -> Iterator[Path]:
    ignored = set(ignored_dirs)
    seen: set[Path] = set()
    for path in paths:
        if path.is_dir():
            candidates = sorted(
                child
                for child in path.rglob("*")
                if child.is_file()
                and is_source_file(child)
                and not ignored.intersection(child.relative_to(path).parts)
            )
        elif path.is_file():
            candidates = [path]
        else:
            continue
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                yield candidate
