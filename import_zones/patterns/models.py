"""Pattern, zone and ruleset data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

SimplePattern = Union[str, re.Pattern[str]]


@dataclass(frozen=True)
class AnnotatedPattern:
    """Forbidden pattern that carries its own violation message."""

    pattern: SimplePattern
    error_message: str


Pattern = Union[SimplePattern, AnnotatedPattern]


@dataclass(frozen=True)
class Zone:
    target: re.Pattern[str]
    allowed_patterns: tuple[SimplePattern, ...] = ()
    forbidden_patterns: tuple[Pattern, ...] = ()
    name: str = ""


@dataclass(frozen=True)
class Ruleset:
    allowed_patterns: tuple[SimplePattern, ...] = ()
    forbidden_patterns: tuple[Pattern, ...] = ()

    def is_empty(self) -> bool:
        return not self.allowed_patterns and not self.forbidden_patterns


@dataclass(frozen=True)
class ImportReference:
    target: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class ImportPatternsConfig:
    zones: tuple[Zone, ...] = field(default_factory=tuple)
    match_against_absolute_paths: bool = False
    root: Path | None = None
