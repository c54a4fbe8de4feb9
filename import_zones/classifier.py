"""Decide whether one import is allowed by a file's ruleset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from import_zones.patterns.matching import (
    forbidden_entry,
    matches_pattern,
    render_pattern,
)
from import_zones.patterns.models import Ruleset, SimplePattern
from import_zones.paths import resolve_import_target

logger = logging.getLogger(__name__)


class MessageId(str, Enum):
    NO_ALLOWED_PATTERN_DID_MATCH = "noAllowedPatternDidMatch"
    FORBIDDEN_PATTERN_WAS_VIOLATED = "forbiddenPatternWasViolated"


NO_ALLOWED_PATTERN_TEMPLATE = (
    "Imports violates restrictions. None of the allowed patterns did match. "
    "allowedPatterns={allowed_patterns}"
)


@dataclass(frozen=True)
class Ok:
    message_id: Optional[MessageId] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class ForbiddenViolation:
    message: str

    @property
    def message_id(self) -> MessageId:
        return MessageId.FORBIDDEN_PATTERN_WAS_VIOLATED


@dataclass(frozen=True)
class NoAllowedPatternMatched:
    allowed_patterns: tuple[SimplePattern, ...]

    @property
    def message_id(self) -> MessageId:
        return MessageId.NO_ALLOWED_PATTERN_DID_MATCH

    @property
    def rendered_patterns(self) -> str:
        return " or ".join(
            f'"{render_pattern(pattern)}"' for pattern in self.allowed_patterns
        )

    @property
    def message(self) -> str:
        return NO_ALLOWED_PATTERN_TEMPLATE.format(
            allowed_patterns=self.rendered_patterns
        )


Verdict = Union[Ok, ForbiddenViolation, NoAllowedPatternMatched]


def classify(ruleset: Ruleset, import_target: str, file_context: str) -> Verdict:
    path = resolve_import_target(import_target, file_context)

    some_allowed_pattern_did_match = not ruleset.allowed_patterns
    for pattern in ruleset.allowed_patterns:
        if matches_pattern(pattern, path):
            some_allowed_pattern_did_match = True
            break

    violations: list[str] = []
    for entry in ruleset.forbidden_patterns:
        pattern, error_message = forbidden_entry(entry)
        if matches_pattern(pattern, path):
            violations.append(error_message)

    if violations:
        verdict: Verdict = ForbiddenViolation(message=" ".join(violations))
    elif not some_allowed_pattern_did_match:
        verdict = NoAllowedPatternMatched(allowed_patterns=ruleset.allowed_patterns)
    else:
        verdict = Ok()

    logger.debug("%s -> %s: %s", file_context, path, type(verdict).__name__)
    return verdict
