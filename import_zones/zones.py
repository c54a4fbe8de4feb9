"""Select the zones that apply to a file and merge their patterns."""

from __future__ import annotations

import logging
from typing import Sequence

from import_zones.patterns.matching import matches_pattern
from import_zones.patterns.models import Pattern, Ruleset, SimplePattern, Zone

logger = logging.getLogger(__name__)


def matching_zones(file_path: str, zones: Sequence[Zone]) -> list[Zone]:
    return [zone for zone in zones if matches_pattern(zone.target, file_path)]


def collect_ruleset(file_path: str, zones: Sequence[Zone]) -> Ruleset:
    """Concatenate allowed/forbidden patterns of every zone targeting ``file_path``.

    ``file_path`` must already use forward slashes. Zone order is kept, so the
    first matching zone contributes the first patterns.
    """
    allowed: list[SimplePattern] = []
    forbidden: list[Pattern] = []

    matched = matching_zones(file_path, zones)
    for zone in matched:
        allowed.extend(zone.allowed_patterns or ())
        forbidden.extend(zone.forbidden_patterns or ())

    logger.debug("%s matched %d of %d zones", file_path, len(matched), len(zones))
    return Ruleset(allowed_patterns=tuple(allowed), forbidden_patterns=tuple(forbidden))
