from import_zones.classifier import (
    ForbiddenViolation,
    MessageId,
    NoAllowedPatternMatched,
    Ok,
    Verdict,
    classify,
)
from import_zones.config.loader import load_config, parse_config
from import_zones.errors import ImportZonesError, UnreachablePatternError
from import_zones.patterns.models import (
    AnnotatedPattern,
    ImportPatternsConfig,
    ImportReference,
    Ruleset,
    Zone,
)
from import_zones.paths import ensure_posix_separator, resolve_import_target
from import_zones.rule import FileChecker, ImportPatternsRule, Report
from import_zones.zones import collect_ruleset

__all__ = [
    "AnnotatedPattern",
    "FileChecker",
    "ForbiddenViolation",
    "ImportPatternsConfig",
    "ImportPatternsRule",
    "ImportReference",
    "ImportZonesError",
    "MessageId",
    "NoAllowedPatternMatched",
    "Ok",
    "Report",
    "Ruleset",
    "UnreachablePatternError",
    "Verdict",
    "Zone",
    "classify",
    "collect_ruleset",
    "ensure_posix_separator",
    "load_config",
    "parse_config",
    "resolve_import_target",
]
