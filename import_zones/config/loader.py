"""Load zone configuration from YAML or JSON files."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from import_zones.config.schema import CONFIG_SCHEMA
from import_zones.constants import CONFIG_FILENAMES
from import_zones.errors import (
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    InvalidPatternError,
    MissingConfigFileError,
)
from import_zones.patterns.models import (
    AnnotatedPattern,
    ImportPatternsConfig,
    Pattern,
    SimplePattern,
    Zone,
)

logger = logging.getLogger(__name__)

_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


@lru_cache(maxsize=1)
def _config_validator() -> Draft202012Validator:
    return Draft202012Validator(CONFIG_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def validate_config(payload: Any, config_path: Path) -> None:
    if not isinstance(payload, dict):
        raise InvalidConfigSchemaError(config_path, "must be a mapping")
    error = next(iter(_config_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(config_path, format_schema_error(error))


def find_config(start: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = start / name
        if candidate.is_file():
            return candidate
    return None


def _compile(source: str, flags: str, config_path: Path) -> re.Pattern[str]:
    value = 0
    for letter in flags:
        value |= _FLAGS[letter]
    try:
        return re.compile(source, value)
    except re.error as exc:
        raise InvalidPatternError(config_path, source, str(exc)) from exc


def _regex(raw: Any, config_path: Path) -> re.Pattern[str]:
    if isinstance(raw, str):
        return _compile(raw, "", config_path)
    return _compile(raw["regex"], raw.get("flags", ""), config_path)


def _simple_pattern(raw: Any, config_path: Path) -> SimplePattern:
    if isinstance(raw, str):
        return raw
    return _regex(raw, config_path)


def _forbidden_pattern(raw: Any, config_path: Path) -> Pattern:
    if isinstance(raw, dict) and "error_message" in raw:
        return AnnotatedPattern(
            pattern=_simple_pattern(raw["pattern"], config_path),
            error_message=raw["error_message"],
        )
    return _simple_pattern(raw, config_path)


def parse_zone(raw: dict[str, Any], config_path: Path) -> Zone:
    return Zone(
        target=_regex(raw["target"], config_path),
        allowed_patterns=tuple(
            _simple_pattern(item, config_path)
            for item in raw.get("allowed_patterns", [])
        ),
        forbidden_patterns=tuple(
            _forbidden_pattern(item, config_path)
            for item in raw.get("forbidden_patterns", [])
        ),
        name=str(raw.get("name", "")),
    )


def parse_config(
    payload: Any, config_path: Path, root: Path | None = None
) -> ImportPatternsConfig:
    validate_config(payload, config_path)
    zones = tuple(parse_zone(item, config_path) for item in payload["zones"])
    return ImportPatternsConfig(
        zones=zones,
        match_against_absolute_paths=bool(
            payload.get("match_against_absolute_paths", False)
        ),
        root=root if root is not None else config_path.parent,
    )


def load_config(config_path: Path) -> ImportPatternsConfig:
    if not config_path.is_file():
        raise MissingConfigFileError(config_path)
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidConfigFormatError(config_path, str(exc)) from exc

    config = parse_config(payload, config_path, root=config_path.parent.resolve())
    logger.debug("Loaded %d zones from %s", len(config.zones), config_path)
    return config
