from typing import Any, Final

_REGEX_PATTERN: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "regex": {"type": "string"},
        "flags": {"type": "string", "pattern": "^[imsx]*$"},
    },
    "required": ["regex"],
    "additionalProperties": False,
}

_SIMPLE_PATTERN: Final[dict[str, Any]] = {
    "oneOf": [{"type": "string"}, {"$ref": "#/$defs/regexPattern"}],
}

_ANNOTATED_PATTERN: Final[dict[str, Any]] = {
    "type": "object",
    "properties": {
        "pattern": {"$ref": "#/$defs/simplePattern"},
        "error_message": {"type": "string", "minLength": 1},
    },
    "required": ["pattern", "error_message"],
    "additionalProperties": False,
}

CONFIG_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "import-zones configuration",
    "type": "object",
    "properties": {
        "match_against_absolute_paths": {"type": "boolean"},
        "zones": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "target": {"$ref": "#/$defs/simplePattern"},
                    "allowed_patterns": {
                        "type": "array",
                        "items": {"$ref": "#/$defs/simplePattern"},
                    },
                    "forbidden_patterns": {
                        "type": "array",
                        "items": {
                            "oneOf": [
                                {"$ref": "#/$defs/simplePattern"},
                                {"$ref": "#/$defs/annotatedPattern"},
                            ]
                        },
                    },
                },
                "required": ["target"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["zones"],
    "additionalProperties": False,
    "$defs": {
        "regexPattern": _REGEX_PATTERN,
        "simplePattern": _SIMPLE_PATTERN,
        "annotatedPattern": _ANNOTATED_PATTERN,
    },
}
