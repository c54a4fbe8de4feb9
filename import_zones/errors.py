from pathlib import Path
from typing import Any


class ImportZonesError(Exception):
    """Base user-facing application error."""


class ConfigFileError(ImportZonesError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(ConfigFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidConfigFormatError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(ConfigFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class InvalidPatternError(ConfigFileError):
    def __init__(self, path: Path, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(
            path=path, message=f"Invalid regular expression {pattern!r} ({detail})"
        )


class UnreachablePatternError(ImportZonesError):
    """Raised when a pattern has a shape the matcher does not know."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"should be unreachable, but got here. value={value!r}")
