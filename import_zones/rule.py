"""Lint-rule adapter: zones per file, one verdict per import."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from import_zones.classifier import MessageId, Ok, classify
from import_zones.host.scanner import scan_imports
from import_zones.patterns.models import ImportPatternsConfig, ImportReference, Ruleset
from import_zones.paths import ensure_posix_separator, relative_to_root
from import_zones.zones import collect_ruleset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    path: str
    line: int
    column: int
    message_id: MessageId
    message: str
    import_target: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "message_id": self.message_id.value,
            "message": self.message,
            "import_target": self.import_target,
        }


class FileChecker:
    def __init__(self, filename: str, ruleset: Ruleset) -> None:
        self.filename = filename
        self.ruleset = ruleset

    def check(self, reference: ImportReference) -> Report | None:
        verdict = classify(self.ruleset, reference.target, self.filename)
        if isinstance(verdict, Ok):
            return None
        return Report(
            path=self.filename,
            line=reference.line,
            column=reference.column,
            message_id=verdict.message_id,
            message=verdict.message,
            import_target=reference.target,
        )

    def check_all(self, references: Iterable[ImportReference]) -> list[Report]:
        reports: list[Report] = []
        for reference in references:
            report = self.check(reference)
            if report is not None:
                reports.append(report)
        return reports


class ImportPatternsRule:
    def __init__(self, config: ImportPatternsConfig) -> None:
        self.config = config

    def normalize_filename(self, filename: str | Path) -> str:
        if self.config.match_against_absolute_paths:
            return ensure_posix_separator(str(filename))
        return relative_to_root(str(filename), self.config.root)

    def create(self, filename: str | Path) -> FileChecker | None:
        """Return a checker for ``filename``, or None when no zone constrains it."""
        linted_filename = self.normalize_filename(filename)
        ruleset = collect_ruleset(linted_filename, self.config.zones)
        if ruleset.is_empty():
            return None
        return FileChecker(linted_filename, ruleset)

    def lint_source(self, filename: str | Path, source: str) -> list[Report]:
        checker = self.create(filename)
        if checker is None:
            return []
        return self._run(checker, source)

    def lint_file(self, path: Path) -> list[Report]:
        checker = self.create(path)
        if checker is None:
            return []
        return self._run(checker, path.read_text(encoding="utf-8"))

    def _run(self, checker: FileChecker, source: str) -> list[Report]:
        reports = checker.check_all(scan_imports(source))
        logger.debug("%s: %d reports", checker.filename, len(reports))
        return reports
