from pathlib import Path

from import_zones.rule import Report
from import_zones.classifier import MessageId
from import_zones.utils import compact_home_path, group_by_path


def test_compact_home_path_for_absolute_home_path(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    assert compact_home_path(tmp_path / "project" / "src" / "a.ts") == (
        "~/project/src/a.ts"
    )
    assert compact_home_path(tmp_path) == "~"
    assert compact_home_path("src/a.ts") == "src/a.ts"


def test_group_by_path_keeps_first_seen_order() -> None:
    def _report(path: str, line: int) -> Report:
        return Report(
            path=path,
            line=line,
            column=1,
            message_id=MessageId.FORBIDDEN_PATTERN_WAS_VIOLATED,
            message="m",
            import_target="x",
        )

    reports = [_report("b.ts", 1), _report("a.ts", 1), _report("b.ts", 2)]

    grouped = group_by_path(reports)

    assert list(grouped) == ["b.ts", "a.ts"]
    assert [report.line for report in grouped["b.ts"]] == [1, 2]
