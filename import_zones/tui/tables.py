from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from import_zones.patterns.matching import forbidden_entry, render_pattern
from import_zones.patterns.models import AnnotatedPattern, Pattern, Ruleset, Zone
from import_zones.rule import Report
from import_zones.tui.enums import MESSAGE_ID_STYLE, UIStyle


def _render_forbidden(pattern: Pattern) -> str:
    simple, _ = forbidden_entry(pattern)
    text = render_pattern(simple)
    if isinstance(pattern, AnnotatedPattern):
        return f"{text} ({pattern.error_message})"
    return text


def _pattern_lines(patterns: list[str], empty: str) -> str:
    if not patterns:
        return f"[{UIStyle.DIM.value}]{empty}[/{UIStyle.DIM.value}]"
    return "\n".join(escape(item) for item in patterns)


class ReportTable:
    @staticmethod
    def summary_block(reports: list[Report], files_checked: int):
        counts = Counter(report.message_id.value for report in reports)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Files", str(files_checked))
        table.add_row("Violations", str(len(reports)))
        table.add_row("Kinds", "  ".join(chips))
        return table

    @staticmethod
    def reports_table(reports: list[Report]) -> Table:
        table = Table(
            Column(header="Location", width=10),
            Column(header="Import", overflow="ellipsis", max_width=42),
            Column(header="Kind", width=28),
            Column(header="Message", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for report in reports:
            style = MESSAGE_ID_STYLE.get(report.message_id, UIStyle.WHITE.value)
            table.add_row(
                f"{report.line}:{report.column}",
                escape(report.import_target),
                f"[{style}]{report.message_id.value}[/{style}]",
                escape(report.message),
            )
        return table


class ZoneTable:
    @staticmethod
    def zones_table(zones: list[Zone]) -> Table:
        table = Table(
            Column(header="#", width=3, justify="right"),
            Column(header="Zone", width=16),
            Column(header="Target", overflow="fold"),
            Column(header="Allowed", overflow="fold"),
            Column(header="Forbidden", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, zone in enumerate(zones, start=1):
            table.add_row(
                str(index),
                escape(zone.name) or "-",
                escape(render_pattern(zone.target)),
                _pattern_lines(
                    [render_pattern(item) for item in zone.allowed_patterns],
                    "any",
                ),
                _pattern_lines(
                    [_render_forbidden(item) for item in zone.forbidden_patterns],
                    "none",
                ),
            )
        return table

    @staticmethod
    def ruleset_table(ruleset: Ruleset) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row(
            "Allowed",
            _pattern_lines(
                [render_pattern(item) for item in ruleset.allowed_patterns], "any"
            ),
        )
        table.add_row(
            "Forbidden",
            _pattern_lines(
                [_render_forbidden(item) for item in ruleset.forbidden_patterns],
                "none",
            ),
        )
        return table
