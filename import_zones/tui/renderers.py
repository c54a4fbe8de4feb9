from rich.console import Console
from rich.markup import escape

from import_zones.classifier import Ok, Verdict
from import_zones.patterns.models import Ruleset, Zone
from import_zones.rule import Report
from import_zones.tui.enums import MESSAGE_ID_STYLE, UIStyle
from import_zones.tui.sections import UISection
from import_zones.tui.tables import ReportTable, ZoneTable
from import_zones.utils import compact_home_path, group_by_path


class ReportConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_reports(self, reports: list[Report], files_checked: int) -> None:
        style = UIStyle.RED.value if reports else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap(
                "check overview",
                ReportTable.summary_block(reports, files_checked=files_checked),
                style=style,
            )
        )

        if not reports:
            self.console.print(
                UISection.note(
                    "imports", "No import violations.", style=UIStyle.DIM.value
                )
            )
            return

        for path, items in group_by_path(reports).items():
            self.console.print(
                UISection.wrap(
                    escape(compact_home_path(path)),
                    ReportTable.reports_table(items),
                    style=UIStyle.CYAN.value,
                )
            )

    def render_zones(self, zones: list[Zone]) -> None:
        if not zones:
            self.console.print(
                UISection.note(
                    "zones", "No zones configured.", style=UIStyle.YELLOW.value
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "zones", ZoneTable.zones_table(zones), style=UIStyle.BLUE.value
            )
        )

    def render_explain(
        self,
        filename: str,
        import_target: str,
        zones: list[Zone],
        ruleset: Ruleset,
        verdict: Verdict,
    ) -> None:
        if zones:
            self.console.print(
                UISection.wrap(
                    f"zones matching {escape(filename)}",
                    ZoneTable.zones_table(zones),
                    style=UIStyle.BLUE.value,
                )
            )
        else:
            self.console.print(
                UISection.note(
                    "zones",
                    f"No zone targets {escape(filename)}.",
                    style=UIStyle.YELLOW.value,
                )
            )

        self.console.print(
            UISection.wrap(
                "effective ruleset",
                ZoneTable.ruleset_table(ruleset),
                style=UIStyle.CYAN.value,
            )
        )

        if isinstance(verdict, Ok):
            self.console.print(
                UISection.note(
                    "verdict",
                    f"[{UIStyle.GREEN.value}]ok[/{UIStyle.GREEN.value}]: "
                    f"{escape(import_target)} is allowed.",
                    style=UIStyle.GREEN.value,
                )
            )
            return

        style = MESSAGE_ID_STYLE.get(verdict.message_id, UIStyle.RED.value)
        self.console.print(
            UISection.note(
                "verdict",
                f"[{style}]{verdict.message_id.value}[/{style}]\n"
                f"{escape(verdict.message)}",
                style=style,
            )
        )
