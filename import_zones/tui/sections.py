from rich.console import RenderableType
from rich.panel import Panel

from import_zones.tui.enums import UIStyle

PANEL_PADDING = (0, 1)


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=PANEL_PADDING)

    @staticmethod
    def note(title: str, message: str, style: str = UIStyle.DIM.value) -> Panel:
        """Single-message panel, used when there is no table to show."""
        return Panel(message, title=title, border_style=style, padding=PANEL_PADDING)
