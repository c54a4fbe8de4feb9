from import_zones.tui.renderers import ReportConsoleUI

__all__ = ["ReportConsoleUI"]
