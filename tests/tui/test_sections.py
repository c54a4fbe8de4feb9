from rich.panel import Panel

from import_zones.tui.enums import UIStyle
from import_zones.tui.sections import UISection


def test_wrap_and_note_build_titled_panels() -> None:
    panel = UISection.wrap("zones", "body")
    assert isinstance(panel, Panel)
    assert panel.title == "zones"
    assert panel.subtitle is None
    assert panel.border_style == UIStyle.BLUE.value

    note = UISection.note("imports", "No import violations.")
    assert note.renderable == "No import violations."
    assert note.border_style == UIStyle.DIM.value


def test_style_enum_only_carries_used_colors() -> None:
    assert [style.value for style in UIStyle] == [
        "blue",
        "green",
        "yellow",
        "red",
        "cyan",
        "dim",
        "white",
    ]
