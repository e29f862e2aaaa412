# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the rich `Theme` used by argloom consoles.

`OneColors` and `NordColors` expose hex strings usable directly in rich markup,
e.g. `f"[{OneColors.DARK_RED}]error[/]"`. `get_nord_theme()` maps the semantic
style names used by argloom (`usage`, `error` and `success`) onto the Nord
palette.
"""
from rich.style import Style
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    BLUE_b = f"bold {BLUE}"
    GREEN_b = f"bold {GREEN}"
    DARK_RED_b = f"bold {DARK_RED}"


class NordColors:
    """Nord palette, polar night through aurora."""

    NORD0 = "#2E3440"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD6 = "#ECEFF4"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD11 = "#BF616A"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"
    NORD15 = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return the rich theme shared by the argloom consoles."""
    return Theme(
        {
            "usage": Style(color=NordColors.NORD8, bold=True),
            "error": Style(color=NordColors.NORD11, bold=True),
            "success": Style(color=NordColors.NORD14),
        }
    )
