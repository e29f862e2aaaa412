# Argloom CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for argloom output."""
from rich.console import Console

from argloom.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())
err_console = Console(color_system="truecolor", theme=get_nord_theme(), stderr=True)
