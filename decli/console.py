# Decli CLI Declarations — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Decli output."""
from rich.console import Console
from rich.theme import Theme

decli_theme = Theme(
    {
        "usage.header": "bold",
        "usage.name": "bold cyan",
        "usage.value": "magenta",
        "usage.description": "default",
        "error": "bold red",
    }
)

console = Console(theme=decli_theme)
