"""Unified theme system for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    SECONDARY = "blue"
    ACCENT = "magenta"
    MUTED = "dim"

    HEADER = "bold cyan"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    BULLET = "•"
    FOLDER = "📁"

    # Text fallbacks for emoji-disabled mode
    _TEXT_FALLBACKS = {
        "SUCCESS": "",
        "ERROR": "",
        "WARNING": "!",
        "INFO": "i",
        "BULLET": "-",
        "FOLDER": "",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get icon based on the specified mode ("emoji" or "text")."""
        if icon_mode == "emoji":
            return str(getattr(cls, icon_name, ""))
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")


ASSETPUSH_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "secondary": Colors.SECONDARY,
        "accent": Colors.ACCENT,
        "muted": Colors.MUTED,
        "header": Colors.HEADER,
    }
)


class ThemedConsole:
    """Console wrapper with the assetpush theme applied."""

    def __init__(self, icon_mode: str = "emoji") -> None:
        self.console = Console(theme=ASSETPUSH_THEME)
        self.icon_mode = icon_mode

    def _print(self, icon_name: str, message: str, style: str) -> None:
        # markup=False: paths and names may contain square brackets
        icon = Icons.get_icon(icon_name, self.icon_mode)
        self.console.print(
            f"{icon} {message}" if icon else message,
            style=style,
            markup=False,
        )

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")

    def print_warning(self, message: str) -> None:
        self._print("WARNING", message, "warning")

    def print_info(self, message: str) -> None:
        self._print("INFO", message, "info")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        spacing = "  " * indent
        bullet = Icons.get_icon("BULLET", self.icon_mode)
        self.console.print(f"{spacing}{bullet} {message}", style="primary", markup=False)


def get_themed_console(icon_mode: str = "emoji") -> ThemedConsole:
    return ThemedConsole(icon_mode=icon_mode)


class TableStyles:
    """Predefined table styling templates."""

    @staticmethod
    def create_integrations_table(icon_mode: str = "emoji") -> Table:
        """Create table for integration listings."""
        icon = Icons.get_icon("FOLDER", icon_mode)
        table = Table(
            title=f"{icon} Integrations" if icon else "Integrations",
            show_header=True,
            header_style=Colors.HEADER,
            border_style=Colors.SECONDARY,
        )
        table.add_column("Name", style=Colors.PRIMARY, no_wrap=True)
        table.add_column("Target path", style=Colors.ACCENT)
        table.add_column("Workspace", style=Colors.MUTED)
        return table
