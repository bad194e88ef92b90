"""CLI UI components (Rich).

Kept apart from the commands so visuals can be reused and the banner can be
turned off in non-interactive modes (JSON/pipelines).
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings, get_user_env_file
from core.domain.models import Greeting


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("HELLO-D2", style="bold cyan")
    subtitle = Text("Greetings from the command line", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_greeting_panel(greeting: Greeting) -> Panel:
    body = Text(greeting.message, style="bold green")
    body.append(f"\n\nLanguage: {greeting.language.label()}", style="dim")
    return Panel(body, title=Text("Greeting", style="bold yellow"), border_style="yellow")


def build_settings_table(settings: AppSettings) -> Table:
    """Table with the effective settings and where user overrides live."""

    table = Table(title="hello-d2 settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("default_name", settings.default_name)
    table.add_row("default_language", f"{settings.default_language.value} ({settings.default_language.label()})")
    table.add_row("show_banner", str(settings.show_banner))
    table.add_row("log_level", settings.log_level)
    table.add_row("user .env", str(get_user_env_file()))
    return table
