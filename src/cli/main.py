"""Typer application for hello-d2.

`run()` is the console-script entry point; `app` is exposed for tests.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_greeting_json, greeting_to_json
from cli import config_cmd
from cli.config_cmd import load_settings_or_fail
from cli.ui_components import build_greeting_panel, print_banner
from core.domain.language import Language
from core.errors import HelloError
from core.logging_setup import configure_logging
from core.services.greeter import build_greeting

app = typer.Typer(
    no_args_is_help=True,
    help="hello-d2: print a friendly greeting.",
    add_completion=False,
)
app.add_typer(config_cmd.app, name="config")

_console = Console()
logger = logging.getLogger("hello_d2.cli")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        level = load_settings_or_fail().log_level
    except typer.BadParameter:
        # `config` must keep working so broken settings can be repaired.
        if ctx.invoked_subcommand != "config":
            raise
        level = "WARNING"
    configure_logging("DEBUG" if verbose else level)


@app.command()
def hello(
    name: str | None = typer.Argument(None, help="Who to greet (defaults to the configured name)."),
    spanish: bool = typer.Option(False, "--spanish", "-s", help="Greet in Spanish."),
    as_json: bool = typer.Option(False, "--json", help="Print the greeting as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the greeting as JSON to this file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
    plain: bool = typer.Option(False, "--plain", help="Print only the greeting text."),
) -> None:
    """Print a greeting, e.g. `Hello, World!`."""

    settings = load_settings_or_fail()
    target = settings.default_name if name is None else name
    language = Language.resolve(spanish, settings.default_language)

    try:
        greeting = build_greeting(target, language=language)
    except HelloError as exc:
        logger.debug("rejected input: %s", exc.details)
        raise typer.BadParameter(exc.message, param_hint="NAME") from exc

    if output is not None:
        path = export_greeting_json(greeting=greeting, output_path=output)
        logger.info("greeting written to %s", path)

    if as_json:
        typer.echo(greeting_to_json(greeting), nl=False)
        return
    if plain:
        typer.echo(greeting.message)
        return

    if settings.show_banner and not no_banner:
        print_banner(_console)
    _console.print(build_greeting_panel(greeting))


def force_utf8_streams() -> None:
    """Windows consoles default to cp1252, which cannot print "¡Hola"."""

    if sys.platform != "win32":
        return
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


def run() -> None:
    force_utf8_streams()
    app()


if __name__ == "__main__":
    run()
