"""`config` subcommands: inspect and persist user defaults."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import ENV_PREFIX, AppSettings, get_user_env_file, load_settings, write_user_env_vars
from core.domain.language import Language
from core.domain.models import name_problem

app = typer.Typer(no_args_is_help=True, help="Show or change default settings.")

_console = Console()


def load_settings_or_fail() -> AppSettings:
    """`load_settings()`, with invalid values reported as a usage error.

    The message names the user `.env` so the broken value can be fixed with
    `config set` or by editing the file.
    """

    try:
        return load_settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise typer.BadParameter(
            f"invalid settings ({problems}). Check HELLO_D2_* variables and {get_user_env_file()}"
        ) from exc


@app.command()
def show() -> None:
    """Print the effective settings."""

    _console.print(build_settings_table(load_settings_or_fail()))


@app.command(name="set")
def set_defaults(
    name: str | None = typer.Option(None, "--name", help="Default name to greet."),
    language: Language | None = typer.Option(None, "--language", help="Default language (en/es)."),
) -> None:
    """Persist defaults to the user config `.env` (no manual editing needed)."""

    if name is None and language is None:
        raise typer.BadParameter("give at least one of --name or --language")
    if name is not None:
        problem = name_problem(name)
        if problem:
            raise typer.BadParameter(problem, param_hint="--name")

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}DEFAULT_NAME": name,
            f"{ENV_PREFIX}DEFAULT_LANGUAGE": language.value if language is not None else None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
