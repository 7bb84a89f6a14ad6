"""Aplicación Typer raíz."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from atlassian_rest.cli import doctor
from atlassian_rest.cli.ui_components import print_banner

app = typer.Typer(no_args_is_help=True, help="Atlassian Cloud REST client tooling.")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and responses."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    if banner:
        print_banner(Console())


def run() -> None:
    app()
