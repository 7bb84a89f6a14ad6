"""Doctor command for environment diagnostics."""

from __future__ import annotations

from collections.abc import Callable

import typer
from rich.console import Console

from atlassian_rest.adapters.jira import JiraClient
from atlassian_rest.cli.ui_components import build_checks_table, build_response_panel
from atlassian_rest.core.config import AppSettings, write_user_env_vars
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.errors import AtlassianError, ResponseError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _make_client(settings: AppSettings) -> JiraClient:
    return JiraClient.from_settings(settings)


def _probe(call: Callable[[], tuple[object, ResponseScheme]]) -> tuple[bool, str, ResponseScheme | None]:
    try:
        _, response = call()
        return True, f"HTTP {response.code}", None
    except ResponseError as exc:
        return False, f"HTTP {exc.response.code} {exc.response.method} {exc.response.endpoint}", exc.response
    except AtlassianError as exc:
        return False, str(exc), None


@app.command()
def run(timeout: float = typer.Option(15.0, help="Deadline for each probe (seconds).")) -> None:
    """Run baseline diagnostics against the configured site."""

    settings = AppSettings()

    table = build_checks_table("atlassian-rest doctor")

    # Config
    table.add_row("Site", "OK" if settings.site else "MISSING", settings.site or "Set ATLASSIAN_REST_SITE")
    if settings.has_credentials:
        table.add_row("Credentials", "OK", f"Basic auth as {settings.email}")
    else:
        table.add_row("Credentials", "OPTIONAL", "No email/token -> anonymous requests")
    table.add_row("User-Agent", "OK", settings.user_agent or "(httpx default)")
    table.add_row("Experimental API", "ON" if settings.experimental_api else "OFF", "X-ExperimentalApi: opt-in")

    if not settings.site:
        _console.print(table)
        raise typer.Exit(code=1)

    failures: list[ResponseScheme] = []
    ok_all = True
    with _make_client(settings) as client:
        probes = {
            "Server info": lambda: client.server.info(Context.with_timeout(timeout)),
            "Myself": lambda: client.myself.details(Context.with_timeout(timeout)),
        }
        for label, call in probes.items():
            ok, detail, failed = _probe(call)
            ok_all = ok_all and ok
            table.add_row(label, "OK" if ok else "FAIL", detail)
            if failed is not None:
                failures.append(failed)

    _console.print(table)
    for response in failures:
        _console.print(build_response_panel(response))

    if not ok_all:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    site = typer.prompt("Site URL (e.g. https://example.atlassian.net)").strip()
    email = typer.prompt("Account email", default="", show_default=False).strip()
    api_token = typer.prompt("API token", default="", show_default=False, hide_input=True).strip()

    if not site:
        raise typer.BadParameter("site is required")

    env_path = write_user_env_vars(
        {
            "ATLASSIAN_REST_SITE": site,
            "ATLASSIAN_REST_EMAIL": email or None,
            "ATLASSIAN_REST_API_TOKEN": api_token or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
