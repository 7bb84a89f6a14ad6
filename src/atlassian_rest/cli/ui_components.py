"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de la lógica de los comandos para reutilizar
tablas/paneles.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from atlassian_rest.core.domain.response import ResponseScheme


def print_banner(console: Console) -> None:
    title = Text("atlassian-rest", style="bold cyan")
    subtitle = Text("Jira • Jira Software • Service Management • Confluence", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def build_response_panel(response: ResponseScheme, *, max_chars: int = 2_000) -> Panel:
    """Panel con el sobre de una respuesta fallida (código, endpoint y body crudo)."""

    style = "green" if response.ok else "red"
    body = Text()
    body.append(f"{response.method} {response.endpoint}\n", style="bold")
    body.append(f"HTTP {response.code}\n\n", style=style)
    text = response.text.strip()
    if len(text) > max_chars:
        text = text[: max_chars - 1].rstrip() + "…"
    body.append(text or "(empty body)")
    return Panel(body, title=Text("Response", style=f"bold {style}"), border_style=style)
