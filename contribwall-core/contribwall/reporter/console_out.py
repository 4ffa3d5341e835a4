# contribwall — Contributor avatar wall generator
# Copyright (C) 2026 contribwall Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Rich terminal output for build results and errors."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from contribwall.builder import BuildResult


def _make_console() -> Console:
    return Console(soft_wrap=True)


console = _make_console()
err_console = Console(stderr=True, soft_wrap=True)


def print_build_result(result: BuildResult) -> None:
    """Print a short summary panel after the wall was written."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    table.add_row("Repository", f"{result.owner}/{result.repo}")
    table.add_row("Avatars", str(result.contributor_count))
    table.add_row("Grid", f"{result.rows} rows, {result.width}x{result.height}px")
    table.add_row("Output", result.output)
    console.print(
        Panel(
            table,
            title="[bold green]contribwall build[/bold green]",
            border_style="green",
            expand=False,
        )
    )


def print_settings(settings: dict[str, Any]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")
    for key in sorted(settings):
        table.add_row(key, str(settings[key]))
    console.print(table)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)
