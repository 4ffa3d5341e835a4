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

"""contribwall CLI — Typer entry point.

Commands:
- contribwall build <owner> <repo>  — fetch contributors and write the SVG wall
- contribwall config                — show the resolved settings (token redacted)
- contribwall version               — show the contribwall version
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from contribwall import __version__
from contribwall.builder import ContributorFeedBuilder
from contribwall.config import CONFIG_FILE, resolve_settings
from contribwall.errors import ContribWallError
from contribwall.models.grid import GridSpec
from contribwall.reporter.console_out import (
    console,
    print_build_result,
    print_error,
    print_settings,
)
from contribwall.reporter.json_out import summary_json, to_json

app = typer.Typer(
    name="contribwall",
    help=(
        "contribwall: render a repository's GitHub contributors as an SVG avatar wall. "
        "Run 'contribwall <command> --help' for flags."
    ),
    add_completion=False,
)

logger = logging.getLogger("contribwall")


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    # Suppress noisy third-party logs
    for _name in ("httpcore", "httpx"):
        logging.getLogger(_name).setLevel(logging.WARNING)


@app.command()
def build(
    owner: str = typer.Argument(..., help="Repository owner (user or organization)"),
    repo: str = typer.Argument(..., help="Repository name"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output SVG path (default: contributors.svg)"),
    token: Optional[str] = typer.Option(None, "--token", help="GitHub token (default: GH_TOKEN / GITHUB_TOKEN)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout in seconds"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="GitHub API base URL (GitHub Enterprise)"),
    config: Optional[Path] = typer.Option(None, "--config", help=f"Config file (default: {CONFIG_FILE})"),
    columns: int = typer.Option(GridSpec().columns, "--columns", min=1, help="Avatars per row"),
    output_json: bool = typer.Option(False, "--json", help="Print the run summary as JSON to stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every fetched page"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all output except errors"),
) -> None:
    """Fetch every contributor of OWNER/REPO and write the avatar wall.

    The token is required; without it nothing is fetched and the exit
    status is 1. Any GitHub API error aborts the run without writing.
    """
    _configure_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_settings(
            token=token,
            output=output,
            timeout=timeout,
            api_url=api_url,
            config_path=config,
        )
        builder = ContributorFeedBuilder(owner, repo, settings, spec=GridSpec(columns=columns))
        result = builder.run()
    except ContribWallError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output_json:
        print(summary_json(result), end="")
    elif not quiet:
        print_build_result(result)


@app.command(name="config")
def show_config(
    config: Optional[Path] = typer.Option(None, "--config", help=f"Config file (default: {CONFIG_FILE})"),
    output_json: bool = typer.Option(False, "--json", help="Print settings as JSON"),
) -> None:
    """Show the resolved settings with the token redacted.

    A missing token is shown as "(missing)" rather than failing.
    """
    try:
        settings = resolve_settings(config_path=config, require_token=False)
    except ContribWallError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output_json:
        print(to_json(settings.redacted()), end="")
    else:
        print_settings(settings.redacted())


@app.command()
def version() -> None:
    """Show the contribwall version."""
    console.print(f"contribwall v{__version__}")


if __name__ == "__main__":
    app()
