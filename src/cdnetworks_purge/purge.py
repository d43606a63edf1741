"""Purge commands."""
from __future__ import annotations

from typing import Optional

import typer
from typer import Option
from typing_extensions import Annotated

from cdnetworks_purge.models.inputs import ActionsInputProvider, MappingInputProvider
from cdnetworks_purge.models.settings import env
from cdnetworks_purge.runner import run_purge
from cdnetworks_purge.utils.reporting import ActionsReporter, ConsoleReporter

app = typer.Typer(no_args_is_help=True)


@app.command()
def run():
    """Run as a GitHub Action, reading INPUT_* variables."""
    reporter = ActionsReporter(
        output_file=env.github_output, summary_file=env.github_step_summary
    )
    result = run_purge(ActionsInputProvider(), reporter)
    if not result.ok:
        raise typer.Exit(1)


@app.command()
def submit(
    domain_id: Annotated[str, Option("--domain-id", "-d")],
    target: Annotated[str, Option("--target", "-t")],
    api_user: Annotated[str, Option("--api-user", envvar="CDN_PURGE_API_USER")] = "",
    api_key: Annotated[
        str, Option("--api-key", envvar="CDN_PURGE_API_KEY", show_default=False)
    ] = "",
    api_url: Annotated[str, Option("--api-url")] = "",
    action: Annotated[str, Option("--action", "-a")] = "invalidate",
    file_url: Annotated[Optional[list[str]], Option("--file-url", "-f")] = None,
    dir_url: Annotated[Optional[list[str]], Option("--dir-url")] = None,
    regex_pattern: Annotated[Optional[list[str]], Option("--regex-pattern")] = None,
    name: Annotated[str, Option("--name")] = "",
    file_headers: Annotated[str, Option("--file-headers", help="JSON object")] = "",
    on_behalf_of: Annotated[str, Option("--on-behalf-of")] = "",
):
    """Submit a purge request from the command line."""
    provider = MappingInputProvider(
        {
            "api-url": api_url,
            "api-user": api_user,
            "api-key": api_key,
            "domain-id": domain_id,
            "on-behalf-of": on_behalf_of,
            "name": name,
            "file-headers": file_headers,
            "action": action,
            "target": target,
            "file-urls": "\n".join(file_url or []),
            "dir-urls": "\n".join(dir_url or []),
            "regex-patterns": "\n".join(regex_pattern or []),
        }
    )
    result = run_purge(provider, ConsoleReporter())
    if not result.ok:
        raise typer.Exit(1)
