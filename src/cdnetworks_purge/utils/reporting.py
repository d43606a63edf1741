"""Run output, summaries and failures."""
from __future__ import annotations

import uuid
from pathlib import Path
from typing import Protocol

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from cdnetworks_purge.models.purge import PurgeRequest, PurgeResponse

SUMMARY_HEADING = "CDNetworks Purge Request"

Rows = list[tuple[str, str]]


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def set_output(self, name: str, value: str) -> None: ...

    def write_summary(self, heading: str, rows: Rows) -> None: ...

    def set_failed(self, message: str) -> None: ...


def escape_command_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def summary_rows(response: PurgeResponse, domain_id: str, request: PurgeRequest) -> Rows:
    return [
        ("Purge ID", response.purge_id),
        ("Status", response.status),
        ("Domain ID", domain_id),
        ("Files", str(request.file_count)),
        ("Directories", str(request.dir_count)),
        ("Regex Patterns", str(request.regex_count)),
    ]


def markdown_table(heading: str, rows: Rows) -> str:
    def cell(value: str) -> str:
        return value.replace("|", "\\|").replace("\n", " ")

    lines = [f"## {heading}", "", "| Property | Value |", "| --- | --- |"]
    lines += [f"| {cell(key)} | {cell(value)} |" for key, value in rows]
    return "\n".join(lines) + "\n"


class ConsoleReporter:
    """Reports to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.failed: str | None = None

    def info(self, message: str) -> None:
        typer.echo(message)

    def set_output(self, name: str, value: str) -> None:
        typer.echo(f"{name}: {value}")

    def write_summary(self, heading: str, rows: Rows) -> None:
        table = Table("Property", "Value", title=heading)
        for key, value in rows:
            table.add_row(Text(key), Text(value))
        self.console.print(table)

    def set_failed(self, message: str) -> None:
        self.failed = message
        typer.echo(f"❌  {message}", err=True)


class ActionsReporter(ConsoleReporter):
    """Reports through the GitHub Actions runner files and workflow commands."""

    def __init__(
        self,
        output_file: Path | None = None,
        summary_file: Path | None = None,
        console: Console | None = None,
    ):
        super().__init__(console)
        self.output_file = output_file
        self.summary_file = summary_file

    def set_output(self, name: str, value: str) -> None:
        if self.output_file is None:
            super().set_output(name, value)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(self.output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def write_summary(self, heading: str, rows: Rows) -> None:
        super().write_summary(heading, rows)
        if self.summary_file is None:
            return

        with open(self.summary_file, "a", encoding="utf-8") as f:
            f.write(markdown_table(heading, rows))

    def set_failed(self, message: str) -> None:
        self.failed = message
        typer.echo(f"::error::{escape_command_data(message)}")


def report_request(reporter: Reporter, domain_id: str, request: PurgeRequest) -> None:
    reporter.info(f"Initiating purge request for domain: {domain_id}")
    reporter.info(f"Action: {request.action}")
    reporter.info(f"Target: {request.target}")
    reporter.info(f"Files: {request.file_count}")
    reporter.info(f"Directories: {request.dir_count}")
    reporter.info(f"Regex patterns: {request.regex_count}")
    reporter.info(f"File headers: {request.header_count}")


def report_success(
    reporter: Reporter, response: PurgeResponse, domain_id: str, request: PurgeRequest
) -> None:
    """Emit the outputs and the summary table of a submitted purge."""
    reporter.info("Purge request submitted successfully")
    reporter.info(f"Purge ID: {response.purge_id}")
    reporter.info(f"Status: {response.status}")
    if response.message:
        reporter.info(f"Message: {response.message}")

    reporter.set_output("purge-id", response.purge_id)
    reporter.set_output("status", response.status)
    # always set, so later steps can rely on the output existing
    reporter.set_output("message", response.message or "")

    reporter.write_summary(SUMMARY_HEADING, summary_rows(response, domain_id, request))


def report_failure(reporter: Reporter, error: BaseException) -> str:
    message = f"Action failed: {error}"
    reporter.set_failed(message)
    return message
