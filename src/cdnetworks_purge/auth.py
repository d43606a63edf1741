"""Request signing."""
from typing import Annotated

import typer
from rich import print as cp
from typer import Option

from cdnetworks_purge.utils import signing

app = typer.Typer(no_args_is_help=True)


@app.command()
def header(
    api_user: Annotated[str, Option("--api-user", envvar="CDN_PURGE_API_USER")],
    api_key: Annotated[
        str, Option("--api-key", envvar="CDN_PURGE_API_KEY", show_default=False)
    ],
):
    """Print the Date and Authorization headers for a request signed now."""
    if not api_user or not api_key:
        cp("❌  Both --api-user and --api-key are required.")
        raise SystemExit(1)

    credentials = signing.sign(api_user, api_key)
    typer.echo(f"Date: {credentials.date}")
    typer.echo(f"Authorization: {credentials.authorization}")
