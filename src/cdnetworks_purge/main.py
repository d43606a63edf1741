from cdnetworks_purge import auth, purge
import typer

app = typer.Typer(no_args_is_help=True)
app.add_typer(purge.app, name="purge")
app.add_typer(auth.app, name="auth")
