"""CLI commands for cxplan.

Provides command-line interface using Typer:
- cxplan serve: Run the API server
- cxplan check: Run the request validation gate offline

Usage:
    cxplan --help
    cxplan serve --port 8080
    cxplan check --partner BPNL1234567890AB --material urn:uuid:...
"""

import typer

from cxplan.cli.check_cmd import app as check_app
from cxplan.cli.serve import app as serve_app

app = typer.Typer(
    name="cxplan",
    help="cxplan: PlannedProduction Submodel 2.0.0 exchange endpoint",
    no_args_is_help=True,
)

app.add_typer(serve_app, name="serve")
app.add_typer(check_app, name="check")


@app.callback()
def callback() -> None:
    """cxplan: PlannedProduction Submodel 2.0.0 exchange endpoint."""


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
