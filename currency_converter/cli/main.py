from __future__ import annotations

import typer

from currency_converter.cli.display import DisplayManager
from currency_converter.cli.session import ConverterSession
from currency_converter.config import load_config
from currency_converter.utils.errors import ConfigurationError


app = typer.Typer(add_completion=False, help="Currency Converter CLI")


@app.command()
def run() -> None:
    """Start the interactive currency converter menu."""

    try:
        config = load_config()
    except ConfigurationError as e:
        typer.secho(f"Failed to load configuration: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    session = ConverterSession(config, display=DisplayManager())
    session.run()


if __name__ == "__main__":
    app()
