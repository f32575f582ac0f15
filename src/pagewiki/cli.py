"""CLI interface for pagewiki."""

import logging
import sys
from pathlib import Path

import click

from pagewiki.config import Config
from pagewiki.errors import TemplateLoadError


@click.group()
def cli() -> None:
    """Pagewiki - edit plain-text pages in the browser."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover pagewiki.toml)",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
@click.option(
    "--templates-dir",
    "-t",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory containing view.html and edit.html (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    data_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the page editor server."""
    from pagewiki.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            data_dir=data_dir,
            templates_dir=templates_dir,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Data directory: {config.pages.data_dir}")
    if config.templates.dir is not None:
        click.echo(f"Templates directory: {config.templates.dir}")
    else:
        click.echo("Templates: bundled")

    try:
        run_server(config)
    except TemplateLoadError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(click.style(f"Server failed: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
