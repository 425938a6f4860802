"""CLI interface for dropinblog.

Command-line tool for previewing a DropInBlog blog behind an aiohttp host.
"""

import logging
import sys
from pathlib import Path

import click

from dropinblog.config import Config
from dropinblog.errors import ConfigError


@click.group()
def cli() -> None:
    """dropinblog - DropInBlog content for aiohttp applications."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover dropinblog.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--base-path",
    "-b",
    default=None,
    help="Path prefix for blog routes (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log route classification)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    base_path: str | None,
    verbose: bool,
) -> None:
    """Start the preview server."""
    from dropinblog.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host, port=port, base_path=base_path
        )
        config.blog.require_credentials()
    except ConfigError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Blog ID: {config.blog.blog_id}")
    click.echo(f"Blog routes: {config.blog.base_path}")

    run_server(config)
