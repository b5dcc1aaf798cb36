#!/usr/bin/env python3
"""
Main CLI Entry Point for Expend

Provides the unified command-line interface.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Expend - file per-diem expense reports with Expensify.

    Create a context once with 'expend context set', then post per-diems
    with 'expend post per-diem'.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["EXPEND_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expend").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}", err=True)
        click.echo(f"Context directory: {config.context_dir}", err=True)


@main.command()
def version() -> None:
    """Show version information."""
    from expend import __version__

    click.echo(f"expend v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  Context Directory: {settings['context_dir']}")
    click.echo(f"  Expensify URL: {settings['expensify']['base_url']}")
    click.echo(f"  Expensify User ID: {settings['expensify']['user_id'] or '(not set)'}")
    click.echo(f"  Expensify User Secret: {settings['expensify']['user_secret'] or '(not set)'}")
    click.echo(f"  Rates File: {settings['rates_file'] or '(built-in rates)'}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


from .context import context  # noqa: E402
from .post import post  # noqa: E402

main.add_command(context)
main.add_command(post)


if __name__ == "__main__":
    main()
