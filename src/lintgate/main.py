"""CLI entry point for lintgate.

This module defines the Click-based command-line interface.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from lintgate import __version__
from lintgate.cli.commands import run, steps, tools
from lintgate.cli.context import CLIContext, ExitCode
from lintgate.cli.output import format_error
from lintgate.config import load_config
from lintgate.exceptions import ConfigError
from lintgate.logging import configure_logging, resolve_level


@click.group()
@click.version_option(version=__version__, prog_name="lintgate")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to config file (overrides ./lintgate.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase log verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Only print failures and the final summary.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: int,
    quiet: bool,
) -> None:
    """lintgate - run lint checks in a fixed order with one exit code."""
    ctx.ensure_object(dict)

    # Environment overrides (LINTGATE_*, PYTHON, MYPYPATH) may live in .env
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        # Can't use logging yet, just output error
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details or None), err=True)
        ctx.exit(ExitCode.FAILURE)

    configure_logging(
        level=resolve_level(
            quiet=quiet, verbose=verbose, configured=config.verbosity
        )
    )

    ctx.obj["cli_ctx"] = CLIContext(
        config=config,
        config_path=config_file,
        verbosity=verbose,
        quiet=quiet,
    )


cli.add_command(run)
cli.add_command(steps)
cli.add_command(tools)

if __name__ == "__main__":
    cli()
