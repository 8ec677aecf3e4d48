"""``lintgate run`` command."""

from __future__ import annotations

from typing import TextIO

import click

from lintgate.checks import NullReporter, Orchestrator, build_steps, read_source_list
from lintgate.cli.console import err_console
from lintgate.cli.context import CLIContext, ExitCode
from lintgate.cli.output import OutputFormat, format_error, format_json
from lintgate.cli.reporter import ConsoleReporter
from lintgate.exceptions import InputAbsentError, InvocationError, RunnerError
from lintgate.logging import get_logger
from lintgate.runners import AvailabilityProbe, ToolInvoker


@click.command()
@click.option(
    "--files-from",
    "files_from",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="Newline-delimited list of source files to compile ('-' for stdin).",
)
@click.option(
    "--python",
    "python",
    default=None,
    help="Interpreter for the compile and type-stub checks (overrides config).",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
@click.pass_context
def run(
    ctx: click.Context, files_from: TextIO, python: str | None, fmt: str
) -> None:
    """Run every check in order, stopping at the first failure.

    Exits 0 when every check passed or was skipped; otherwise exits with
    the failing tool's status (1 when a required tool is missing).

    Examples:
        git ls-files '*.py' | lintgate run
        lintgate run --files-from sources.txt --format json
    """
    logger = get_logger(__name__)
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]

    config = cli_ctx.config
    if python is not None:
        config = config.model_copy(update={"python": python})

    sources = read_source_list(files_from)
    try:
        steps = build_steps(config, sources)
    except InputAbsentError as e:
        err_console.print(
            format_error(e.message), markup=False, emoji=False, highlight=False
        )
        raise SystemExit(ExitCode.FAILURE) from e

    output_format = OutputFormat(fmt)
    reporter = (
        ConsoleReporter(quiet=cli_ctx.quiet)
        if output_format is OutputFormat.TEXT
        else NullReporter()
    )
    orchestrator = Orchestrator(
        steps,
        invoker=ToolInvoker(),
        probe=AvailabilityProbe(),
        reporter=reporter,
    )

    try:
        report = orchestrator.run()
    except InvocationError as e:
        details = [" ".join(e.command)] if e.command else None
        err_console.print(
            format_error(e.message, details=details),
            markup=False,
            emoji=False,
            highlight=False,
        )
        raise SystemExit(ExitCode.FAILURE) from e
    except RunnerError as e:
        err_console.print(
            format_error(e.message), markup=False, emoji=False, highlight=False
        )
        raise SystemExit(ExitCode.FAILURE) from e
    except KeyboardInterrupt:
        logger.warning("run_interrupted")
        raise SystemExit(ExitCode.INTERRUPTED) from None

    if output_format is OutputFormat.JSON:
        click.echo(format_json(report.to_dict()))

    raise SystemExit(report.exit_code)
