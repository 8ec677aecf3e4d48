"""``lintgate steps`` command."""

from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from lintgate.checks import CheckStep, build_steps
from lintgate.cli.console import console
from lintgate.cli.context import CLIContext

_SOURCES_PLACEHOLDER = "<sources...>"


def _describe_commands(step: CheckStep) -> Text:
    lines = []
    for invocation in step.invocations:
        line = " ".join(invocation.command)
        if invocation.requires_module:
            line = f"{line}  (needs {invocation.requires_module})"
        lines.append(line)
    return Text("\n".join(lines))


@click.command()
@click.pass_context
def steps(ctx: click.Context) -> None:
    """List the checks in execution order without running them."""
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    plan = build_steps(cli_ctx.config, (_SOURCES_PLACEHOLDER,))

    table = Table(show_lines=False, padding=(0, 1))
    table.add_column("#", justify="right")
    table.add_column("Step", style="bold")
    table.add_column("Tool")
    table.add_column("Policy")
    table.add_column("Minimum")
    table.add_column("Commands", overflow="fold")

    for index, step in enumerate(plan, start=1):
        table.add_row(
            str(index),
            step.identifier,
            Text(step.tool.name),
            step.tool.policy.value,
            step.tool.minimum_version or "-",
            _describe_commands(step),
        )

    console.print(table)
