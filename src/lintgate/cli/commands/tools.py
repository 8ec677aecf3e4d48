"""``lintgate tools`` command."""

from __future__ import annotations

import click
from rich.table import Table
from rich.text import Text

from lintgate.checks import ToolSpec, build_tool_specs
from lintgate.cli.console import console, err_console
from lintgate.cli.context import CLIContext, ExitCode
from lintgate.cli.output import format_error
from lintgate.constants import MYPY_PLUGINS_MODULE, TOOL_INSTALLATION_HINTS
from lintgate.exceptions import (
    InvocationError,
    RequiredToolMissingError,
    VersionParseError,
)
from lintgate.logging import get_logger
from lintgate.runners import AvailabilityProbe, ToolInvoker, extract_version, satisfies

logger = get_logger(__name__)


def _detect_version(invoker: ToolInvoker, tool: ToolSpec) -> str | None:
    """Return the installed version of ``tool``, or None if undeterminable."""
    try:
        result = invoker.run(tool.version_command)
    except InvocationError as e:
        logger.warning("version_probe_failed", tool=tool.name, error=e.message)
        return None
    if not result.success:
        return None
    try:
        return extract_version(result.output)
    except VersionParseError:
        return None


def _gate_status(tool: ToolSpec, version: str | None) -> str:
    if tool.minimum_version is None:
        return "ok"
    if version is None:
        return "unknown version"
    if satisfies(version, tool.minimum_version):
        return "ok"
    return f"needs {tool.minimum_version}"


@click.command()
@click.pass_context
def tools(ctx: click.Context) -> None:
    """Report which tools are installed and whether they meet minimums.

    Exits 1 when a required tool is missing. Outdated or missing optional
    tools only produce a note, matching how ``lintgate run`` skips them.
    """
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    probe = AvailabilityProbe()
    invoker = ToolInvoker()

    table = Table(show_lines=False, padding=(0, 1))
    table.add_column("Tool", style="bold")
    table.add_column("Policy")
    table.add_column("Installed")
    table.add_column("Version")
    table.add_column("Minimum")
    table.add_column("Status")

    missing: list[RequiredToolMissingError] = []
    for tool in build_tool_specs(cli_ctx.config):
        if not probe.is_available(tool):
            if tool.required:
                missing.append(RequiredToolMissingError(tool.name, tool.install_hint))
            status = "missing" if tool.required else "skipped"
            table.add_row(
                Text(tool.name),
                tool.policy.value,
                "no",
                "-",
                tool.minimum_version or "-",
                status,
            )
            continue

        version = _detect_version(invoker, tool)
        table.add_row(
            Text(tool.name),
            tool.policy.value,
            "yes",
            version or "?",
            tool.minimum_version or "-",
            _gate_status(tool, version),
        )

    plugin_available = probe.module_available(
        MYPY_PLUGINS_MODULE, interpreter=cli_ctx.config.python
    )
    table.add_row(
        Text(MYPY_PLUGINS_MODULE),
        "optional",
        "yes" if plugin_available else "no",
        "-",
        "-",
        "ok" if plugin_available else "skipped",
    )

    console.print(table)

    if missing:
        for error in missing:
            err_console.print(
                format_error(error.message), markup=False, emoji=False, highlight=False
            )
        raise SystemExit(ExitCode.FAILURE)

    if not plugin_available:
        hint = TOOL_INSTALLATION_HINTS[MYPY_PLUGINS_MODULE]
        console.print(
            f"Note: type-stub data checks are skipped without {MYPY_PLUGINS_MODULE}. "
            f"{hint}",
            markup=False,
            emoji=False,
            highlight=False,
        )
