"""CLI application entry point and command routing for catty.

This module is the **sole error boundary** for the entire application.
It catches :class:`~catty.exceptions.CattyError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No parsing logic lives here — the argument scan is delegated to
  :class:`~catty.core.args_processor.ArgsProcessor`, which never exits
  the process itself.
* The launcher grammar is positional and ``java``-compatible, so
  ``argparse`` is not used: the first bare token ends option parsing.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import shlex
import sys

from catty.cli import exit_codes
from catty.cli.console import console, stdout_console
from catty.cli.texts import EXTENDED_HELP, USAGE, version_banner
from catty.core.args_processor import ArgsProcessor
from catty.core.launch_service import LaunchService
from catty.core.models import InfoRequest, LaunchConfiguration
from catty.exceptions import CattyError, UsageError
from catty.infra.jar_manifest import JarManifestResolver
from catty.infra.java_runtime import JavaRuntimeLauncher

PROG: str = "catty"


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_info(request: InfoRequest) -> int:
    """Print the text an informational flag asks for."""
    if request is InfoRequest.VERSION_STDERR:
        console.print(version_banner(), markup=False)
    elif request is InfoRequest.VERSION:
        stdout_console.print(version_banner(), markup=False)
    elif request is InfoRequest.HELP:
        stdout_console.print(USAGE, markup=False)
    else:
        stdout_console.print(EXTENDED_HELP, markup=False)
    return exit_codes.SUCCESS


def _render_dry_run(config: LaunchConfiguration) -> None:
    """Show the resolved configuration instead of launching it."""
    entry_point = config.entry_point if config.entry_point is not None else "<none>"
    command = shlex.join(
        ["java", *config.jvm_options, entry_point, *config.application_arguments],
    )
    rows = (
        ("Mode", config.mode.value),
        ("Classpath", config.classpath),
        ("Main class", entry_point),
        ("Runtime options", " ".join(config.runtime_options) or "-"),
        ("Arguments", " ".join(config.application_arguments) or "-"),
        ("Command", command),
    )

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        console.print("Dry run: runtime not invoked.")
        for label, value in rows:
            console.print(f"{label:<16} {value}")
        return

    table = Table(
        title="catty --dry-run",
        show_header=False,
        border_style="dim",
    )
    table.add_column("Field", style="bold", min_width=16)
    table.add_column("Value")
    for label, value in rows:
        table.add_row(label, escape(value))
    console.print(table)


def _handle_launch(config: LaunchConfiguration) -> int:
    """Hand *config* to the Java runtime, or just display it for a dry run."""
    if config.dry_run:
        _render_dry_run(config)

    service = LaunchService(JavaRuntimeLauncher())
    return service.launch(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the catty CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    tokens = list(sys.argv) if argv is None else [PROG, *argv]

    processor = ArgsProcessor(JarManifestResolver())
    outcome = processor.process(tokens)

    if isinstance(outcome, InfoRequest):
        return _handle_info(outcome)

    return _handle_launch(outcome)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CattyError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        if isinstance(exc, UsageError):
            console.print(USAGE, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
