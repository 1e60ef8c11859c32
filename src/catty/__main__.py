"""Allow ``python -m catty`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m catty`` behaves identically to the ``catty`` console
script.
"""

from __future__ import annotations

from catty.cli.app import cli

if __name__ == "__main__":
    cli()
