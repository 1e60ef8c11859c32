"""Core launch service — the step after argument processing.

This service checks the launch preconditions and delegates the actual
runtime start-up to a :class:`~catty.core.protocols.RuntimeLauncher`
injected at construction time.

Guarantees
----------
* A dry run never reaches the launcher.
* Only :class:`~catty.exceptions.CattyError` subclasses escape.
"""

from __future__ import annotations

import logging

from catty.core.models import LaunchConfiguration
from catty.core.protocols import RuntimeLauncher
from catty.exceptions import CattyError, LaunchFailedError, LaunchPreconditionError

logger = logging.getLogger(__name__)


class LaunchService:
    """Stateless service that hands a configuration to the runtime.

    Parameters
    ----------
    launcher:
        Any object satisfying the :class:`RuntimeLauncher` protocol.
    """

    def __init__(self, launcher: RuntimeLauncher) -> None:
        self._launcher: RuntimeLauncher = launcher

    def launch(self, config: LaunchConfiguration) -> int:
        """Launch *config* and return the runtime's exit status.

        Raises
        ------
        LaunchPreconditionError
            When no entry point was resolved and this is not a dry run.
        LaunchFailedError
            When the launcher fails with a non-domain exception.
        """
        if config.dry_run:
            logger.debug("Dry run: runtime not invoked")
            return 0

        if config.entry_point is None:
            raise LaunchPreconditionError(
                "Main class not found.",
                hint="Pass a main class after the options, or use -jar <file>.",
            )

        try:
            return self._launcher.launch(config)
        except CattyError:
            raise
        except Exception as exc:
            raise LaunchFailedError(f"Unexpected launch error: {exc}") from exc
