"""Argument processor — classifies the launcher's argument vector.

The scan is a single left-to-right pass through four states, with no
backtracking:

1. ``FLAGS`` — launcher flags (``-cp``, ``-jar``, ``--dry-run``,
   informational and module flags).  The first unrecognised token ends
   this state and is re-examined by the next one.
2. ``RUNTIME_OPTIONS`` — tokens starting with ``-`` are forwarded to
   the runtime verbatim.
3. ``ENTRY_POINT`` — one token becomes the main class, unless ``-jar``
   already supplied it from the manifest.
4. ``APP_ARGS`` — everything left, unmodified.

Guarantees
----------
* No I/O of its own — archive access goes through an injected
  :class:`~catty.core.protocols.ManifestResolver`.
* No ``print()`` and no ``sys.exit()``: informational flags come back as
  an :class:`~catty.core.models.InfoRequest`, and bad input is raised as
  a :class:`~catty.exceptions.CattyError` subclass for the CLI boundary
  to render.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from catty.core.models import InfoRequest, LaunchConfiguration, LaunchMode, ScanState
from catty.core.protocols import ManifestResolver
from catty.exceptions import UnsupportedFeatureError, UsageError
from catty.version import __version__

logger = logging.getLogger(__name__)

OPTION_PREFIX: str = "-"

DRY_RUN_FLAG: str = "--dry-run"
JAR_FLAG: str = "-jar"
CLASSPATH_FLAGS: frozenset[str] = frozenset({"-cp", "-classpath"})

INFO_FLAGS: dict[str, InfoRequest] = {
    "-showversion": InfoRequest.VERSION_STDERR,
    "-version": InfoRequest.VERSION,
    "--show-version": InfoRequest.VERSION,
    "-help": InfoRequest.HELP,
    "--help": InfoRequest.HELP,
    "-?": InfoRequest.HELP,
    "-X": InfoRequest.EXTENDED_HELP,
}

MODULE_FLAGS: frozenset[str] = frozenset(
    {
        "-m",
        "--module",
        "--module-path",
        "--add_modules",
        "--list-modules",
        "-d",
        "--describe-module",
        "--validate-modules",
    }
)


@dataclass(frozen=True, slots=True)
class _Transition:
    """Result of one scan step."""

    config: LaunchConfiguration
    state: ScanState
    index: int


class ArgsProcessor:
    """Turns a raw argument vector into a :class:`LaunchConfiguration`.

    Parameters
    ----------
    resolver:
        Any object satisfying the :class:`ManifestResolver` protocol,
        consulted when ``-jar`` is given.
    """

    def __init__(self, resolver: ManifestResolver) -> None:
        self._resolver: ManifestResolver = resolver

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process(self, tokens: Sequence[str]) -> LaunchConfiguration | InfoRequest:
        """Classify *tokens* (``tokens[0]`` is the program name).

        Returns
        -------
        LaunchConfiguration | InfoRequest
            The resolved configuration, or the informational request
            that ended the scan early.

        Raises
        ------
        UsageError
            On an empty vector, a missing flag value, or a mode conflict.
        UnsupportedFeatureError
            On any module-mode flag.
        ArchiveError
            When ``-jar`` names an archive whose manifest cannot be used.
        """
        if len(tokens) < 2:
            raise UsageError("No arguments given.")

        step = _Transition(LaunchConfiguration(), ScanState.FLAGS, 1)
        while step.index < len(tokens):
            if step.state is ScanState.FLAGS:
                outcome = self._scan_flag(step, tokens)
                if isinstance(outcome, InfoRequest):
                    return outcome
                step = outcome
            elif step.state is ScanState.RUNTIME_OPTIONS:
                step = self._scan_runtime_option(step, tokens)
            elif step.state is ScanState.ENTRY_POINT:
                step = _Transition(
                    replace(step.config, entry_point=tokens[step.index]),
                    ScanState.APP_ARGS,
                    step.index + 1,
                )
            else:
                step = _Transition(
                    replace(step.config, application_arguments=tuple(tokens[step.index:])),
                    ScanState.APP_ARGS,
                    len(tokens),
                )

        logger.debug("Resolved launch configuration: %s", step.config)
        return step.config

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _scan_flag(
        self, step: _Transition, tokens: Sequence[str],
    ) -> _Transition | InfoRequest:
        token = tokens[step.index]
        config = step.config

        info = INFO_FLAGS.get(token)
        if info is not None:
            return info

        if token in MODULE_FLAGS:
            raise UnsupportedFeatureError(
                f"Module processing is not supported for now (catty version {__version__}).",
                hint="Use -cp <path> <main class> or -jar <file> instead.",
            )

        if token in CLASSPATH_FLAGS:
            value = _require_value(tokens, step.index)
            return _Transition(
                self._apply_classpath(config, token, value),
                ScanState.FLAGS,
                step.index + 2,
            )

        if token == JAR_FLAG:
            archive_path = _require_value(tokens, step.index)
            return _Transition(
                self._apply_archive(config, archive_path),
                ScanState.FLAGS,
                step.index + 2,
            )

        if token == DRY_RUN_FLAG:
            return _Transition(replace(config, dry_run=True), ScanState.FLAGS, step.index + 1)

        # First unrecognised token: leave it for the next state.
        return _Transition(config, ScanState.RUNTIME_OPTIONS, step.index)

    @staticmethod
    def _scan_runtime_option(step: _Transition, tokens: Sequence[str]) -> _Transition:
        token = tokens[step.index]
        config = step.config
        if token.startswith(OPTION_PREFIX):
            return _Transition(
                replace(config, runtime_options=(*config.runtime_options, token)),
                ScanState.RUNTIME_OPTIONS,
                step.index + 1,
            )
        # A main class from the manifest means this token is already an
        # application argument.
        next_state = ScanState.ENTRY_POINT if config.entry_point is None else ScanState.APP_ARGS
        return _Transition(config, next_state, step.index)

    # ------------------------------------------------------------------
    # Mode transitions
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_classpath(
        config: LaunchConfiguration, flag: str, value: str,
    ) -> LaunchConfiguration:
        if config.mode is LaunchMode.MODULE:
            raise UsageError(f"{flag} is not supported in --module mode.")
        if config.mode is LaunchMode.ARCHIVE:
            # The archive's manifest owns the classpath; the value is
            # consumed and dropped.
            logger.debug("Ignoring %s %s in archive mode", flag, value)
            return config
        return replace(config, classpath=value, mode=LaunchMode.CLASSPATH_EXPLICIT)

    def _apply_archive(self, config: LaunchConfiguration, archive_path: str) -> LaunchConfiguration:
        if config.mode is LaunchMode.MODULE:
            raise UsageError(f"{JAR_FLAG} is not supported in --module mode.")

        attributes = self._resolver.resolve(archive_path)
        logger.debug("Manifest of %s: %s", archive_path, attributes)
        return replace(
            config,
            entry_point=attributes.entry_point_class,
            classpath=attributes.classpath_for(archive_path),
            mode=LaunchMode.ARCHIVE,
        )


def _require_value(tokens: Sequence[str], index: int) -> str:
    """Return the token after the flag at *index* or raise :class:`UsageError`."""
    if index + 1 >= len(tokens):
        raise UsageError(f"{tokens[index]} requires 1 argument.")
    return tokens[index + 1]
