"""Domain models for catty.

All models are **frozen** dataclasses or enums — immutable values with
no I/O and no dependencies on external packages.  The argument scan
threads a :class:`LaunchConfiguration` through its transitions with
:func:`dataclasses.replace`, so a configuration is never mutated in
place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

CLASSPATH_SEPARATOR: str = ":"
"""Separator used when joining classpath entries."""

DEFAULT_CLASSPATH: str = "."
"""Classpath used when neither ``-cp`` nor ``-jar`` is given."""

CLASSPATH_PROPERTY: str = "-Djava.class.path="
"""Runtime option prefix carrying the resolved classpath."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class LaunchMode(enum.Enum):
    """Where the classpath and entry point come from.

    A single field of this type replaces independent mode flags, so at
    most one mode can ever be active.
    """

    NONE = "none"
    CLASSPATH_EXPLICIT = "classpath"
    ARCHIVE = "archive"
    MODULE = "module"


class ScanState(enum.Enum):
    """Phases of the left-to-right argument scan, in order."""

    FLAGS = enum.auto()
    RUNTIME_OPTIONS = enum.auto()
    ENTRY_POINT = enum.auto()
    APP_ARGS = enum.auto()


class InfoRequest(enum.Enum):
    """Informational flags that end processing with exit code 0."""

    VERSION_STDERR = "showversion"
    VERSION = "version"
    HELP = "help"
    EXTENDED_HELP = "extended-help"


# ---------------------------------------------------------------------------
# Manifest attributes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ManifestAttributes:
    """Execution metadata extracted from a JAR manifest."""

    entry_point_class: str
    """Value of the last ``Main-Class`` attribute."""

    classpath_fragment: str | None = None
    """Colon-joined ``Class-Path`` entries in file order, if any."""

    def classpath_for(self, archive_path: str) -> str:
        """Return the archive path followed by the manifest's entries."""
        if not self.classpath_fragment:
            return archive_path
        return CLASSPATH_SEPARATOR.join((archive_path, self.classpath_fragment))


# ---------------------------------------------------------------------------
# Launch configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LaunchConfiguration:
    """Fully resolved launcher input handed to the runtime collaborator."""

    entry_point: str | None = None
    """Fully-qualified main class, or ``None`` when none was given."""

    classpath: str = DEFAULT_CLASSPATH
    """Colon-joined classpath."""

    runtime_options: tuple[str, ...] = ()
    """Options forwarded verbatim to the runtime, in order."""

    application_arguments: tuple[str, ...] = ()
    """Arguments passed to the entry point, unmodified and in order."""

    mode: LaunchMode = LaunchMode.NONE
    """The single active launch mode."""

    dry_run: bool = False
    """When true the runtime is never invoked."""

    @property
    def classpath_option(self) -> str:
        """The classpath formatted as a single runtime option."""
        return f"{CLASSPATH_PROPERTY}{self.classpath}"

    @property
    def jvm_options(self) -> tuple[str, ...]:
        """Classpath option first, then the user's runtime options."""
        return (self.classpath_option, *self.runtime_options)
