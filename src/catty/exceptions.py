"""Custom exception hierarchy for catty.

All exceptions that cross layer boundaries must inherit from
:class:`CattyError`.  Raw OS and archive exceptions (``OSError``,
``zipfile.BadZipFile``, ``zlib.error``) must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
CattyError
├── UsageError
├── UnsupportedFeatureError
├── ArchiveError
│   ├── ArchiveOpenError
│   ├── ManifestNotFoundError
│   ├── ManifestReadError
│   └── MainClassMissingError
├── LaunchPreconditionError
├── LaunchFailedError
├── RuntimeNotFoundError
└── EnvironmentError
"""

from __future__ import annotations


class CattyError(Exception):
    """Base exception for all catty errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and pick the exit code in one place.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument processing ---------------------------------------------------

class UsageError(CattyError):
    """Raised for a missing flag value or conflicting launch modes."""


class UnsupportedFeatureError(CattyError):
    """Raised for the module-mode flag family, which is not implemented."""


# --- Archive / manifest ----------------------------------------------------

class ArchiveError(CattyError):
    """Base for every failure while resolving a JAR manifest."""


class ArchiveOpenError(ArchiveError):
    """Raised when the archive is missing or is not a readable zip file."""


class ManifestNotFoundError(ArchiveError):
    """Raised when ``META-INF/MANIFEST.MF`` is absent from the archive."""


class ManifestReadError(ArchiveError):
    """Raised when the manifest entry cannot be read to the end."""


class MainClassMissingError(ArchiveError):
    """Raised when the manifest carries no ``Main-Class`` attribute."""


# --- Launch ----------------------------------------------------------------

class LaunchPreconditionError(CattyError):
    """Raised when no entry point was resolved and this is not a dry run."""


class LaunchFailedError(CattyError):
    """Raised when the runtime process cannot be started."""


# --- Environment / tooling -------------------------------------------------

class RuntimeNotFoundError(CattyError):
    """Raised when no ``java`` executable can be located."""


class EnvironmentError(CattyError):
    """Raised when an optional dependency is not available."""
