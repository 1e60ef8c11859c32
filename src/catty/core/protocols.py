"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the argument scan and the launch step can be
tested without touching the filesystem or spawning a process.
"""

from __future__ import annotations

from typing import Protocol

from catty.core.models import LaunchConfiguration, ManifestAttributes


class ManifestResolver(Protocol):
    """Contract for reading execution metadata out of an archive."""

    def resolve(self, archive_path: str) -> ManifestAttributes:
        """Open *archive_path* and return its manifest attributes.

        The archive handle must be released before returning, on
        success and on failure alike.

        Raises
        ------
        ArchiveOpenError
            When the archive is missing or not a zip container.
        ManifestNotFoundError
            When ``META-INF/MANIFEST.MF`` is absent.
        ManifestReadError
            When the manifest entry cannot be read.
        MainClassMissingError
            When the manifest has no ``Main-Class`` attribute.
        """
        ...  # pragma: no cover


class RuntimeLauncher(Protocol):
    """Contract for handing a resolved configuration to a runtime.

    Implementations receive the classpath option, the runtime options,
    the entry point and the application arguments through *config* and
    must map backend-specific failures to
    :class:`~catty.exceptions.CattyError` subclasses.
    """

    def launch(self, config: LaunchConfiguration) -> int:
        """Run *config* to completion and return the runtime's exit status."""
        ...  # pragma: no cover
