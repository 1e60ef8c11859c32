"""``zipfile`` backed implementation of :class:`~catty.core.protocols.ManifestResolver`.

This module is the **only** place in the codebase that opens archives.
Every ``OSError``, ``zipfile.BadZipFile`` and ``zlib.error`` is caught
here and re-raised as a typed :class:`~catty.exceptions.ArchiveError`
subclass naming the stage that failed (open, lookup, read).
"""

from __future__ import annotations

import logging
import zipfile
import zlib

from catty.core.manifest import MANIFEST_ENTRY, parse_manifest
from catty.core.models import ManifestAttributes
from catty.exceptions import ArchiveOpenError, ManifestNotFoundError, ManifestReadError

logger = logging.getLogger(__name__)


class JarManifestResolver:
    """Concrete :class:`ManifestResolver` reading ``META-INF/MANIFEST.MF``.

    Usage::

        resolver = JarManifestResolver()
        attributes = resolver.resolve("app.jar")

    The archive is opened, read once and closed before :meth:`resolve`
    returns or raises.
    """

    # Failures that can surface while inflating an entry.
    _READ_ERRORS: tuple[type[BaseException], ...] = (
        OSError,
        EOFError,
        zipfile.BadZipFile,
        zlib.error,
        RuntimeError,
        NotImplementedError,
    )

    def resolve(self, archive_path: str) -> ManifestAttributes:
        """Return the manifest attributes of the JAR at *archive_path*.

        Raises
        ------
        ArchiveOpenError
            When the file is missing or is not a zip container.
        ManifestNotFoundError
            When the archive has no ``META-INF/MANIFEST.MF`` entry.
        ManifestReadError
            When the entry cannot be read to the end.
        MainClassMissingError
            When the manifest has no ``Main-Class`` attribute.
        """
        try:
            archive = zipfile.ZipFile(archive_path)
        except (OSError, zipfile.BadZipFile) as exc:
            raise ArchiveOpenError(
                f"Failed to open JAR file {archive_path}: {exc}",
                hint="Check that the path exists and points to a valid JAR.",
            ) from exc

        with archive:
            lines = self._read_manifest_lines(archive, archive_path)

        logger.debug("Read %d manifest lines from %s", len(lines), archive_path)
        return parse_manifest(lines, source=f"{archive_path}!/{MANIFEST_ENTRY}")

    @classmethod
    def _read_manifest_lines(cls, archive: zipfile.ZipFile, archive_path: str) -> list[str]:
        """Read the manifest entry and split it into text lines."""
        try:
            info = archive.getinfo(MANIFEST_ENTRY)
        except KeyError as exc:
            raise ManifestNotFoundError(
                f"'{MANIFEST_ENTRY}' not found in JAR file {archive_path}.",
            ) from exc

        try:
            with archive.open(info) as entry:
                data = entry.read()
        except cls._READ_ERRORS as exc:
            raise ManifestReadError(
                f"Failed to read '{MANIFEST_ENTRY}' from {archive_path}: {exc}",
            ) from exc

        return [line.decode("utf-8", errors="replace") for line in data.splitlines()]
