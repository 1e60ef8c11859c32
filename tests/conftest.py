"""Shared pytest fixtures and configuration for the catty test suite.

Guidelines
----------
* No Java runtime is required — ``subprocess`` and detection are mocked
  at the infra boundary.
* Core tests must be pure — archive access goes through a fake resolver.
* Archive tests build real zip files under ``tmp_path``.
"""

from __future__ import annotations

import struct
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from catty.core.models import ManifestAttributes
from catty.exceptions import ArchiveOpenError

MakeJar = Callable[..., Path]


@pytest.fixture
def make_jar(tmp_path: Path) -> MakeJar:
    """Factory writing a JAR with the given manifest text under ``tmp_path``.

    Pass ``manifest=None`` to build an archive without a manifest entry.
    """

    def _make(
        name: str = "app.jar",
        manifest: str | None = "Manifest-Version: 1.0\nMain-Class: com.example.App\n",
        extra: dict[str, bytes] | None = None,
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            if manifest is not None:
                archive.writestr("META-INF/MANIFEST.MF", manifest)
            for entry, data in (extra or {}).items():
                archive.writestr(entry, data)
        return path

    return _make


@pytest.fixture
def corrupt_jar(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing a JAR whose stored manifest entry is damaged.

    ``"overrun"`` records sizes far past the end of the file, so reading
    the entry runs out of bytes; ``"crc"`` flips one byte of the stored
    data so the CRC-32 check fails.
    """

    def _make(damage: str) -> Path:
        path = tmp_path / f"{damage}.jar"
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as archive:
            archive.writestr("META-INF/MANIFEST.MF", "Main-Class: com.example.App\n")

        data = bytearray(path.read_bytes())
        if damage == "overrun":
            central = data.index(b"PK\x01\x02")
            # Compressed and uncompressed sizes in the central directory header.
            struct.pack_into("<II", data, central + 20, 10_000_000, 10_000_000)
        elif damage == "crc":
            offset = data.index(b"com.example.App")
            data[offset] ^= 0x01
        else:
            raise ValueError(f"unknown damage: {damage}")
        path.write_bytes(bytes(data))
        return path

    return _make


class FakeResolver:
    """In-memory :class:`ManifestResolver` keyed by archive path."""

    def __init__(self, manifests: dict[str, ManifestAttributes] | None = None) -> None:
        self.manifests: dict[str, ManifestAttributes] = dict(manifests or {})
        self.calls: list[str] = []

    def resolve(self, archive_path: str) -> ManifestAttributes:
        self.calls.append(archive_path)
        try:
            return self.manifests[archive_path]
        except KeyError:
            raise ArchiveOpenError(f"Failed to open JAR file {archive_path}") from None


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver(
        {
            "app.jar": ManifestAttributes(entry_point_class="com.example.App"),
            "lib.jar": ManifestAttributes(
                entry_point_class="com.example.Lib",
                classpath_fragment="a.jar:b.jar",
            ),
        }
    )
