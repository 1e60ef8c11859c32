"""Tests for the zipfile-backed manifest resolver (infra/jar_manifest.py).

Real archives are written under ``tmp_path``.  Read failures are
exercised both with archives whose bytes are damaged on disk and by
patching ``zipfile.ZipFile.open``.

Coverage:
* Happy path with and without ``Class-Path``.
* CRLF line endings.
* Each failure stage maps to its own ArchiveError subclass.
* The archive handle is closed on success and failure.
"""

from __future__ import annotations

import zipfile
import zlib
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from catty.exceptions import (
    ArchiveError,
    ArchiveOpenError,
    MainClassMissingError,
    ManifestNotFoundError,
    ManifestReadError,
)
from catty.infra.jar_manifest import JarManifestResolver

MakeJar = Callable[..., Path]


class TestResolve:
    def test_main_class_without_class_path(self, make_jar: MakeJar) -> None:
        path = make_jar()
        attrs = JarManifestResolver().resolve(str(path))

        assert attrs.entry_point_class == "com.example.App"
        assert attrs.classpath_fragment is None
        assert attrs.classpath_for(str(path)) == str(path)

    def test_class_path_lines_accumulate(self, make_jar: MakeJar) -> None:
        path = make_jar(
            manifest=(
                "Manifest-Version: 1.0\n"
                "Class-Path: a.jar b.jar\n"
                "Main-Class: com.example.App\n"
                "Class-Path: c.jar\n"
            )
        )
        attrs = JarManifestResolver().resolve(str(path))
        assert attrs.classpath_fragment == "a.jar:b.jar:c.jar"
        assert attrs.classpath_for(str(path)) == f"{path}:a.jar:b.jar:c.jar"

    def test_crlf_line_endings(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest="Manifest-Version: 1.0\r\nMain-Class: com.example.Crlf\r\n")
        attrs = JarManifestResolver().resolve(str(path))
        assert attrs.entry_point_class == "com.example.Crlf"

    def test_resolving_twice_is_identical(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest="Main-Class: App\nClass-Path: x.jar\n")
        resolver = JarManifestResolver()
        assert resolver.resolve(str(path)) == resolver.resolve(str(path))


class TestFailureStages:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ArchiveOpenError, match="Failed to open JAR file"):
            JarManifestResolver().resolve(str(tmp_path / "absent.jar"))

    def test_not_a_zip(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.jar"
        path.write_bytes(b"this is not a zip archive")
        with pytest.raises(ArchiveOpenError):
            JarManifestResolver().resolve(str(path))

    def test_directory_is_open_error(self, tmp_path: Path) -> None:
        with pytest.raises(ArchiveOpenError):
            JarManifestResolver().resolve(str(tmp_path))

    def test_manifest_absent(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest=None, extra={"com/example/App.class": b"\xca\xfe\xba\xbe"})
        with pytest.raises(ManifestNotFoundError, match="META-INF/MANIFEST.MF"):
            JarManifestResolver().resolve(str(path))

    @pytest.mark.parametrize(
        "error",
        [zipfile.BadZipFile("Bad CRC-32"), zlib.error("invalid stored block"), OSError("io")],
    )
    def test_read_failure(self, make_jar: MakeJar, error: Exception) -> None:
        path = make_jar()
        with patch.object(zipfile.ZipFile, "open", side_effect=error):
            with pytest.raises(ManifestReadError, match="Failed to read"):
                JarManifestResolver().resolve(str(path))

    @pytest.mark.parametrize("damage", ["overrun", "crc"])
    def test_damaged_entry_is_read_error(
        self, corrupt_jar: Callable[[str], Path], damage: str,
    ) -> None:
        path = corrupt_jar(damage)
        with pytest.raises(ManifestReadError, match="Failed to read"):
            JarManifestResolver().resolve(str(path))

    def test_empty_main_class_is_missing(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest="Manifest-Version: 1.0\nMain-Class:\n")
        with pytest.raises(MainClassMissingError):
            JarManifestResolver().resolve(str(path))

    def test_main_class_missing(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest="Manifest-Version: 1.0\nClass-Path: a.jar\n")
        with pytest.raises(MainClassMissingError):
            JarManifestResolver().resolve(str(path))

    def test_all_stages_are_archive_errors(self, tmp_path: Path) -> None:
        with pytest.raises(ArchiveError):
            JarManifestResolver().resolve(str(tmp_path / "absent.jar"))


class TestHandleRelease:
    def test_closed_after_success(self, make_jar: MakeJar) -> None:
        path = make_jar()
        with patch.object(zipfile.ZipFile, "close", autospec=True, side_effect=zipfile.ZipFile.close) as close:
            JarManifestResolver().resolve(str(path))
        assert close.call_count >= 1

    def test_closed_after_missing_manifest(self, make_jar: MakeJar) -> None:
        path = make_jar(manifest=None)
        with patch.object(zipfile.ZipFile, "close", autospec=True, side_effect=zipfile.ZipFile.close) as close:
            with pytest.raises(ManifestNotFoundError):
                JarManifestResolver().resolve(str(path))
        assert close.call_count >= 1
