"""Tests for domain models (core/models.py).

All models are frozen dataclasses or enums — these tests verify
immutability, defaults, and the derived runtime options.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from catty.core.models import (
    DEFAULT_CLASSPATH,
    LaunchConfiguration,
    LaunchMode,
    ManifestAttributes,
)


# ---------------------------------------------------------------------------
# ManifestAttributes
# ---------------------------------------------------------------------------

class TestManifestAttributes:
    def test_fragment_defaults_to_none(self) -> None:
        attrs = ManifestAttributes(entry_point_class="com.example.App")
        assert attrs.classpath_fragment is None

    def test_classpath_without_fragment_is_archive_only(self) -> None:
        attrs = ManifestAttributes(entry_point_class="com.example.App")
        assert attrs.classpath_for("app.jar") == "app.jar"

    def test_classpath_puts_archive_first(self) -> None:
        attrs = ManifestAttributes(
            entry_point_class="com.example.App",
            classpath_fragment="a.jar:b.jar",
        )
        assert attrs.classpath_for("dist/app.jar") == "dist/app.jar:a.jar:b.jar"

    def test_frozen(self) -> None:
        attrs = ManifestAttributes(entry_point_class="com.example.App")
        with pytest.raises(AttributeError):
            attrs.entry_point_class = "Other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# LaunchConfiguration
# ---------------------------------------------------------------------------

class TestLaunchConfiguration:
    def test_defaults(self) -> None:
        config = LaunchConfiguration()
        assert config.entry_point is None
        assert config.classpath == DEFAULT_CLASSPATH == "."
        assert config.runtime_options == ()
        assert config.application_arguments == ()
        assert config.mode is LaunchMode.NONE
        assert config.dry_run is False

    def test_classpath_option(self) -> None:
        config = LaunchConfiguration(classpath="lib:out")
        assert config.classpath_option == "-Djava.class.path=lib:out"

    def test_jvm_options_put_classpath_first(self) -> None:
        config = LaunchConfiguration(runtime_options=("-Xmx1g", "-ea", "-Xmx1g"))
        assert config.jvm_options == (
            "-Djava.class.path=.",
            "-Xmx1g",
            "-ea",
            "-Xmx1g",
        )

    def test_frozen(self) -> None:
        config = LaunchConfiguration()
        with pytest.raises(AttributeError):
            config.classpath = "x"  # type: ignore[misc]

    def test_replace_leaves_original_untouched(self) -> None:
        config = LaunchConfiguration()
        updated = replace(config, mode=LaunchMode.ARCHIVE)
        assert config.mode is LaunchMode.NONE
        assert updated.mode is LaunchMode.ARCHIVE

    def test_equality(self) -> None:
        assert LaunchConfiguration(entry_point="Main") == LaunchConfiguration(entry_point="Main")
