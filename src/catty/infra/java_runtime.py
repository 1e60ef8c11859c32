"""Infrastructure: Java runtime detection and process handoff.

This module locates a ``java`` executable and runs a resolved
:class:`~catty.core.models.LaunchConfiguration` with it.  It satisfies
the :class:`~catty.core.protocols.RuntimeLauncher` protocol
structurally.

Rules
-----
* Detection via ``$JAVA_HOME/bin/java`` then :func:`shutil.which`.
* No permanent PATH modification.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from catty.core.models import LaunchConfiguration
from catty.exceptions import LaunchFailedError, LaunchPreconditionError, RuntimeNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class JavaStatus:
    """Result of a Java runtime probe.

    Attributes
    ----------
    found : bool
        Whether a ``java`` executable was located.
    path : Path | None
        Absolute path to the executable, or ``None``.
    source : str
        Where it was found (``"JAVA_HOME"``, ``"PATH"``) or ``"not found"``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing a JDK on the current
        platform.  Empty when a runtime is already present.
    """

    found: bool
    path: Path | None
    source: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def _executable_name() -> str:
    return "java.exe" if platform.system().lower() == "windows" else "java"


def detect_java() -> JavaStatus:
    """Probe the system for a ``java`` executable.

    Returns a :class:`JavaStatus` regardless of whether one is present —
    the caller decides whether to abort.
    """
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        candidate = Path(java_home) / "bin" / _executable_name()
        if candidate.is_file():
            return JavaStatus(
                found=True,
                path=candidate.resolve(),
                source="JAVA_HOME",
                install_commands=(),
            )

    result = shutil.which("java")
    if result is not None:
        return JavaStatus(
            found=True,
            path=Path(result).resolve(),
            source="PATH",
            install_commands=(),
        )

    return JavaStatus(
        found=False,
        path=None,
        source="not found",
        install_commands=_platform_install_commands(),
    )


def require_java() -> Path:
    """Locate ``java`` or raise :class:`RuntimeNotFoundError`."""
    status = detect_java()
    if not status.found or status.path is None:
        hint_lines: list[str] = ["Set JAVA_HOME, or install a JDK using one of:"]
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise RuntimeNotFoundError(
            "No Java runtime found on JAVA_HOME or PATH.",
            hint="\n".join(hint_lines),
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install EclipseAdoptium.Temurin.21.JDK",
            "choco install temurin",
        )
    if system == "linux":
        return (
            "sudo apt install default-jdk",
            "sudo dnf install java-latest-openjdk",
            "sudo pacman -S jdk-openjdk",
        )
    if system == "darwin":
        return ("brew install openjdk",)
    return ("Download a JDK from https://adoptium.net/",)


# ---------------------------------------------------------------------------
# Process handoff
# ---------------------------------------------------------------------------

def build_command(java: Path | str, config: LaunchConfiguration) -> list[str]:
    """Return the argv that runs *config* with the *java* executable."""
    if config.entry_point is None:
        raise LaunchPreconditionError("Main class not found.")
    return [
        str(java),
        *config.jvm_options,
        config.entry_point,
        *config.application_arguments,
    ]


class JavaRuntimeLauncher:
    """Concrete :class:`RuntimeLauncher` that runs ``java`` as a child process.

    Parameters
    ----------
    java:
        Explicit path to the executable.  When ``None`` it is located
        with :func:`require_java` at launch time.
    """

    def __init__(self, java: Path | str | None = None) -> None:
        self._java: Path | str | None = java

    def launch(self, config: LaunchConfiguration) -> int:
        """Run *config* and return the child's exit status.

        Raises
        ------
        RuntimeNotFoundError
            When no ``java`` executable can be located.
        LaunchFailedError
            When the process cannot be started.
        """
        java = self._java if self._java is not None else require_java()
        command = build_command(java, config)
        logger.debug("Launching: %s", command)

        try:
            completed = subprocess.run(command, check=False)
        except OSError as exc:
            raise LaunchFailedError(
                f"Failed to start {java}: {exc}",
            ) from exc
        return completed.returncode
