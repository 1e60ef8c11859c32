"""Core / service layer — pure launcher logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from catty.core.args_processor import ArgsProcessor
from catty.core.launch_service import LaunchService
from catty.core.manifest import parse_manifest
from catty.core.models import (
    InfoRequest,
    LaunchConfiguration,
    LaunchMode,
    ManifestAttributes,
    ScanState,
)
from catty.core.protocols import ManifestResolver, RuntimeLauncher

__all__: list[str] = [
    "ArgsProcessor",
    "InfoRequest",
    "LaunchConfiguration",
    "LaunchMode",
    "LaunchService",
    "ManifestAttributes",
    "ManifestResolver",
    "RuntimeLauncher",
    "ScanState",
    "parse_manifest",
]
