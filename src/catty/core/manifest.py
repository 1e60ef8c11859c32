"""Pure JAR manifest parsing.

Only two main-section attributes matter to the launcher:

* ``Main-Class`` — the entry point.  Every match overwrites the
  previous one, so the last occurrence wins.
* ``Class-Path`` — space-separated relative paths.  Each run of spaces
  becomes the classpath separator and multiple lines accumulate in file
  order.

The parser is a deterministic function of its input lines; opening the
archive is the infrastructure layer's job.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from catty.core.models import CLASSPATH_SEPARATOR, ManifestAttributes
from catty.exceptions import MainClassMissingError

MANIFEST_ENTRY: str = "META-INF/MANIFEST.MF"
"""Archive entry name holding the manifest."""

MAIN_CLASS_ATTRIBUTE: str = "Main-Class:"
CLASS_PATH_ATTRIBUTE: str = "Class-Path:"

_SPACE_RUN = re.compile(" +")


def normalize_class_path(value: str) -> str:
    """Turn a space-separated ``Class-Path`` value into a classpath."""
    return _SPACE_RUN.sub(CLASSPATH_SEPARATOR, value.strip())


def parse_manifest(lines: Iterable[str], *, source: str = MANIFEST_ENTRY) -> ManifestAttributes:
    """Extract :class:`ManifestAttributes` from manifest *lines*.

    Raises
    ------
    MainClassMissingError
        If no ``Main-Class`` line is present, or the last one is empty.
    """
    main_class: str | None = None
    fragments: list[str] = []

    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith(MAIN_CLASS_ATTRIBUTE):
            main_class = line[len(MAIN_CLASS_ATTRIBUTE):].strip()
        elif line.startswith(CLASS_PATH_ATTRIBUTE):
            fragment = normalize_class_path(line[len(CLASS_PATH_ATTRIBUTE):])
            if fragment:
                fragments.append(fragment)

    if not main_class:
        raise MainClassMissingError(
            f"Main-Class not found in {source}.",
            hint="Add a 'Main-Class:' attribute to the JAR manifest.",
        )

    return ManifestAttributes(
        entry_point_class=main_class,
        classpath_fragment=CLASSPATH_SEPARATOR.join(fragments) if fragments else None,
    )
