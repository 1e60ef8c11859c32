"""catty — a ``java``-style command-line launcher.

Parses launcher flags, resolves the classpath (explicit or from an
executable JAR's manifest) and hands off to an external Java runtime.
"""

from catty.version import __version__

__all__: list[str] = ["__version__"]
