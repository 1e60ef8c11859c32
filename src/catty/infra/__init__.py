"""Infrastructure layer — external system integration.

This layer wraps all interaction with archives on disk, the operating
system and the Java runtime.  Every raw OS or archive exception must be
caught here and re-raised as a :class:`~catty.exceptions.CattyError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from catty.infra.jar_manifest import JarManifestResolver
from catty.infra.java_runtime import JavaRuntimeLauncher, JavaStatus, detect_java, require_java

__all__: list[str] = [
    "JarManifestResolver",
    "JavaRuntimeLauncher",
    "JavaStatus",
    "detect_java",
    "require_java",
]
