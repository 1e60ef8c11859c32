"""Static user-facing texts: usage, ``-X`` listing and version banner."""

from __future__ import annotations

import platform

from catty.version import __version__

USAGE: str = """\
Usage: catty [options] <mainclass> [args...]
           (to execute a class)
   or  catty [options] -jar <jarfile> [args...]
           (to execute a jar file)

 Arguments following the main class or -jar <jarfile> are passed as
 the arguments to the main class.

 where options include:

    -cp <class search path of directories and zip/jar files>
    -classpath <class search path of directories and zip/jar files>
                  A : separated list of directories, JAR archives,
                  and ZIP archives to search for class files.
    --dry-run     resolve the launch configuration without starting
                  the runtime
    -D<name>=<value>
                  set a system property
    -showversion  print product version to the error stream and exit
    -version, --show-version
                  print product version to the output stream and exit
    -help, --help, -?
                  print this help message to the output stream
    -X            print help on extra options to the output stream

 Module options (-m, --module, --module-path, ...) are not supported."""

EXTENDED_HELP: str = """\
 Options following the launcher flags that start with '-' are passed
 to the Java runtime unchanged, for example:

    -Xms<size>        set initial Java heap size
    -Xmx<size>        set maximum Java heap size
    -Xss<size>        set java thread stack size
    -Xlog:<opts>      configure or enable logging with the JVM unified
                      logging framework
    -ea[:<package>...|:<class>]
                      enable assertions with specified granularity

 These extra options are interpreted by the runtime, not by catty."""


def version_banner() -> str:
    """Return the text printed for the version flags."""
    return "\n".join(
        (
            f'catty version "{__version__}"',
            f"Python {platform.python_version()} ({platform.system()} {platform.machine()})",
        )
    )
