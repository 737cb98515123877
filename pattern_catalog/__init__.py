"""Pattern Catalog - Root Package.

A collection of small, self-contained examples of classic object-oriented
design patterns and SOLID principles. Each example lives in its own module
and exposes a ``main()`` entry point that prints demonstration output.

Key Components:
    - creational: builder, factory and singleton examples
    - solid: open/closed and single-responsibility examples
    - domain: shared domain exceptions
    - config: typed configuration loading
    - infrastructure: logging and singleton registry
    - cli: command-line runner for the examples
"""

from ._version import __version__

__package_name__ = "pattern-catalog"
