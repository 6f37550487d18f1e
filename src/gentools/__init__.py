"""gentools — generic algorithms, trait extraction and text helpers.

Container-agnostic algorithms built on structural protocols, with
introspection of container element types, callable shapes and
human-readable type names.
"""

from gentools.version import __version__

__all__: list[str] = ["__version__"]
