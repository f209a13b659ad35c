"""Stores the version number for the observable-list package.

This module simply defines the `__version__` constant, which contains the
current version string for the `observable-list` distribution. It is read by
the packaging configuration during builds.
"""

# The single source of truth for the package version.
__version__ = "0.1.0"
