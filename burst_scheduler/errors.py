from __future__ import annotations


class UsageError(ValueError):
    """Missing or insufficient command-line arguments, or an unknown algorithm."""


class AllocationError(RuntimeError):
    """Storage for the process table could not be obtained."""
