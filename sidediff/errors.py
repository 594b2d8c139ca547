"""Sidediff exception hierarchy

Imported by the services, the routers and the tests; keep it dependency-free.
"""


class SidediffError(Exception):
    """Base exception for all sidediff errors."""


class InvalidInputError(SidediffError):
    """Raised when a diff argument is missing or is not text."""


class ResourceExceededError(SidediffError):
    """Raised when an LCS table would exceed the configured cell budget."""


class DiffCancelledError(SidediffError):
    """Raised when a caller cancels a diff while its table is being filled."""


class ConfigError(SidediffError):
    """Raised when the configuration cannot be persisted."""
