"""
Error types for the compiler version provider.

All of these describe packaging problems rather than runtime conditions,
so none of them are retried and there is no fallback version.
"""


class VersionProviderError(RuntimeError):
    """Base class for failures while resolving the compiler version."""


class ResourceUnavailable(VersionProviderError):
    """The embedded version resource could not be found or opened."""


class ResourceMalformed(VersionProviderError):
    """The embedded version resource is empty or not readable as text."""


class InvariantViolation(VersionProviderError):
    """The build is flagged as pre-release but its version has no qualifier."""
