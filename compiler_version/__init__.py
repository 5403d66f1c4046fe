"""
Compiler Version

Authoritative answer to "what version is this compiler?" and "is this a
pre-release build?" for every part of the toolchain.
"""

from .errors import (
    InvariantViolation,
    ResourceMalformed,
    ResourceUnavailable,
    VersionProviderError,
)
from .provider import (
    IS_PRE_RELEASE,
    TEST_IS_PRE_RELEASE_ENV,
    VersionProvider,
    default_provider,
    get_version,
    is_pre_release,
)

__description__ = "Compiler version and pre-release status provider"
