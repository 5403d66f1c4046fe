"""
Compiler version provider.

Single source of truth for the version of the running compiler and for
whether this build is a pre-release. The version string is read from the
bundled resource exactly once per provider; the pre-release answer comes
from the compiled flag unless the test override channel says otherwise.
"""

import threading
from typing import Callable, Optional, Tuple

from loguru import logger

from .config import TEST_IS_PRE_RELEASE_ENV, environment_override, parse_override
from .descriptor import QUALIFIER_DELIMITER, has_qualifier
from .errors import InvariantViolation, ResourceMalformed, VersionProviderError
from .resources import read_version_resource

# True while the latest stable language version supported by this compiler
# has not been released. Binaries produced with it are marked pre-release
# and are rejected by release builds. Flip before and after every major release.
IS_PRE_RELEASE = True

__all__ = [
    'IS_PRE_RELEASE',
    'TEST_IS_PRE_RELEASE_ENV',
    'VersionProvider',
    'default_provider',
    'get_version',
    'is_pre_release',
]

_Resolution = Tuple[Optional[str], Optional[VersionProviderError]]


class VersionProvider:
    """
    Lazily resolves the compiler version and answers pre-release queries.

    Resolution (resource read plus invariant check) happens once, on first
    access, under a lock. Its outcome, value or failure, is kept for the
    lifetime of the provider: every caller sees the same version or the
    same error.
    """

    def __init__(self, pre_release: bool = IS_PRE_RELEASE,
                 loader: Optional[Callable[[], str]] = None,
                 override: Optional[Callable[[], Optional[str]]] = None):
        """
        Args:
            pre_release: Compiled pre-release flag for this build
            loader: Returns the raw version string (default: bundled resource)
            override: Returns the raw override value or None (default: environment)
        """
        self._pre_release = pre_release
        self._loader = loader or read_version_resource
        self._override = override or environment_override
        self._lock = threading.Lock()
        self._resolution: Optional[_Resolution] = None

    @property
    def pre_release_default(self) -> bool:
        """The compiled pre-release flag, ignoring any override."""
        return self._pre_release

    @property
    def initialized(self) -> bool:
        """Whether resolution has completed, successfully or not."""
        return self._resolution is not None

    def get_version(self) -> str:
        """
        Return the compiler version.

        Returns:
            str: Non-empty version string, identical on every call

        Raises:
            ResourceUnavailable: If the version resource cannot be opened
            ResourceMalformed: If the version resource is empty or unreadable
            InvariantViolation: If flagged pre-release without a qualifier
        """
        resolution = self._resolution
        resolved_here = False
        if resolution is None:
            resolution, resolved_here = self._resolve()

        version, error = resolution
        if error is not None:
            if resolved_here:
                raise error
            raise type(error)(*error.args) from error
        return version

    def is_pre_release(self) -> bool:
        """
        Return whether this build is a pre-release.

        The override channel is re-read on every call; a recognised
        "true"/"false" (any case) wins over the compiled flag.

        Raises:
            VersionProviderError: If version resolution failed
        """
        self.get_version()

        overridden = parse_override(self._override())
        if overridden is not None:
            logger.debug(f"Pre-release flag overridden to {overridden}")
            return overridden

        return self._pre_release

    def _resolve(self) -> Tuple[_Resolution, bool]:
        with self._lock:
            if self._resolution is not None:
                return self._resolution, False

            try:
                version = self._loader().strip()
                if not version:
                    raise ResourceMalformed("Compiler version is empty")
                self._check_invariant(version)
            except VersionProviderError as e:
                logger.error(f"Failed to resolve compiler version: {e}")
                self._resolution = (None, e)
            else:
                logger.debug(f"Resolved compiler version {version} (pre-release: {self._pre_release})")
                self._resolution = (version, None)
            return self._resolution, True

    def _check_invariant(self, version: str) -> None:
        if self._pre_release and not has_qualifier(version):
            raise InvariantViolation(
                f"Pre-release flag cannot be true for a compiler without '{QUALIFIER_DELIMITER}' "
                f"in its version ({version}).\n"
                "Set IS_PRE_RELEASE to False or stamp the build with a qualified version"
            )

    def __repr__(self) -> str:
        state = 'resolved' if self.initialized else 'unresolved'
        return f"VersionProvider(pre_release={self._pre_release}, {state})"


_default_provider: Optional[VersionProvider] = None
_default_provider_lock = threading.Lock()


def default_provider() -> VersionProvider:
    """Return the process-wide provider, creating it on first use."""
    global _default_provider
    provider = _default_provider
    if provider is None:
        with _default_provider_lock:
            if _default_provider is None:
                _default_provider = VersionProvider()
            provider = _default_provider
    return provider


def get_version() -> str:
    """Return the version of this compiler."""
    return default_provider().get_version()


def is_pre_release() -> bool:
    """Return whether binaries produced by this compiler are pre-release."""
    return default_provider().is_pre_release()
