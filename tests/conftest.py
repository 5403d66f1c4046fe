"""
Pytest configuration and shared fixtures for test suite.

Provides providers with injected loaders and override sources, and
throwaway packages that carry a version resource on disk.
"""

import uuid
import pytest

from compiler_version.config import TEST_IS_PRE_RELEASE_ENV
from compiler_version.provider import VersionProvider


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make sure no override or log level leaks in from the real environment."""
    monkeypatch.delenv(TEST_IS_PRE_RELEASE_ENV, raising=False)
    monkeypatch.delenv('COMPILER_OVERRIDE_ENV_KEY', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)


@pytest.fixture
def make_provider():
    """Build a provider from a fixed version string and override value."""
    def _make(version='1.9.0-dev-123', pre_release=True, override=None):
        return VersionProvider(
            pre_release=pre_release,
            loader=lambda: version,
            override=lambda: override,
        )
    return _make


@pytest.fixture
def resource_package(tmp_path, monkeypatch):
    """
    Create an importable package holding a compiler.version resource.

    Returns a function taking the raw bytes to store (or None to omit the
    file) and returning the package name.
    """
    monkeypatch.syspath_prepend(str(tmp_path))

    def _create(content=b'1.9.0-dev-123\n'):
        name = f'versionpkg_{uuid.uuid4().hex}'
        package_dir = tmp_path / name
        package_dir.mkdir()
        (package_dir / '__init__.py').write_text('')
        if content is not None:
            (package_dir / 'compiler.version').write_bytes(content)
        return name

    return _create
