"""
Access to the version resource bundled inside the distribution.

The resource is a single-line UTF-8 text file shipped as package data.
"""

from importlib import resources

from .errors import ResourceMalformed, ResourceUnavailable

RESOURCE_PACKAGE = "compiler_version"
RESOURCE_NAME = "compiler.version"


def read_version_resource(package: str = RESOURCE_PACKAGE, name: str = RESOURCE_NAME) -> str:
    """
    Read the first line of the bundled version resource.

    Args:
        package: Package that owns the resource
        name: Resource file name inside the package

    Returns:
        str: The trimmed version string

    Raises:
        ResourceUnavailable: If the resource cannot be located or opened
        ResourceMalformed: If the resource is empty or cannot be decoded
    """
    location = f"{package}/{name}"
    try:
        stream = resources.files(package).joinpath(name).open("r", encoding="utf-8")
    except (ModuleNotFoundError, TypeError) as e:
        raise ResourceUnavailable(f"Failed to locate compiler version resource {location}: {e}") from e
    except OSError as e:
        raise ResourceUnavailable(f"Failed to open compiler version resource {location}: {e}") from e

    with stream:
        try:
            line = stream.readline()
        except UnicodeDecodeError as e:
            raise ResourceMalformed(f"Compiler version resource {location} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ResourceMalformed(f"Failed to read compiler version from {location}: {e}") from e

    version = line.strip()
    if not version:
        raise ResourceMalformed(f"Compiler version resource {location} is empty")
    return version
