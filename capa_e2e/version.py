"""Version of the installed capa-e2e-shared distribution."""

import os
from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "capa-e2e-shared"


def get_version() -> str:
    """
    Return the version reported by ``capa-e2e --version``.

    BUILD_VERSION (set by the CI job that runs the suite) takes precedence
    over the installed distribution metadata. "unknown" when neither exists.
    """
    if build_version := os.getenv("BUILD_VERSION"):
        return build_version

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


__version__ = get_version()
