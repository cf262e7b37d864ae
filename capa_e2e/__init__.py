"""Shared fixtures for the cluster-api-provider-aws end-to-end suite."""

from .version import __version__

__all__ = ["__version__"]
