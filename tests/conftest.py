"""Pytest configuration and fixtures for test isolation."""

import os
from unittest.mock import MagicMock

import pytest

from capa_e2e.constants import MULTI_TENANCY

ACCOUNT_ID = "123456789012"


@pytest.fixture(scope="function", autouse=True)
def isolate_environment(monkeypatch):
    """Automatically isolate each test from the host environment.

    Clears the multi-tenancy variables and AWS/logging settings that could
    leak from a developer's shell (or a previous suite run) into tests.
    """
    env_vars_to_clear = [
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_PROFILE",
        "APP_ENV",
        "LOG_LEVEL",
        "BUILD_VERSION",
    ]
    env_vars_to_clear.extend(name for name in os.environ if name.startswith(MULTI_TENANCY))

    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)

    yield

    # Variables exported by the code under test bypass monkeypatch
    for name in [name for name in os.environ if name.startswith(MULTI_TENANCY)]:
        del os.environ[name]


@pytest.fixture
def mock_iam_client():
    """IAM client whose get_role returns an ARN built from the requested name."""
    client = MagicMock()
    client.get_role.side_effect = lambda RoleName: {
        "Role": {
            "RoleName": RoleName,
            "RoleId": "AROA123456789EXAMPLE",
            "Arn": f"arn:aws:iam::{ACCOUNT_ID}:role/{RoleName}",
            "Path": "/",
        }
    }
    return client


@pytest.fixture
def mock_session(mock_iam_client):
    """boto3 session stand-in that hands out mock_iam_client."""
    session = MagicMock()
    session.client.return_value = mock_iam_client
    return session
