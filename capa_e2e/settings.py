"""
Suite settings and the command-line flags bound to them.

The flag names match the ones the test Makefile passes to the suite
(``--config-path``, ``--kubetest.ginkgo-nodes``, ...), so the same
invocation keeps working when the suite is driven through this package.

Module: settings
"""

import functools
from dataclasses import dataclass, field
from typing import Callable, Optional

import boto3
import click
from pydantic import BaseModel, Field

from .auth import RoleResolver
from .config import AwsConfig, get_config
from .constants import DEFAULT_SOURCE_TEMPLATE


class Settings(BaseModel):
    """Settings of one end-to-end suite run."""

    config_path: str = Field("", description="Path to the e2e config file")
    artifact_folder: str = Field("", description="Folder where e2e test artifacts should be stored")
    use_ci_artifacts: bool = Field(
        False, description="Use the latest build from the main branch of the Kubernetes repository"
    )
    kubetest_config_file_path: str = Field("", description="Path to the kubetest configuration file")
    ginkgo_nodes: int = Field(1, ge=1, description="Number of ginkgo nodes to use")
    ginkgo_slow_spec_threshold: int = Field(120, ge=0, description="Time in seconds before a spec is marked as slow")
    use_existing_cluster: bool = Field(
        False, description="Use the current cluster instead of creating a new one"
    )
    skip_cleanup: bool = Field(False, description="Skip resource cleanup after the tests")
    skip_cloudformation_deletion: bool = Field(False, description="Do not delete the AWS CloudFormation stack")
    skip_cloudformation_creation: bool = Field(False, description="Do not create the AWS CloudFormation stack")
    skip_quotas: bool = Field(False, description="Skip requesting quotas for AWS services")
    data_folder: str = Field("", description="Path to the data folder")
    source_template: str = Field(DEFAULT_SOURCE_TEMPLATE, description="Path to the source cluster template")

    class Config:
        extra = "forbid"


@dataclass
class E2EContext:
    """State shared by the specs of a suite run."""

    settings: Settings = field(default_factory=Settings)
    config: AwsConfig = field(default_factory=get_config)
    resolver: RoleResolver = field(default_factory=RoleResolver)

    @property
    def session(self) -> boto3.Session:
        return self.config.session()


_FLAGS = [
    click.option("--config-path", "config_path", default="", help="path to the e2e config file"),
    click.option(
        "--artifacts-folder",
        "artifact_folder",
        default="",
        help="folder where e2e test artifact should be stored",
    ),
    click.option(
        "--kubetest.use-ci-artifacts",
        "use_ci_artifacts",
        is_flag=True,
        help="use the latest build from the main branch of the Kubernetes repository",
    ),
    click.option(
        "--kubetest.config-file",
        "kubetest_config_file_path",
        default="",
        help="path to the kubetest configuration file",
    ),
    click.option(
        "--kubetest.ginkgo-nodes",
        "ginkgo_nodes",
        type=click.IntRange(min=1),
        default=1,
        show_default=True,
        help="number of ginkgo nodes to use",
    ),
    click.option(
        "--kubetest.ginkgo-slowSpecThreshold",
        "ginkgo_slow_spec_threshold",
        type=click.IntRange(min=0),
        default=120,
        show_default=True,
        help="time in s before spec is marked as slow",
    ),
    click.option(
        "--use-existing-cluster",
        "use_existing_cluster",
        is_flag=True,
        help="if true, the test uses the current cluster instead of creating a new one (default discovery rules apply)",
    ),
    click.option(
        "--skip-cleanup", "skip_cleanup", is_flag=True, help="if true, the resource cleanup after tests will be skipped"
    ),
    click.option(
        "--skip-cloudformation-deletion",
        "skip_cloudformation_deletion",
        is_flag=True,
        help="if true, an AWS CloudFormation stack will not be deleted",
    ),
    click.option(
        "--skip-cloudformation-creation",
        "skip_cloudformation_creation",
        is_flag=True,
        help="if true, an AWS CloudFormation stack will not be created",
    ),
    click.option(
        "--skip-quotas",
        "skip_quotas",
        is_flag=True,
        help="if true, the requesting of quotas for aws services will be skipped",
    ),
    click.option("--data-folder", "data_folder", default="", help="path to the data folder"),
    click.option(
        "--source-template",
        "source_template",
        default=DEFAULT_SOURCE_TEMPLATE,
        show_default=True,
        help="path to the source cluster template",
    ),
]


def default_flags(f: Callable) -> Callable:
    """Add the default suite flags to a click command.

    The flag values are collected into a Settings instance that is passed to
    the command as the ``settings`` keyword argument.
    """

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        values = {name: kwargs.pop(name) for name in Settings.model_fields if name in kwargs}
        return f(*args, settings=Settings(**values), **kwargs)

    for option in reversed(_FLAGS):
        wrapper = option(wrapper)
    return wrapper


def create_context(settings: Optional[Settings] = None, config: Optional[AwsConfig] = None) -> E2EContext:
    """Build an E2EContext from parsed settings and configuration."""
    return E2EContext(settings=settings or Settings(), config=config or get_config())
