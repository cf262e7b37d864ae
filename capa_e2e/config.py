import os
from dataclasses import dataclass, field
from typing import Optional

import boto3
import structlog

logger = structlog.get_logger(__name__)

DEFAULT_AWS_REGION = "us-west-2"


@dataclass
class AwsConfig:
    """AWS and logging configuration for a suite run.

    Values come from environment variables (or a .env file loaded by the CLI):
        - AWS_REGION / AWS_DEFAULT_REGION: region for the IAM client (default: us-west-2)
        - AWS_PROFILE: named profile from the shared credentials file (optional)
        - APP_ENV: "production" switches logs to JSON (default: development)
        - LOG_LEVEL: logging level (default: INFO)

    Explicit constructor arguments win over the environment.
    """

    aws_region: str = ""
    aws_profile: Optional[str] = None
    app_env: str = ""
    log_level: str = ""

    _session: Optional[boto3.Session] = field(default=None, repr=False)

    def __post_init__(self):
        self.aws_region = (
            self.aws_region or os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or DEFAULT_AWS_REGION
        )
        self.aws_profile = self.aws_profile or os.getenv("AWS_PROFILE") or None
        self.app_env = (self.app_env or os.getenv("APP_ENV", "development")).lower()
        self.log_level = (self.log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    @property
    def json_logs(self) -> bool:
        return self.app_env == "production"

    def session(self) -> boto3.Session:
        """Return the boto3 session used as the credential handle for AWS calls.

        The session is created on first use and reused afterwards.
        """
        if self._session is None:
            logger.debug("Creating AWS session", region=self.aws_region, profile=self.aws_profile)
            self._session = boto3.Session(region_name=self.aws_region, profile_name=self.aws_profile)
        return self._session


def get_config(aws_region: str = "", aws_profile: Optional[str] = None) -> AwsConfig:
    """Get configuration from the environment, with optional overrides."""
    return AwsConfig(aws_region=aws_region, aws_profile=aws_profile)
