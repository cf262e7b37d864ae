"""IAM role ARN resolution for the multi-tenancy specs.

The multi-tenancy cluster templates reference the roles created by the
bootstrap CloudFormation stack by ARN. This module looks those ARNs up once
per process and exports them, together with the derived role and identity
names, as environment variables for the template rendering done by clusterctl.

Usage:
    resolver = RoleResolver()
    session = get_config().session()

    resolver.set_env_vars(MultitenancyRole.JUMP, session)
    os.environ["MULTI_TENANCY_JUMP_ROLE_ARN"]  # arn:aws:iam::...:role/CAPAMultiTenancyJump
"""

import os
import threading
from typing import Callable, Dict, Iterable, Optional, Union

import boto3
import structlog

from .multitenancy import MULTI_TENANCY_ROLES, MultitenancyRole

logger = structlog.get_logger(__name__)

RoleLike = Union[MultitenancyRole, str]


def set_env_var(name: str, value: str, overwrite: bool = False) -> bool:
    """Set an environment variable, keeping an existing value unless ``overwrite``.

    Returns:
        True if the variable was written, False if an existing value was kept
    """
    if name in os.environ and not overwrite:
        logger.debug("Environment variable already set, keeping existing value", name=name)
        return False

    os.environ[name] = value
    logger.debug("Environment variable set", name=name)
    return True


def _iam_client(session: boto3.Session):
    return session.client("iam")


class RoleLookupCache:
    """Role name to role ARN mapping shared by every resolution in a process.

    Entries are written once and never updated or evicted. Two kinds of lock
    are held here:

    - ``lock`` guards the mapping itself (and the environment writes that
      publish its entries), and is only ever held for in-memory work.
    - one lock per role name, held for the duration of that role's IAM
      lookup, so a role is looked up at most once at a time while lookups
      for other roles proceed.
    """

    def __init__(self):
        self._arns: Dict[str, str] = {}
        self._role_locks: Dict[str, threading.Lock] = {}
        self.lock = threading.Lock()

    def get(self, role_name: str) -> Optional[str]:
        with self.lock:
            return self._arns.get(role_name)

    def put(self, role_name: str, role_arn: str) -> str:
        """Store ``role_arn`` unless the role already has an entry; return the stored ARN."""
        with self.lock:
            return self._arns.setdefault(role_name, role_arn)

    def role_lock(self, role_name: str) -> threading.Lock:
        with self.lock:
            return self._role_locks.setdefault(role_name, threading.Lock())

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the current entries."""
        with self.lock:
            return dict(self._arns)

    def clear(self) -> None:
        """Drop every entry. Only meant for test isolation.

        Per-role locks are kept so a lookup still in flight keeps excluding
        callers that arrive after the clear.
        """
        with self.lock:
            self._arns.clear()

    def __contains__(self, role_name: object) -> bool:
        with self.lock:
            return role_name in self._arns

    def __len__(self) -> int:
        with self.lock:
            return len(self._arns)


class RoleResolver:
    """Resolves multi-tenancy roles to their IAM ARNs.

    Every lookup goes through the injected RoleLookupCache, so a role is
    fetched from IAM at most once for the life of the cache. Failed lookups
    are not cached; calling again retries the lookup.

    Attributes:
        cache: Cache of resolved role ARNs
    """

    def __init__(
        self,
        cache: Optional[RoleLookupCache] = None,
        client_factory: Optional[Callable[[boto3.Session], object]] = None,
    ):
        """Initialize the resolver.

        Args:
            cache: Cache to resolve through (default: a new, empty cache)
            client_factory: Builds an IAM client from a session (default: ``session.client("iam")``)
        """
        self.cache = cache if cache is not None else RoleLookupCache()
        self._client_factory = client_factory or _iam_client

    def role_arn(self, role: RoleLike, session: boto3.Session) -> str:
        """Return the ARN of ``role``, looking it up in IAM on the first call.

        Args:
            role: Multi-tenancy role or its tag (e.g. "Jump")
            session: boto3 session whose credentials are used for the IAM lookup

        Returns:
            Role ARN, e.g. "arn:aws:iam::123456789012:role/CAPAMultiTenancyJump"

        Raises:
            UnknownRoleError: If ``role`` is not a registered multi-tenancy role
            botocore.exceptions.ClientError: If the IAM lookup fails (role missing, access denied, ...)
        """
        role = MultitenancyRole.from_tag(role)
        role_name = role.role_name

        cached = self.cache.get(role_name)
        if cached is not None:
            logger.debug("Using cached role ARN", role_name=role_name)
            return cached

        with self.cache.role_lock(role_name):
            # Another caller may have finished the lookup while we waited
            cached = self.cache.get(role_name)
            if cached is not None:
                logger.debug("Using cached role ARN", role_name=role_name)
                return cached

            logger.debug("Looking up IAM role", role_name=role_name)
            try:
                iam = self._client_factory(session)
                response = iam.get_role(RoleName=role_name)
                role_arn = response["Role"]["Arn"]
            except Exception as e:
                logger.error(
                    "Failed to look up IAM role",
                    role_name=role_name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            role_arn = self.cache.put(role_name, role_arn)
            logger.info("IAM role resolved", role_name=role_name, role_arn=role_arn)
            return role_arn

    def set_env_vars(self, role: RoleLike, session: boto3.Session) -> str:
        """Export the ARN, role name and identity name of ``role``.

        Variables that are already set keep their value. If the ARN cannot be
        resolved nothing is written and the lookup error is raised.

        Returns:
            The resolved role ARN
        """
        role = MultitenancyRole.from_tag(role)
        role_arn = self.role_arn(role, session)

        with self.cache.lock:
            set_env_var(role.env_var_arn, role_arn, overwrite=False)
            set_env_var(role.env_var_name, role.role_name, overwrite=False)
            set_env_var(role.env_var_identity, role.identity_name, overwrite=False)

        return role_arn

    def set_all_env_vars(
        self,
        session: boto3.Session,
        roles: Iterable[RoleLike] = MULTI_TENANCY_ROLES,
    ) -> Dict[str, str]:
        """Export the variables of every role in ``roles``, in order.

        Stops at the first role that cannot be resolved.

        Returns:
            Mapping of role name to the ARN resolved for it
        """
        resolved = {}
        for role in roles:
            role = MultitenancyRole.from_tag(role)
            resolved[role.role_name] = self.set_env_vars(role, session)
        return resolved
