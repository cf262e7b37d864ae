"""Multi-tenancy roles used by the nested and simple multi-tenancy specs.

Each role is identified by a short tag. Everything else (IAM role name,
AWSClusterRoleIdentity name and the environment variables the cluster
templates read) is derived from the tag.
"""

from enum import Enum

from ..constants import MULTI_TENANCY

ROLE_NAME_PREFIX = "CAPAMultiTenancy"


class UnknownRoleError(ValueError):
    """Raised when a tag does not name a registered multi-tenancy role."""

    def __init__(self, tag: str):
        known = ", ".join(role.value for role in MultitenancyRole)
        super().__init__(f"Unknown multi-tenancy role: {tag!r} (expected one of: {known})")
        self.tag = tag


class MultitenancyRole(str, Enum):
    """Role of a multi-tenancy test."""

    SIMPLE = "Simple"
    JUMP = "Jump"
    NESTED = "Nested"

    @classmethod
    def from_tag(cls, tag: "str | MultitenancyRole") -> "MultitenancyRole":
        """Return the role for ``tag``, raising UnknownRoleError if it is not registered."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls(tag)
        except ValueError:
            raise UnknownRoleError(tag) from None

    @property
    def role_name(self) -> str:
        return ROLE_NAME_PREFIX + self.value

    @property
    def identity_name(self) -> str:
        return self.role_name.lower()

    @property
    def env_var_arn(self) -> str:
        return MULTI_TENANCY + self.value.upper() + "_ROLE_ARN"

    @property
    def env_var_name(self) -> str:
        return MULTI_TENANCY + self.value.upper() + "_ROLE_NAME"

    @property
    def env_var_identity(self) -> str:
        return MULTI_TENANCY + self.value.upper() + "_IDENTITY_NAME"

    def __str__(self) -> str:
        return self.value


MULTI_TENANCY_ROLES = (MultitenancyRole.SIMPLE, MultitenancyRole.JUMP, MultitenancyRole.NESTED)
