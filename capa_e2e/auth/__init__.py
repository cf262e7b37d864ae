"""Multi-tenancy IAM role identities and ARN resolution."""

from .multitenancy import MULTI_TENANCY_ROLES, MultitenancyRole, UnknownRoleError
from .role_resolver import RoleLookupCache, RoleResolver, set_env_var

__all__ = [
    "MULTI_TENANCY_ROLES",
    "MultitenancyRole",
    "RoleLookupCache",
    "RoleResolver",
    "UnknownRoleError",
    "set_env_var",
]
