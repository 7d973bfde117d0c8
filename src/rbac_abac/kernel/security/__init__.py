"""Kernel security – Permission, Role, User and RBAC evaluation."""
from rbac_abac.kernel.security.permission import Permission
from rbac_abac.kernel.security.rbac import (
    effective_permissions,
    has_all_permissions,
    has_any_permission,
    has_permission,
)
from rbac_abac.kernel.security.model import Role, User

__all__ = [
    "Permission",
    "Role",
    "User",
    "effective_permissions",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
]
