"""
rbac_abac – role-based permission evaluation.

Import path convention::

    from rbac_abac import Permission, Role, User, has_permission
    from rbac_abac.kernel.errors import ValidationError
    from rbac_abac.observability.logging import JsonLoggerFactory
"""

from rbac_abac.kernel.security import (
    Permission,
    Role,
    User,
    effective_permissions,
    has_all_permissions,
    has_any_permission,
    has_permission,
)

__version__ = "0.1.0"
__all__ = [
    "Permission",
    "Role",
    "User",
    "__version__",
    "effective_permissions",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
]
