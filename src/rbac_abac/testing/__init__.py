"""Testing – builders and hypothesis strategies for roles and users.

The strategies need ``hypothesis`` (``pip install "rbac-abac[testing]"``);
importing this package does not.
"""
from rbac_abac.testing.builders import Builder, DataclassBuilder, RoleBuilder, UserBuilder
from rbac_abac.testing.strategies import (
    permission_strategy,
    role_strategy,
    unknown_permission_strategy,
    user_strategy,
)

__all__ = [
    "Builder",
    "DataclassBuilder",
    "RoleBuilder",
    "UserBuilder",
    "permission_strategy",
    "role_strategy",
    "unknown_permission_strategy",
    "user_strategy",
]
