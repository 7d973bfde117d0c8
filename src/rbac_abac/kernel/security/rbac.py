"""Kernel security — Role-Based Access Control (RBAC) evaluation.

A user's effective permissions are the union of the permissions of every
role it holds. Membership is exact equality against :class:`Permission`
members: no wildcards, no prefixes, no hierarchy between permissions.

Every function here is pure. None of them raises for a well-formed
:class:`~rbac_abac.kernel.security.model.User`, whatever permission value is
asked about; values outside the enumeration are simply not granted.

Example::

    author = Role(id="author", name="Author", permissions=[Permission.CREATE_POST])
    user = User(id="u-1", email="ana@example.com", roles=[author])

    has_permission(user, Permission.CREATE_POST)   # True
    has_permission(user, Permission.DELETE_POST)   # False
    has_permission(user, "INVALID_PERMISSION")     # False
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rbac_abac.kernel.security.permission import Permission

if TYPE_CHECKING:
    from rbac_abac.kernel.security.model import User


def has_permission(user: User, permission: Permission | Any) -> bool:
    """Return ``True`` iff some role of *user* grants *permission*.

    Scans role by role and stops at the first match, so no combined
    permission list is built. Values outside the enumeration are
    rejected up front and never logged.
    """
    if Permission.parse(permission) is None:
        return False
    return any(permission in role.permissions for role in user.roles)


def has_any_permission(user: User, *permissions: Permission | Any) -> bool:
    """``True`` if *user* holds at least one of *permissions* (``False`` for none given)."""
    return any(has_permission(user, p) for p in permissions)


def has_all_permissions(user: User, *permissions: Permission | Any) -> bool:
    """``True`` if *user* holds every one of *permissions* (``True`` for none given)."""
    return all(has_permission(user, p) for p in permissions)


def effective_permissions(user: User) -> frozenset[Permission]:
    """Return the union of the permissions of all roles held by *user*."""
    return frozenset(p for role in user.roles for p in role.permissions)


__all__ = [
    "effective_permissions",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
]
