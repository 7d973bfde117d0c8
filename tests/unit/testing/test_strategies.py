"""Unit tests for hypothesis strategies."""

from __future__ import annotations

from hypothesis import given

from rbac_abac import Permission, Role, User
from rbac_abac.testing import (
    permission_strategy,
    role_strategy,
    unknown_permission_strategy,
    user_strategy,
)


@given(permission_strategy())
def test_permission_strategy_draws_members(permission: Permission) -> None:
    assert isinstance(permission, Permission)


@given(unknown_permission_strategy())
def test_unknown_strategy_never_draws_a_permission(value: object) -> None:
    assert Permission.parse(value) is None


@given(role_strategy(max_permissions=3))
def test_role_strategy_respects_bounds(role: Role) -> None:
    assert isinstance(role, Role)
    assert len(role.permissions) <= 3
    assert role.id


@given(user_strategy(max_roles=2))
def test_user_strategy_respects_bounds(user: User) -> None:
    assert isinstance(user, User)
    assert len(user.roles) <= 2
    assert all(isinstance(role, Role) for role in user.roles)
