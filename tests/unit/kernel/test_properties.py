"""Property-based tests for permission evaluation (hypothesis)."""

from __future__ import annotations

import dataclasses

from hypothesis import given
from hypothesis import strategies as st

from rbac_abac import Permission, Role, User, effective_permissions, has_permission
from rbac_abac.testing import (
    permission_strategy,
    role_strategy,
    unknown_permission_strategy,
    user_strategy,
)


@given(user_strategy(), permission_strategy())
def test_granted_iff_some_role_lists_it(user: User, permission: Permission) -> None:
    expected = any(permission in role.permissions for role in user.roles)
    assert has_permission(user, permission) is expected


@given(user_strategy(), permission_strategy())
def test_agrees_with_effective_permissions(user: User, permission: Permission) -> None:
    assert has_permission(user, permission) is (permission in effective_permissions(user))


@given(permission_strategy())
def test_no_roles_grants_nothing(permission: Permission) -> None:
    user = User(id="u", email="u@example.com", roles=())
    assert has_permission(user, permission) is False


@given(user_strategy(), unknown_permission_strategy())
def test_unknown_values_are_never_granted(user: User, value: object) -> None:
    assert has_permission(user, value) is False


@given(user_strategy(), permission_strategy(), st.data())
def test_duplicating_a_role_changes_nothing(user: User, permission: Permission, data: st.DataObject) -> None:
    before = has_permission(user, permission)
    if user.roles:
        extra = data.draw(st.sampled_from(user.roles))
        user = dataclasses.replace(user, roles=user.roles + (extra,))
    assert has_permission(user, permission) is before


@given(role_strategy(), permission_strategy())
def test_duplicating_permissions_changes_nothing(role: Role, asked: Permission) -> None:
    user = User(id="u", email="u@example.com", roles=(role,))
    doubled = dataclasses.replace(role, permissions=role.permissions + role.permissions)
    other = User(id="u", email="u@example.com", roles=(doubled,))
    assert has_permission(other, asked) is has_permission(user, asked)


@given(st.lists(permission_strategy(), max_size=6), st.lists(permission_strategy(), max_size=6))
def test_two_role_union(first: list[Permission], second: list[Permission]) -> None:
    user = User(
        id="u",
        email="u@example.com",
        roles=(
            Role(id="r1", name="R1", permissions=tuple(first)),
            Role(id="r2", name="R2", permissions=tuple(second)),
        ),
    )
    granted = set(first) | set(second)
    for permission in Permission:
        assert has_permission(user, permission) is (permission in granted)
