"""Kernel security – Role and User value objects.

Both are frozen dataclasses. Sequences handed in by the caller are copied
into tuples on construction so a shared role can't be altered through a list
the caller still holds.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Any

from rbac_abac.kernel.errors.domain import ValidationError
from rbac_abac.kernel.security.permission import Permission
from rbac_abac.kernel.security.rbac import has_permission as _has_permission
from rbac_abac.observability.logging import get_logger

logger = get_logger(__name__)


def _as_tuple(value: Any, field: str, owner: str) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        logger.warning(f"{owner}.invalid", field=field, type=type(value).__name__)
        raise ValidationError(
            f"{owner}.{field} must be a sequence, got {type(value).__name__}",
            errors=[{"field": field, "message": "not a sequence"}],
        )
    return tuple(value)


@dataclasses.dataclass(frozen=True)
class Role:
    """A named, immutable bundle of permissions.

    ``permissions`` keeps caller order and duplicates; neither affects
    evaluation. Raw values such as ``"read_post"`` are coerced to
    :class:`Permission` members.
    """

    id: str
    name: str
    permissions: tuple[Permission, ...] = ()

    def __post_init__(self) -> None:
        raw = _as_tuple(self.permissions, "permissions", "role")
        coerced: list[Permission] = []
        errors: list[dict[str, Any]] = []
        for index, value in enumerate(raw):
            perm = Permission.parse(value)
            if perm is None:
                errors.append({"field": f"permissions[{index}]", "message": f"unknown permission {value!r}"})
            else:
                coerced.append(perm)
        if errors:
            logger.warning("role.invalid", role_id=self.id, errors=errors)
            raise ValidationError(f"Role {self.id!r} has unknown permissions", errors=errors)
        object.__setattr__(self, "permissions", tuple(coerced))

    def grants(self, permission: Any) -> bool:
        """Return ``True`` if this role alone grants *permission*."""
        return permission in self.permissions


@dataclasses.dataclass(frozen=True)
class User:
    """An identity holding zero or more roles.

    ``roles=None`` is treated as no roles. Roles are shared, not owned.
    """

    id: str
    email: str
    roles: tuple[Role, ...] = ()

    def __post_init__(self) -> None:
        roles = _as_tuple(self.roles, "roles", "user")
        errors = [
            {"field": f"roles[{index}]", "message": f"expected Role, got {type(role).__name__}"}
            for index, role in enumerate(roles)
            if not isinstance(role, Role)
        ]
        if errors:
            logger.warning("user.invalid", user_id=self.id, errors=errors)
            raise ValidationError(f"User {self.id!r} has invalid roles", errors=errors)
        object.__setattr__(self, "roles", roles)

    def has_permission(self, permission: Any) -> bool:
        return _has_permission(self, permission)


__all__ = ["Role", "User"]
