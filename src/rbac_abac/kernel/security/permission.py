"""Kernel security – the closed Permission enumeration."""
from __future__ import annotations

from enum import Enum
from typing import Any


class Permission(str, Enum):
    """One allowed action on one resource type.

    Values are ``"<action>_<resource>"``. Members carry no ordering and no
    implication between each other: ``UPDATE_POST`` does not imply
    ``READ_POST``.
    """

    CREATE_COMMENT = "create_comment"
    READ_COMMENT = "read_comment"
    UPDATE_COMMENT = "update_comment"
    DELETE_COMMENT = "delete_comment"

    CREATE_POST = "create_post"
    READ_POST = "read_post"
    UPDATE_POST = "update_post"
    DELETE_POST = "delete_post"

    CREATE_USER = "create_user"
    READ_USER = "read_user"
    UPDATE_USER = "update_user"
    DELETE_USER = "delete_user"

    def __str__(self) -> str:
        return self.value

    @property
    def action(self) -> str:
        return self.value.split("_", 1)[0]

    @property
    def resource(self) -> str:
        return self.value.split("_", 1)[1]

    @classmethod
    def parse(cls, value: Any) -> Permission | None:
        """Return the member matching *value*, or ``None``.

        Accepts a member or a member's value. Never raises, not even for
        unhashable input.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


__all__ = ["Permission"]
