"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── DomainError          (domain.py)
        └── ValidationError
"""

from rbac_abac.kernel.errors.base import BaseError
from rbac_abac.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "BaseError",
    "DomainError",
    "ValidationError",
]
