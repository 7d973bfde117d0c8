"""Kernel – framework-agnostic building blocks."""

from rbac_abac.kernel.errors import BaseError, DomainError, ValidationError

__all__ = [
    "BaseError",
    "DomainError",
    "ValidationError",
]
