"""Observability – structured logging helpers."""
from rbac_abac.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from rbac_abac.observability.logging.factory import JsonLoggerFactory
from rbac_abac.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
