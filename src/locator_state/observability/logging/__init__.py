"""Observability – structured logging helpers."""
from locator_state.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    REDACTED,
    RedactSecretsProcessor,
)
from locator_state.observability.logging.factory import JsonLoggerFactory
from locator_state.observability.logging.processors import (
    QueryContextProcessor,
    current_query_seq,
    get_logger,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "REDACTED",
    "JsonLoggerFactory",
    "QueryContextProcessor",
    "RedactSecretsProcessor",
    "current_query_seq",
    "get_logger",
]
