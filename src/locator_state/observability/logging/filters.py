"""Observability – RedactSecretsProcessor."""
from __future__ import annotations

from typing import Any

#: Credential keys from :class:`LocatorSettings` and the map view.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"api_key", "map_api_key", "access_token", "mapbox_access_token"}
)

REDACTED = "[REDACTED]"


class RedactSecretsProcessor:
    """structlog processor masking credential values, nested dicts included.

    Must run after ``merge_contextvars`` so keys bound through
    ``bind_contextvars`` are masked too.
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(k.lower() for k in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._mask(event_dict)

    def _mask(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            k: REDACTED if k.lower() in self._fields
            else self._mask(v) if isinstance(v, dict)
            else v
            for k, v in data.items()
        }


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "RedactSecretsProcessor"]
