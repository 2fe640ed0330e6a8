"""Root of the locator-state error hierarchy."""

from __future__ import annotations

from typing import Any


class LocatorError(Exception):
    """Every error raised by this package.

    ``code`` is a stable slug for log lines; ``detail`` carries the values a
    log reader needs (field ids, vertical, setting name).  Chain the
    triggering exception with ``raise ... from exc``.
    """

    default_code: str = "locator_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flat payload suitable as structlog keyword arguments."""
        return {"code": self.code, "message": self.message, **self.detail}


__all__ = ["LocatorError"]
