"""Domain errors – filter-set rule violations."""

from __future__ import annotations

from locator_state.kernel.errors.base import LocatorError


class DomainError(LocatorError):
    """Raised when coordinator state would break one of its rules."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """E.g. a second ``builtin.location`` filter entering the active set."""

    default_code = "invariant_violation"


__all__ = ["DomainError", "InvariantViolationError"]
