"""Observability – structlog processors and get_logger helper.

QueryContextProcessor – injects the in-flight query sequence number.
get_logger(name) – returns a bound structlog logger.
"""
from __future__ import annotations

import contextvars
from typing import Any

import structlog

#: Sequence number of the vertical query currently executing in this task.
current_query_seq: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "current_query_seq", default=None
)


class QueryContextProcessor:
    """structlog processor that adds ``query_seq`` while a query is in flight.

    The executor sets :data:`current_query_seq` around each execution; since
    every execution runs in its own task context, overlapping queries log
    their own sequence numbers.

    Usage::

        import structlog
        from locator_state.observability.logging.processors import QueryContextProcessor

        structlog.configure(processors=[QueryContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        seq = current_query_seq.get()
        if seq is not None:
            event_dict.setdefault("query_seq", seq)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["QueryContextProcessor", "current_query_seq", "get_logger"]
