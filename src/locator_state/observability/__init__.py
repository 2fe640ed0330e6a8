"""Observability – structured logging for the coordinator."""
