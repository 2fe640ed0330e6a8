"""Kernel – errors and geo primitives shared by every layer."""
