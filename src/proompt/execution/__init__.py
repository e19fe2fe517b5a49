"""Execution: launch the external assistant CLI."""

from .executor import build_invocation, execute

__all__ = ["build_invocation", "execute"]
