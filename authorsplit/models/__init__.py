"""Shared typed data models for authorsplit.

This package contains dataclasses used across split-stage modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import Document, Line, Location, Token

__all__ = ["Document", "Line", "Location", "Token"]
