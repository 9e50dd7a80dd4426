"""Telemetry and observability helpers.

This package emits deterministic run events for split-stage diagnostics.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
