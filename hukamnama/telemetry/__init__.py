"""Telemetry and observability helpers.

This package emits deterministic stage events for CLI-observable runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
