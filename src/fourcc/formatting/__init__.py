"""Descriptive formatting for coded properties and errors."""

from __future__ import annotations

from .config import DEFAULT_OPTIONS, DescribeOptions
from .describe import describe

__all__ = [
    "describe",
    "DescribeOptions",
    "DEFAULT_OPTIONS",
]
