"""Pydantic models for coded values."""

from __future__ import annotations

from .property import CodedProperty

__all__ = [
    "CodedProperty",
]
