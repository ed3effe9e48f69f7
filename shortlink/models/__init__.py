"""
Data models for the URL shortener application.

This module exports all pydantic models used in the application.
"""

from shortlink.models.link import (
    LinkStore,
    ShortLinkRecord,
    VisitEntry,
    link_store_adapter,
    utcnow,
)

__all__ = [
    "LinkStore",
    "ShortLinkRecord",
    "VisitEntry",
    "link_store_adapter",
    "utcnow",
]
