"""Short link data models.

This module defines the ShortLinkRecord model stored in the record store,
along with the visit entries appended to it on every redirect.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer


def utcnow() -> datetime:
    """Current UTC time, truncated to the millisecond precision that is persisted."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """ISO 8601 in UTC with milliseconds and a Z suffix, e.g. 2024-11-20T08:30:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 1000:03d}Z"


class VisitEntry(BaseModel):
    """A single redirect through a short link."""

    ip: Optional[str] = Field(
        default=None,
        description="IP address of the visitor"
    )
    timestamp: datetime = Field(
        description="When the visit happened (UTC)"
    )

    @field_serializer("timestamp", when_used="json")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)


class ShortLinkRecord(BaseModel):
    """
    Mapping between a user-chosen short name and its target URL.

    Everything except the visit counter and the visit history is fixed at
    creation time. The counter is serialized as ``visits``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        description="Unique short name, also the key in the store"
    )
    target_url: str = Field(
        description="The original (long) URL to redirect to"
    )
    short_url: str = Field(
        description="Display form of the short link, base domain plus name"
    )
    created_at: datetime = Field(
        description="When the short link was created (UTC)"
    )
    created_by_ip: Optional[str] = Field(
        default=None,
        description="IP address of the client that created the link"
    )
    visit_count: int = Field(
        default=0,
        ge=0,
        alias="visits",
        description="Number of successful redirects"
    )
    visit_history: List[VisitEntry] = Field(
        default_factory=list,
        description="Redirect events in chronological order"
    )

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def create(
        cls,
        name: str,
        target_url: str,
        base_domain: str,
        client_ip: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "ShortLinkRecord":
        """Build a fresh record with no visits."""
        return cls(
            name=name,
            target_url=target_url,
            short_url=f"{base_domain}/{name}",
            created_at=created_at or utcnow(),
            created_by_ip=client_ip,
            visit_count=0,
            visit_history=[],
        )

    def record_visit(self, ip: Optional[str], when: Optional[datetime] = None) -> VisitEntry:
        """Count one redirect and append it to the history."""
        entry = VisitEntry(ip=ip, timestamp=when or utcnow())
        self.visit_count += 1
        self.visit_history.append(entry)
        return entry

    def to_json_dict(self) -> dict:
        """JSON-compatible dict using the persisted key names."""
        return self.model_dump(mode="json", by_alias=True)


# The whole store: short name -> record
LinkStore = Dict[str, ShortLinkRecord]

link_store_adapter = TypeAdapter(LinkStore)
