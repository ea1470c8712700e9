"""
SQLModel table definitions for the harbor.

Resources hold their capacity; ships reference the resource they occupy
through a nullable foreign key. The capacity rule itself is enforced by the
application layer, not by the schema.
"""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedModel(SQLModel):
    """Base model with timestamp fields."""

    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime | None = None


class ResourceRow(TimestampedModel, table=True):
    """Dock and hauler table definition."""

    __tablename__ = "resources"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    location: str | None = Field(default=None, max_length=100)
    kind: str = Field(default="dock", max_length=20, index=True)
    capacity: int = Field(ge=1)


class ShipRow(TimestampedModel, table=True):
    """Ship table definition."""

    __tablename__ = "ships"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    type: str = Field(max_length=100)
    resource_id: int | None = Field(
        default=None, foreign_key="resources.id", index=True
    )
