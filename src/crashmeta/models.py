"""Read-only metadata snapshots handed to report serialization."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserMetadataSnapshot(BaseModel):
    """Point-in-time copy of the user id and custom attributes.

    Later writes to the originating store are not reflected here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_id: str | None = None
    custom_keys: dict[str, str] = Field(default_factory=dict)
