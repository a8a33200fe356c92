from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AuditIdentity(BaseModel):
    """Pack and engine identity embedded in every audit record."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pack_name: str = Field(min_length=1)
    pack_version: str = Field(min_length=1)
    engine_name: str = Field(min_length=1)
    engine_version: str = Field(min_length=1)


# Part of the audit bytes; never sourced from the environment
DEFAULT_IDENTITY = AuditIdentity(
    pack_name="trade.demo",
    pack_version="1.0.0",
    engine_name="vojker-py-ref",
    engine_version="1.0.0",
)

DEFAULT_FINGERPRINT_ALGORITHM = "sha256"
