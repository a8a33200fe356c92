from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Case-directory file layout.

    Only file names live here. Anything that ends up inside the audit record
    (identity, fingerprint algorithm) is a fixed constructor argument of the
    pipeline, so the environment cannot change the rendered bytes.
    """

    model_config = SettingsConfigDict(env_prefix="VOJKER_", extra="ignore")

    input_filename: str = Field(default="golden_input.json", min_length=1)
    expected_filename: str = Field(default="expected_audit.json", min_length=1)
    actual_filename: str = Field(default="actual_audit.json", min_length=1)


def get_settings() -> Settings:
    return Settings()
