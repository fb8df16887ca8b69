"""Configuration for topology ID construction and extraction."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TopologyIDSettings(BaseSettings):
    """Settings model driven by environment variables.

    Environment variables are prefixed with ``TOPOID_``. For example, set
    ``TOPOID_STRICT_COMPONENTS=true`` to make node ID factories reject raw
    components that contain reserved delimiter characters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOPOID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    strict_components: bool = Field(
        default=False,
        description=(
            "Default strictness for NodeIDFactory instances created without an explicit "
            "strict flag. Strict factories raise InvalidComponentError instead of emitting "
            "IDs that cannot be parsed back."
        ),
    )
    log_malformed_ids: bool = Field(
        default=False,
        description=(
            "Emit a DEBUG record whenever an endpoint or address ID addresser is handed a "
            "node ID with the wrong number of fields. Off by default because graph builders "
            "routinely probe IDs of other kinds."
        ),
    )
    extra_reserved_characters: str = Field(
        default="",
        description=(
            "Additional characters rejected by strict component validation, for deployments "
            "that embed node IDs in formats reserving further separators."
        ),
    )

    @field_validator("extra_reserved_characters")
    @classmethod
    def _validate_extra_reserved(cls, value: str) -> str:
        cleaned = "".join(dict.fromkeys(value or ""))
        offending = sorted(char for char in cleaned if char.isalnum())
        if offending:
            raise ValueError(
                "TOPOID_EXTRA_RESERVED_CHARACTERS must not contain alphanumeric characters: "
                + ", ".join(offending)
            )
        return cleaned


@lru_cache(maxsize=1)
def get_settings() -> TopologyIDSettings:
    """Return a cached ``TopologyIDSettings`` instance."""

    return TopologyIDSettings()
