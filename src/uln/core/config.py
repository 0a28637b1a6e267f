"""Package configuration using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class ULNSettings(BaseSettings):
    """Runtime settings. Only logging is configurable; validation has no tunables."""

    model_config = {"env_prefix": "ULN_"}

    log_level: str = "WARNING"
    log_json: bool = False
