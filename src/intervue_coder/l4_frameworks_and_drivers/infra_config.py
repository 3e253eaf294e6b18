"""Infrastructure settings — file location, probe endpoints, timeout. Lives in L4, not domain."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from intervue_coder.l2_use_cases.validate_credential_use_case import (
    DEFAULT_PROBE_TIMEOUT,
    OPENAI_BASE_URL,
    OPENROUTER_BASE_URL,
)


class InfraConfig(BaseModel):
    """Groups all environment-specific settings outside the domain layer."""

    config_path: Path | None = None  # None → per-user config dir
    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)
    openai_base_url: str = OPENAI_BASE_URL
    openrouter_base_url: str = OPENROUTER_BASE_URL


def build_infra_config(overrides: dict) -> InfraConfig:
    """Validate *overrides* on top of defaults. None values mean "not given"."""
    return InfraConfig.model_validate({k: v for k, v in overrides.items() if v is not None})
