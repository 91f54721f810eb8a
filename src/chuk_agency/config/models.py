"""
Configuration Models
====================

Type-safe Pydantic models for configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chuk_agency.core import TranslationOptions


class AgencyConfig(BaseModel):
    """Complete configuration for chuk-agency."""

    version: str = Field(default="1.0", description="Config version")
    options: TranslationOptions = Field(
        default_factory=TranslationOptions,
        description="Default options applied when a call passes none",
    )

    model_config = ConfigDict(frozen=True)
