"""
Configuration System
====================

Type-safe defaults for translation options using Pydantic models.
"""

from .loader import (
    ConfigLoader,
    get_config,
    load_config,
    reset_config,
    resolve_options,
)
from .models import AgencyConfig

__all__ = [
    "AgencyConfig",
    "ConfigLoader",
    "get_config",
    "load_config",
    "reset_config",
    "resolve_options",
]
