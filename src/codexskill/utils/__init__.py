"""Utilities package."""

from codexskill.utils.config import (
    Config,
    resolve_registry_source,
    resolve_skills_destination,
)
from codexskill.utils.logging import setup_logging

__all__ = [
    "Config",
    "resolve_registry_source",
    "resolve_skills_destination",
    "setup_logging",
]
