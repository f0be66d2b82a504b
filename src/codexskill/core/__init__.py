"""Registry resolution and skill installation."""

from .exceptions import (
    ConfigError,
    ExtractionError,
    FetchError,
    IntegrityError,
    MissingToolError,
    NotFoundError,
    ParseError,
    SkillRegistryError,
)
from .fetcher import ContentFetcher
from .installer import ArchiveInstaller, ExtractionStrategy
from .pipeline import InstallResult, SkillClient
from .registry import (
    ArtifactRef,
    IndexSkill,
    ManifestVersion,
    RegistryIndex,
    SkillManifest,
)
from .source import SourceKind, classify_source, resolve_reference

__all__ = [
    "ArchiveInstaller",
    "ArtifactRef",
    "ConfigError",
    "ContentFetcher",
    "ExtractionError",
    "ExtractionStrategy",
    "FetchError",
    "IndexSkill",
    "InstallResult",
    "IntegrityError",
    "ManifestVersion",
    "MissingToolError",
    "NotFoundError",
    "ParseError",
    "RegistryIndex",
    "SkillClient",
    "SkillManifest",
    "SkillRegistryError",
    "SourceKind",
    "classify_source",
    "resolve_reference",
]
