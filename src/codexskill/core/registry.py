"""Registry index and skill manifest models, with lookup and selection."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from codexskill.core.exceptions import ConfigError, NotFoundError, ParseError


class _Document(BaseModel):
    """Registry document model: camelCase or snake_case keys, extras ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_data(cls, data: Any, source: str):
        """
        Validate a parsed JSON document loaded from ``source``.

        Raises:
            ParseError: If the document doesn't match the model
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ParseError(source, e) from e


class ArtifactRef(_Document):
    """Where to download a skill archive and how to check it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str | None = None
    sha256: str | None = None
    entry: str | None = None


class IndexSkill(_Document):
    """A skill as listed in the registry index."""

    name: str
    description: str | None = None
    author: str | None = None
    tags: list[str] = Field(default_factory=list)
    compatibility: list[str] = Field(default_factory=list)
    latest: str
    artifact: ArtifactRef | None = None
    manifest: str


class RegistryIndex(_Document):
    """Top-level registry document."""

    registry: str
    version: str
    updated_at: str = Field(alias="updatedAt")
    skills: list[IndexSkill] = Field(default_factory=list)


class InstallHint(_Document):
    type: str
    destination: str | None = None
    notes: str | None = None


class ManifestVersion(_Document):
    version: str
    released_at: str = Field(alias="releasedAt")
    artifact: ArtifactRef | None = None


class SkillManifest(_Document):
    """Per-skill document listing every published version."""

    name: str
    version: str | None = None
    description: str | None = None
    author: str | None = None
    entry: str | None = None
    tags: list[str] = Field(default_factory=list)
    compatibility: list[str] = Field(default_factory=list)
    install: InstallHint | None = None
    versions: list[ManifestVersion] = Field(default_factory=list)


def find_skill(index: RegistryIndex, name: str) -> IndexSkill:
    """
    Find a skill by name, case-insensitively. First match wins.

    Raises:
        NotFoundError: If no skill has that name
    """
    normalized = name.strip().lower()
    for skill in index.skills:
        if skill.name.lower() == normalized:
            return skill
    raise NotFoundError("skill", name)


def search_skills(index: RegistryIndex, query: str) -> list[IndexSkill]:
    """Skills whose name, description or tags contain ``query`` (any case)."""
    needle = query.lower()
    results = []
    for skill in index.skills:
        haystack = " ".join([skill.name, skill.description or "", *skill.tags])
        if needle in haystack.lower():
            results.append(skill)
    return results


def select_version_entry(manifest: SkillManifest, version: str) -> ManifestVersion:
    """
    Find the manifest entry for an exact version string.

    Raises:
        NotFoundError: If the manifest doesn't list that version
    """
    for entry in manifest.versions:
        if entry.version == version:
            return entry
    raise NotFoundError("version", version)


def select_artifact(entry: ManifestVersion, skill: IndexSkill) -> ArtifactRef:
    """
    Pick the artifact for a version: its own first, then the skill default.

    Raises:
        ConfigError: If neither is declared or the chosen one has no url
    """
    artifact = entry.artifact if entry.artifact is not None else skill.artifact
    if artifact is None or not artifact.url:
        raise ConfigError("No artifact url available for this version.")
    return artifact
