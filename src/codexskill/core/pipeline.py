"""End-to-end flow: registry source to installed skill."""

import asyncio
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path

from codexskill.core.fetcher import ContentFetcher
from codexskill.core.installer import ArchiveInstaller
from codexskill.core.integrity import verify
from codexskill.core.registry import (
    IndexSkill,
    RegistryIndex,
    SkillManifest,
    find_skill,
    search_skills,
    select_artifact,
    select_version_entry,
)
from codexskill.core.source import resolve_reference
from codexskill.utils.config import Config

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    """What an install did."""

    name: str
    version: str
    artifact_path: Path
    destination: Path
    sha256: str


def create_temp_artifact_path(filename: str) -> Path:
    """Path for ``filename`` inside a fresh, uniquely named temp directory."""
    return Path(tempfile.mkdtemp(prefix="codex-skill-")) / filename


class SkillClient:
    """Read a skill registry and install skills from it."""

    def __init__(
        self,
        config: Config,
        fetcher: ContentFetcher | None = None,
        installer: ArchiveInstaller | None = None,
    ):
        self.config = config
        self.fetcher = fetcher or ContentFetcher(timeout=config.http_timeout)
        self.installer = installer or ArchiveInstaller()

    @property
    def registry_source(self) -> str:
        return self.config.registry

    async def load_index(self) -> RegistryIndex:
        logger.debug(f"Loading registry index from {self.registry_source}")
        data = await self.fetcher.load_json(self.registry_source)
        return RegistryIndex.from_data(data, self.registry_source)

    async def load_manifest(self, skill: IndexSkill) -> SkillManifest:
        source = resolve_reference(self.registry_source, skill.manifest)
        logger.debug(f"Loading manifest for {skill.name} from {source}")
        data = await self.fetcher.load_json(source)
        return SkillManifest.from_data(data, source)

    async def list_skills(self) -> list[IndexSkill]:
        index = await self.load_index()
        return index.skills

    async def search(self, query: str) -> list[IndexSkill]:
        index = await self.load_index()
        return search_skills(index, query)

    async def get_manifest(self, name: str) -> SkillManifest:
        index = await self.load_index()
        return await self.load_manifest(find_skill(index, name))

    async def install(
        self,
        name: str,
        version: str | None = None,
        destination: Path | None = None,
        output: Path | None = None,
    ) -> InstallResult:
        """
        Download, verify and extract a skill.

        Args:
            name: Skill name (case-insensitive)
            version: Exact version to install. Defaults to the skill's latest
            destination: Skills directory. Defaults to config.skills_path
            output: Where to keep the downloaded archive. Defaults to a fresh
                temp directory

        Returns:
            InstallResult describing the installed artifact

        Raises:
            SkillRegistryError: Any pipeline failure, raised immediately
        """
        index = await self.load_index()
        skill = find_skill(index, name)
        manifest = await self.load_manifest(skill)

        version = version or skill.latest
        entry = select_version_entry(manifest, version)
        artifact = select_artifact(entry, skill)

        artifact_source = resolve_reference(self.registry_source, artifact.url)
        logger.info(f"Downloading {skill.name} {version} from {artifact_source}")
        data = await self.fetcher.load_binary(artifact_source)
        digest = verify(data, artifact.sha256)

        artifact_path = (
            output.resolve()
            if output
            else create_temp_artifact_path(f"{skill.name}-{version}.skill")
        )
        await asyncio.to_thread(artifact_path.write_bytes, data)
        logger.debug(f"Wrote artifact to {artifact_path}")

        destination = destination or self.config.skills_path
        await self.installer.install(artifact_path, destination)
        logger.info(f"Installed {skill.name} {version} to {destination}")

        return InstallResult(
            name=skill.name,
            version=version,
            artifact_path=artifact_path,
            destination=destination,
            sha256=digest,
        )
