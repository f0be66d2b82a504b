"""Shared test fixtures for codexskill test suite."""

import hashlib
import io
import json
import zipfile
from pathlib import Path

import pytest

from codexskill.utils.config import Config

SKILL_FILES = {
    "demo/SKILL.md": "---\nname: demo\n---\nDemo skill.\n",
    "demo/scripts/run.py": "print('demo')\n",
}


def build_skill_archive(files: dict[str, str]) -> bytes:
    """Zip ``files`` (archive name -> text) into .skill bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def write_registry(
    root: Path,
    archive: bytes,
    sha256: str | None = None,
    versions: tuple[str, ...] = ("1.0",),
    latest: str = "1.0",
) -> Path:
    """Write a local registry declaring skill "demo" and return index.json."""
    skill_dir = root / "demo"
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "v1.skill").write_bytes(archive)

    manifest = {
        "name": "demo",
        "description": "Demo skill",
        "install": {"type": "codex-skill", "notes": "Restart Codex"},
        "versions": [
            {
                "version": version,
                "releasedAt": "2024-01-01T00:00:00Z",
                "artifact": {"url": "demo/v1.skill", "sha256": sha256},
            }
            for version in versions
        ],
    }
    (skill_dir / "manifest.json").write_text(json.dumps(manifest))

    index = {
        "registry": "test-registry",
        "version": "1",
        "updatedAt": "2024-01-01T00:00:00Z",
        "skills": [
            {
                "name": "demo",
                "description": "Demo skill",
                "tags": ["example", "starter"],
                "latest": latest,
                "manifest": "demo/manifest.json",
            },
            {
                "name": "Formatter",
                "description": "Formats code",
                "tags": ["lint"],
                "latest": "0.2",
                "manifest": "formatter/manifest.json",
            },
        ],
    }
    index_path = root / "index.json"
    index_path.write_text(json.dumps(index))
    return index_path


@pytest.fixture
def make_registry():
    """Factory writing a local registry, see write_registry."""
    return write_registry


@pytest.fixture
def skill_archive() -> bytes:
    """A small .skill archive."""
    return build_skill_archive(SKILL_FILES)


@pytest.fixture
def registry_index(tmp_path: Path, skill_archive: bytes) -> Path:
    """Local registry with a correct digest for demo 1.0."""
    digest = hashlib.sha256(skill_archive).hexdigest()
    return write_registry(tmp_path / "registry", skill_archive, sha256=digest)


@pytest.fixture
def test_config(tmp_path: Path, registry_index: Path) -> Config:
    """Config pointing at the local registry with a tmp codex home."""
    codex_home = tmp_path / "codex-home"
    return Config(
        codex_home=codex_home,
        registry=str(registry_index),
        skills_path=codex_home / "skills",
        logging_path=codex_home / "logs",
    )
