"""Configuration management for codexskill."""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_REGISTRY_URL = (
    "https://raw.githubusercontent.com/iluxu/codex-skills-registry/main/index.json"
)
REGISTRY_ENV = "REGISTRY_URL"
CODEX_HOME_ENV = "CODEX_HOME"


# ============================================================================
# Resolution Chains
# ============================================================================


def local_registry_candidates(cwd: Path) -> list[Path]:
    """Local checkouts of the registry probed before the default URL, in order."""
    return [
        cwd / "codex-skills-registry" / "index.json",
        cwd.parent / "codex-skills-registry" / "index.json",
        cwd / "repos" / "codex-skills-registry" / "index.json",
        cwd.parent / "repos" / "codex-skills-registry" / "index.json",
    ]


def resolve_registry_source(
    explicit: str | None,
    env_value: str | None,
    candidates: list[Path],
    default: str = DEFAULT_REGISTRY_URL,
) -> str:
    """
    Pick the registry source for this run.

    Priority: explicit override, environment override, first existing local
    candidate, default URL. Only existence checks touch the filesystem.

    Args:
        explicit: Value of the --registry option, if any
        env_value: Value of the REGISTRY_URL environment variable, if any
        candidates: Local index.json paths to probe, in priority order
        default: Fallback remote URL

    Returns:
        A URL or filesystem path
    """
    if explicit:
        return explicit
    if env_value:
        return env_value
    for candidate in candidates:
        if candidate.exists():
            return str(candidate)
    return default


def resolve_skills_destination(
    explicit: str | Path | None,
    codex_home: str | None,
    home: Path,
    cwd: Path,
) -> Path:
    """
    Pick the root directory skills are extracted into.

    Priority: explicit --to (relative to cwd), $CODEX_HOME/skills,
    ~/.codex/skills.
    """
    if explicit:
        return (cwd / explicit).resolve()
    if codex_home:
        return Path(codex_home) / "skills"
    return home / ".codex" / "skills"


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config(BaseModel):
    """
    Resolved configuration for one codex-skill invocation.

    Nothing is read from disk: the values are computed from command line
    overrides, the environment (REGISTRY_URL, CODEX_HOME) and existence
    probes of local registry checkouts.
    """

    codex_home: Path
    registry: str
    skills_path: Path
    logging_path: Path
    http_timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def load(
        cls,
        registry: str | None = None,
        skills_path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> "Config":
        """
        Build the configuration for this run.

        Args:
            registry: Explicit registry URL or path (--registry)
            skills_path: Explicit skills destination (--to)
            environ: Environment mapping. Defaults to os.environ
            cwd: Working directory. Defaults to Path.cwd()
            home: Home directory. Defaults to Path.home()

        Returns:
            Validated Config instance
        """
        environ = os.environ if environ is None else environ
        cwd = cwd or Path.cwd()
        home = home or Path.home()

        codex_home_env = environ.get(CODEX_HOME_ENV) or None
        codex_home = Path(codex_home_env) if codex_home_env else home / ".codex"

        return cls(
            codex_home=codex_home,
            registry=resolve_registry_source(
                registry,
                environ.get(REGISTRY_ENV),
                local_registry_candidates(cwd),
            ),
            skills_path=resolve_skills_destination(
                skills_path, codex_home_env, home, cwd
            ),
            logging_path=codex_home / "logs",
        )
