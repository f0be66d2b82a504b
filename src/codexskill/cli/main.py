"""CLI interface for codex-skill using Typer."""

import asyncio
import json
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from codexskill.core.exceptions import SkillRegistryError
from codexskill.core.pipeline import SkillClient
from codexskill.utils.config import Config
from codexskill.utils.logging import setup_logging

T = TypeVar("T")

app = typer.Typer(
    name="codex-skill",
    help="Manage Codex skills from a registry.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a pipeline coroutine, turning pipeline errors into exit code 1."""
    try:
        return asyncio.run(coro)
    except (SkillRegistryError, OSError) as e:
        console.print(f"[red]{escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)


def _client(ctx: typer.Context) -> SkillClient:
    return SkillClient(ctx.obj["config"])


@app.callback()
def main(
    ctx: typer.Context,
    registry: Annotated[
        str | None,
        typer.Option("--registry", help="Registry index URL or file path"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log progress to the console")
    ] = False,
) -> None:
    """
    Manage Codex skills from a registry.

    The registry is taken from --registry, then $REGISTRY_URL, then a local
    codex-skills-registry checkout, then the public registry.
    """
    config = Config.load(registry=registry)
    try:
        setup_logging(config, console_output=verbose)
    except OSError as e:
        console.print(
            f"[red]Cannot write logs to {escape(str(config.logging_path))}: "
            f"{escape(str(e))}[/red]",
            soft_wrap=True,
        )
        raise typer.Exit(1)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@app.command("list")
def list_skills(ctx: typer.Context) -> None:
    """List skills from the registry."""
    skills = _run(_client(ctx).list_skills())
    for skill in skills:
        tags = f" [{', '.join(skill.tags)}]" if skill.tags else ""
        version = f" ({skill.latest})" if skill.latest else ""
        line = f"{skill.name}{version} — {skill.description or ''}{tags}".strip()
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@app.command()
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search query")],
) -> None:
    """Search skills by name, description, or tags."""
    results = _run(_client(ctx).search(query))
    if not results:
        console.print("No skills found.")
        return

    for skill in results:
        line = f"{skill.name} — {skill.description or ''}".strip()
        console.print(line, markup=False, highlight=False, soft_wrap=True)


@app.command()
def get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Skill name")],
) -> None:
    """Fetch a skill manifest."""
    manifest = _run(_client(ctx).get_manifest(name))
    data = manifest.model_dump(by_alias=True, exclude_none=True)
    console.print(
        json.dumps(data, indent=2),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


@app.command()
def install(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Skill name")],
    version: Annotated[
        str | None, typer.Option("--version", help="Specific version")
    ] = None,
    to: Annotated[
        Path | None,
        typer.Option("--to", help="Destination directory for skills"),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output artifact path (optional)"),
    ] = None,
) -> None:
    """Download and install a skill artifact."""
    config = Config.load(registry=ctx.obj["config"].registry, skills_path=to)
    result = _run(SkillClient(config).install(name, version=version, output=out))
    console.print(
        f"Installed {result.name} to {result.destination}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


if __name__ == "__main__":
    app()
