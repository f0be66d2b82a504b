"""Extract skill archives with the platform's unzip tooling."""

import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from codexskill.core.exceptions import ExtractionError, MissingToolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionStrategy:
    """An external extraction tool and how to invoke it."""

    tool: str
    is_available: Callable[[str], bool]
    build_command: Callable[[Path, Path], list[str]]


def escape_powershell(value: str) -> str:
    """Escape a value for a single-quoted PowerShell string."""
    return value.replace("'", "''")


def _unzip_command(archive: Path, destination: Path) -> list[str]:
    # -o overwrites existing files without prompting
    return ["unzip", "-o", str(archive), "-d", str(destination)]


def _powershell_command(archive: Path, destination: Path) -> list[str]:
    script = " ".join(
        [
            "Expand-Archive",
            "-LiteralPath",
            f"'{escape_powershell(str(archive))}'",
            "-DestinationPath",
            f"'{escape_powershell(str(destination))}'",
            "-Force",
        ]
    )
    return ["powershell", "-NoProfile", "-Command", script]


UNZIP = ExtractionStrategy(
    tool="unzip",
    is_available=lambda platform: True,
    build_command=_unzip_command,
)

POWERSHELL = ExtractionStrategy(
    tool="powershell",
    is_available=lambda platform: platform == "win32",
    build_command=_powershell_command,
)

DEFAULT_STRATEGIES = (UNZIP, POWERSHELL)


class ToolNotFound(Exception):
    """The executable for a strategy isn't installed."""


async def run_command(command: list[str]) -> int:
    """
    Run a command with inherited stdio and wait for it.

    Returns:
        The process exit code

    Raises:
        ToolNotFound: If the executable can't be found
    """
    try:
        process = await asyncio.create_subprocess_exec(*command)
    except FileNotFoundError as e:
        raise ToolNotFound(command[0]) from e
    return await process.wait()


class ArchiveInstaller:
    """Extract .skill (zip) archives into a destination directory.

    Strategies are tried in order. A strategy that doesn't apply to the
    platform, or whose executable is missing, hands over to the next one.
    Any other failure stops the install.
    """

    def __init__(
        self,
        strategies: tuple[ExtractionStrategy, ...] | None = None,
        platform: str | None = None,
    ):
        self.strategies = strategies if strategies is not None else DEFAULT_STRATEGIES
        self.platform = platform or sys.platform

    async def install(self, archive_path: Path, destination: Path) -> None:
        """Extract ``archive_path`` into ``destination``, overwriting files.

        Args:
            archive_path: Path to the downloaded archive
            destination: Directory to extract into (created if missing)

        Raises:
            ExtractionError: If a tool ran and exited non-zero
            MissingToolError: If no strategy could run on this platform
        """
        destination.mkdir(parents=True, exist_ok=True)

        for strategy in self.strategies:
            if not strategy.is_available(self.platform):
                continue

            command = strategy.build_command(archive_path, destination)
            logger.debug(f"Extracting with {strategy.tool}: {command}")
            try:
                exit_code = await run_command(command)
            except ToolNotFound:
                logger.warning(f"{strategy.tool} not found, trying next strategy")
                continue

            if exit_code != 0:
                raise ExtractionError(strategy.tool, exit_code)
            logger.info(f"Extracted {archive_path} to {destination}")
            return

        primary = self.strategies[0].tool if self.strategies else "unzip"
        raise MissingToolError(primary)
