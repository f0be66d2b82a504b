"""Custom exceptions for codexskill."""


class SkillRegistryError(Exception):
    """Base class for every error raised by the install pipeline."""

    pass


class NotFoundError(SkillRegistryError):
    """A skill, version or local file doesn't exist."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"{kind.capitalize()} not found: {key}")
        self.kind = kind
        self.key = key


class FetchError(SkillRegistryError):
    """A remote source answered with a non-success status or was unreachable."""

    def __init__(self, source: str, status: int | None, reason: str | None = None):
        detail = status if status is not None else reason or "unreachable"
        super().__init__(f"Failed to fetch {source}: {detail}")
        self.source = source
        self.status = status


class ParseError(SkillRegistryError):
    """A registry document is malformed."""

    def __init__(self, source: str, cause: Exception):
        super().__init__(f"Failed to parse {source}: {cause}")
        self.source = source
        self.cause = cause


class IntegrityError(SkillRegistryError):
    """Artifact digest doesn't match the declared one."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"SHA256 mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class ConfigError(SkillRegistryError):
    """Registry documents don't describe a usable artifact."""

    pass


class MissingToolError(SkillRegistryError):
    """No extraction tool is available on this platform."""

    def __init__(self, tool: str):
        super().__init__(
            f"{tool} not found. Install {tool} or extract the .skill manually."
        )
        self.tool = tool


class ExtractionError(SkillRegistryError):
    """Extraction tool ran but exited non-zero."""

    def __init__(self, tool: str, exit_code: int | None):
        code = exit_code if exit_code is not None else "unknown"
        super().__init__(f"{tool} failed with code {code}")
        self.tool = tool
        self.exit_code = exit_code
