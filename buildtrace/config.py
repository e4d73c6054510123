"""Environment-driven configuration for build tracing."""

import os
from enum import Enum
from pathlib import Path
from typing import Literal, Union

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

PathLike = Union[str, Path]


class BuildServer(str, Enum):
    """Build servers the process may be hosted by."""

    LOCAL = "local"
    CCNET = "ccnet"
    APPVEYOR = "appveyor"
    TEAMCITY = "teamcity"
    TEAMFOUNDATION = "teamfoundation"
    JENKINS = "jenkins"
    TRAVIS = "travis"
    GITLAB_CI = "gitlabci"
    GITHUB_ACTIONS = "githubactions"
    BITBUCKET = "bitbucket"
    AZURE_DEVOPS = "azuredevops"


# Writing to stderr on these servers fails the build.
STDERR_UNSAFE_SERVERS = frozenset(
    {
        BuildServer.CCNET,
        BuildServer.APPVEYOR,
        BuildServer.TEAMCITY,
        BuildServer.TEAMFOUNDATION,
    }
)


def important_messages_to_stderr(server: BuildServer) -> bool:
    """Whether important and error messages may go to stderr on this server."""
    return server not in STDERR_UNSAFE_SERVERS


class TraceSettings(BaseModel):
    """Settings read from the environment."""

    build_server: BuildServer = BuildServer.LOCAL
    colors: Literal["auto", "always", "never"] = "auto"
    log_level: str = "INFO"
    log_file: Path | None = None

    @field_validator("build_server", mode="before")
    @classmethod
    def _normalize_server(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower().replace("-", "").replace("_", "")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def important_messages_to_stderr(self) -> bool:
        return important_messages_to_stderr(self.build_server)


def load_settings(env_file: PathLike | None = None) -> TraceSettings:
    """Build settings from environment variables, loading env_file first if given."""
    if env_file is not None:
        load_dotenv(env_file)

    values: dict[str, str] = {}
    for field, var in (
        ("build_server", "BUILD_SERVER"),
        ("colors", "TRACE_COLORS"),
        ("log_level", "LOG_LEVEL"),
        ("log_file", "LOG_FILE"),
    ):
        raw = os.getenv(var)
        if raw:
            values[field] = raw
    return TraceSettings(**values)
