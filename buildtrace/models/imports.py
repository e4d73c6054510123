"""Formats of externally produced data referenced by ImportData events."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class CoverageTool(str, Enum):
    """.NET coverage tools."""

    DOTCOVER = "dotcover"
    PARTCOVER = "partcover"
    NCOVER = "ncover"
    NCOVER3 = "ncover3"

    def __str__(self) -> str:
        return self.value


class NunitVersion(str, Enum):
    """NUnit result schema versions."""

    NUNIT = "nunit"
    NUNIT3 = "nunit3"


class ImportFormat(str, Enum):
    """Data formats known to build servers. Values are the canonical short names."""

    BUILD_ARTIFACT = "buildArtifact"
    DOTNET_DUP_FINDER = "DotNetDupFinder"
    PMD_CPD = "pmdCpd"
    PMD = "pmd"
    FXCOP = "FxCop"
    RESHARPER_INSPECT_CODE = "ReSharperInspectCode"
    JSLINT = "jslint"
    FIND_BUGS = "findBugs"
    CHECKSTYLE = "checkstyle"
    GTEST = "gtest"
    MSTEST = "mstest"
    SUREFIRE = "surefire"
    JUNIT = "junit"
    XUNIT = "xunit"
    NUNIT = "nunit"
    NUNIT3 = "nunit3"

    @classmethod
    def nunit(cls, version: NunitVersion) -> "ImportFormat":
        """Pick the NUnit format for a schema version."""
        if version is NunitVersion.NUNIT3:
            return cls.NUNIT3
        return cls.NUNIT

    @property
    def short_name(self) -> str:
        """Canonical name used by build servers."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DotNetCoverage:
    """Coverage report produced by one of the .NET coverage tools."""

    tool: CoverageTool

    @property
    def short_name(self) -> str:
        """Canonical name shared by every coverage tool."""
        return "dotNetCoverage"

    def __str__(self) -> str:
        return f"{self.short_name} ({self.tool})"


ImportKind = Union[ImportFormat, DotNetCoverage]
