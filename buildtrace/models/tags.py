"""Scope tags used to pair OpenTag/CloseTag events."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class KnownTag(ABC):
    """A named scope. Equal tags pair an OpenTag with its CloseTag."""

    name: str

    @property
    @abstractmethod
    def type(self) -> str:
        """Literal kind name shown in console output."""


@dataclass(frozen=True)
class Task(KnownTag):
    """A build task."""

    name: str

    @property
    def type(self) -> str:
        return "task"


@dataclass(frozen=True)
class Target(KnownTag):
    """A build target."""

    name: str

    @property
    def type(self) -> str:
        return "target"


@dataclass(frozen=True)
class Compilation(KnownTag):
    """A compiler invocation, named after the compiler."""

    name: str

    @property
    def type(self) -> str:
        return "compilation"


@dataclass(frozen=True)
class TestSuite(KnownTag):
    """A test suite run."""

    name: str

    @property
    def type(self) -> str:
        return "testsuite"


@dataclass(frozen=True)
class Test(KnownTag):
    """A single test."""

    name: str

    @property
    def type(self) -> str:
        return "test"


@dataclass(frozen=True)
class Other(KnownTag):
    """Any other scope, labelled by the caller."""

    type_label: str
    name: str

    @property
    def type(self) -> str:
        return self.type_label
