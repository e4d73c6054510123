"""Test outcome models carried by TestStatus events."""

from dataclasses import dataclass
from typing import Callable, Union

MessageMapper = Callable[[str], str]


@dataclass(frozen=True)
class TestIgnored:
    """The test was skipped."""

    message: str

    def map_message(self, f: MessageMapper) -> "TestIgnored":
        return TestIgnored(f(self.message))


@dataclass(frozen=True)
class TestFailed:
    """The test failed, optionally with an (expected, actual) pair."""

    message: str
    details: str
    expected_actual: tuple[str, str] | None = None

    def map_message(self, f: MessageMapper) -> "TestFailed":
        expected_actual = None
        if self.expected_actual is not None:
            expected, actual = self.expected_actual
            expected_actual = (f(expected), f(actual))
        return TestFailed(f(self.message), f(self.details), expected_actual)


TestOutcome = Union[TestIgnored, TestFailed]
