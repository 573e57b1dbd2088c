"""Error kinds raised by the expectation layer."""

from __future__ import annotations

from typing import Any


class UsageError(TypeError):
    """Raised when `expect` or a matcher is used incorrectly.

    Usage errors point at a bug in the test or in the matcher and are never
    collected by `aggregate_failures`.
    """


class ExpectationNotMetError(AssertionError):
    """Raised when a matcher's result is unfavourable for the chosen polarity.

    Subclasses ``AssertionError`` so test runners report it as a failed test
    rather than an error.

    Attributes:
        message: The resolved failure message.
        expected: The matcher's ``expected`` attribute, when it has one.
        actual: The matcher's ``actual`` attribute, when it has one.
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual


class MultipleExpectationsNotMetError(ExpectationNotMetError):
    """Raised when an aggregation block collected more than one failure."""

    def __init__(
        self, failures: list[ExpectationNotMetError], label: str | None = None
    ):
        self.failures = list(failures)
        self.label = label
        super().__init__(self._summary())

    def _summary(self) -> str:
        header = f"Got {len(self.failures)} failures"
        if self.label:
            header = f"{header} from failure aggregation block {self.label!r}"
        lines = [f"{header}:"]
        for index, failure in enumerate(self.failures, start=1):
            body = str(failure).replace("\n", "\n     ")
            lines.append(f"  {index}) {body}")
        return "\n".join(lines)
