"""Collect expectation failures instead of stopping at the first one."""

from __future__ import annotations

import logging
import threading
from contextlib import ContextDecorator

from expectkit.errors import ExpectationNotMetError, MultipleExpectationsNotMetError

logger = logging.getLogger(__name__)

_state = threading.local()


def _active() -> list[aggregate_failures]:
    if not hasattr(_state, "stack"):
        _state.stack = []
    return _state.stack


def notify_failure(error: ExpectationNotMetError) -> None:
    """Raise ``error``, or hand it to the innermost active aggregation block."""
    stack = _active()
    if not stack:
        raise error
    stack[-1].failures.append(error)
    logger.debug(f"Aggregated failure #{len(stack[-1].failures)}: {error.message}")


class aggregate_failures(ContextDecorator):
    """Run a block of expectations and report every failure at the end.

    Usage::

        with aggregate_failures("response"):
            expect(status).to(eq(200))
            expect(body).to(include("ok"))

    One failure is re-raised unchanged; several are combined into a
    ``MultipleExpectationsNotMetError``. Usage errors and other exceptions
    are not collected.
    """

    def __init__(self, label: str | None = None) -> None:
        self.label = label
        self.failures: list[ExpectationNotMetError] = []

    def _recreate_cm(self) -> aggregate_failures:
        # Each call of a decorated function gets its own block.
        return type(self)(self.label)

    def __enter__(self) -> aggregate_failures:
        _active().append(self)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        stack = _active()
        stack.remove(self)
        failures = self.failures
        logger.debug(
            f"Aggregation block {self.label!r} collected {len(failures)} failure(s)"
        )

        if exc is not None:
            for index, failure in enumerate(failures, start=1):
                exc.add_note(f"Aggregated failure {index}: {failure.message}")
            return False

        if not failures:
            return False
        if len(failures) == 1:
            notify_failure(failures[0])
        else:
            notify_failure(MultipleExpectationsNotMetError(failures, self.label))
        return False
