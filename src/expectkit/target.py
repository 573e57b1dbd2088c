"""Wraps the subject of an expectation and dispatches it to a matcher."""

from __future__ import annotations

import logging
from typing import Any, Callable

from expectkit.errors import UsageError
from expectkit.handlers import (
    Message,
    NegativeExpectationHandler,
    PositiveExpectationHandler,
)
from expectkit.matchers.probe import description_of, supports_deferred_subject
from expectkit.subject import UNDEFINED, Subject

logger = logging.getLogger(__name__)


class ExpectationTarget:
    """Wraps the target of an expectation.

    Usage::

        expect(actual).to(eq(3))
        expect(actual).not_to(eq(3))
        expect(deferred=lambda: do_something()).to(raise_error(ValueError))

    Not meant to be instantiated directly, use `expect` instead. A target
    is single-use: build a new one for every expectation.
    """

    def __init__(self, value: Any = UNDEFINED, deferred: Callable[[], Any] | None = None):
        if value is UNDEFINED:
            if deferred is None:
                raise UsageError(
                    "You must pass either a value or a deferred callable to `expect`."
                )
            if not callable(deferred):
                raise UsageError(
                    f"The deferred subject passed to `expect` must be callable, "
                    f"got {type(deferred).__name__}."
                )
            self.subject = Subject.of_deferred(deferred)
        elif deferred is not None:
            raise UsageError(
                "You cannot pass both a value and a deferred callable to `expect`."
            )
        else:
            self.subject = Subject.of_value(value)

    @property
    def deferred(self) -> bool:
        return self.subject.deferred

    def to(self, matcher: Any = None, message: Message = None) -> bool:
        """Run the expectation, passing if ``matcher`` matches.

        Args:
            matcher: The matcher to evaluate the subject with.
            message: Message to use when the expectation fails, or a
                zero-argument callable producing it.

        Returns:
            True if the expectation succeeds (otherwise raises
            ExpectationNotMetError).
        """
        __tracebackhide__ = True
        self._check_matcher(matcher, "to")
        return PositiveExpectationHandler.handle_matcher(self.subject, matcher, message)

    def not_to(self, matcher: Any = None, message: Message = None) -> bool:
        """Run the expectation, passing if ``matcher`` does not match.

        Returns:
            False if the negative expectation succeeds (otherwise raises
            ExpectationNotMetError).
        """
        __tracebackhide__ = True
        self._check_matcher(matcher, "not_to")
        return NegativeExpectationHandler.handle_matcher(self.subject, matcher, message)

    to_not = not_to

    def _check_matcher(self, matcher: Any, verb: str) -> None:
        if self.subject.deferred:
            self._enforce_deferred_matcher(matcher)
        if matcher is None:
            raise UsageError(
                "The expect syntax does not support operator matchers, "
                f"so you must pass a matcher to `{verb}`."
            )

    @staticmethod
    def _enforce_deferred_matcher(matcher: Any) -> None:
        if supports_deferred_subject(matcher):
            return
        description = description_of(matcher)
        logger.debug(f"Rejected deferred subject for matcher {description}")
        raise UsageError(
            "You must pass a value rather than a deferred callable to use the "
            f"provided matcher ({description}), or the matcher must implement "
            "`supports_deferred_subject`."
        )

    def __repr__(self) -> str:
        kind = "deferred" if self.subject.deferred else "value"
        return f"<ExpectationTarget {kind}={self.subject.target!r}>"


def expect(value: Any = UNDEFINED, deferred: Callable[[], Any] | None = None) -> ExpectationTarget:
    """Entry point: wrap ``value`` (or a ``deferred`` callable) for matching.

    Usage::

        expect(3).to(eq(3))
        expect(deferred=lambda: 1 / 0).to(raise_error(ZeroDivisionError))
    """
    return ExpectationTarget(value, deferred)
