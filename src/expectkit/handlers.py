"""Turn a matcher's boolean result into success or a reported failure."""

from __future__ import annotations

import logging
from typing import Any, Callable

from expectkit.aggregation import notify_failure
from expectkit.config import configuration
from expectkit.errors import ExpectationNotMetError
from expectkit.matchers.probe import (
    description_of,
    expected_and_actual,
    failure_message_of,
    format_object,
    has_capability,
)
from expectkit.subject import Subject

logger = logging.getLogger(__name__)

Message = str | Callable[[], str] | None


def resolve_message(
    message: Any, matcher: Any, actual: Any, negated: bool = False
) -> str:
    """Resolve the failure message for a failed expectation.

    A caller-supplied string wins; a callable is invoked here, so only on the
    failure path. Without one, the matcher's own failure message is used,
    falling back to a message built from its description.
    """
    if message is not None:
        if isinstance(message, str):
            return message
        if callable(message):
            return str(message())
        if configuration().warn_on_invalid_message:
            logger.warning(
                f"Failure message should be a str or a callable returning one, "
                f"got {type(message).__name__}"
            )
        return str(message)

    from_matcher = failure_message_of(matcher, negated=negated)
    if from_matcher is not None:
        return from_matcher

    verb = "not to" if negated else "to"
    return f"expected {format_object(actual)} {verb} {description_of(matcher)}"


def _report(matcher: Any, message: Any, actual: Any, negated: bool) -> None:
    text = resolve_message(message, matcher, actual, negated=negated)
    expected, matcher_actual = expected_and_actual(matcher)
    logger.debug(f"Expectation not met: {text}")
    notify_failure(
        ExpectationNotMetError(
            text,
            expected=expected,
            actual=actual if matcher_actual is None else matcher_actual,
        )
    )


class PositiveExpectationHandler:
    """Handles ``to``: the expectation holds when the matcher matches."""

    @staticmethod
    def handle_matcher(subject: Subject, matcher: Any, message: Message = None) -> bool:
        __tracebackhide__ = True
        actual = subject.target
        match = bool(matcher.matches(actual))
        logger.debug(f"{type(matcher).__name__}.matches -> {match}")
        if match:
            return True
        _report(matcher, message, actual, negated=False)
        return False


class NegativeExpectationHandler:
    """Handles ``not_to``: the expectation holds when the matcher does not match."""

    @staticmethod
    def does_not_match(matcher: Any, actual: Any) -> bool:
        if has_capability(matcher, "does_not_match"):
            return bool(matcher.does_not_match(actual))
        return not matcher.matches(actual)

    @classmethod
    def handle_matcher(cls, subject: Subject, matcher: Any, message: Message = None) -> bool:
        __tracebackhide__ = True
        actual = subject.target
        match = not cls.does_not_match(matcher, actual)
        logger.debug(f"{type(matcher).__name__} negated match -> {match}")
        if not match:
            return False
        _report(matcher, message, actual, negated=True)
        return True
