"""Expectation targets and matcher dispatch for test assertions."""

from expectkit.aggregation import aggregate_failures
from expectkit.config import (
    ExpectationsConfig,
    configuration,
    configure,
    configure_logging,
    load_config,
    reset_configuration,
)
from expectkit.errors import (
    ExpectationNotMetError,
    MultipleExpectationsNotMetError,
    UsageError,
)
from expectkit.handlers import NegativeExpectationHandler, PositiveExpectationHandler
from expectkit.matchers import BaseMatcher, Matcher
from expectkit.subject import UNDEFINED, Subject
from expectkit.target import ExpectationTarget, expect

__all__ = [
    "UNDEFINED",
    "BaseMatcher",
    "ExpectationNotMetError",
    "ExpectationTarget",
    "ExpectationsConfig",
    "Matcher",
    "MultipleExpectationsNotMetError",
    "NegativeExpectationHandler",
    "PositiveExpectationHandler",
    "Subject",
    "UsageError",
    "aggregate_failures",
    "configuration",
    "configure",
    "configure_logging",
    "expect",
    "load_config",
    "reset_configuration",
]
