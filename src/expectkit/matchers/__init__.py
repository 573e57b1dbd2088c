"""Matcher contract and capability probing."""

from expectkit.matchers.base import BaseMatcher, Matcher
from expectkit.matchers.probe import (
    description_of,
    failure_message_of,
    format_object,
    supports_deferred_subject,
)

__all__ = [
    "BaseMatcher",
    "Matcher",
    "description_of",
    "failure_message_of",
    "format_object",
    "supports_deferred_subject",
]
