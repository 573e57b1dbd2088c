"""The contract a matcher must satisfy."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from expectkit.matchers.probe import format_object


@runtime_checkable
class Matcher(Protocol):
    """Minimal matcher: evaluates a subject and returns a boolean.

    Optional capabilities, looked up on the matcher when needed:

    - ``does_not_match(actual)``: used by ``not_to`` instead of negating
      ``matches``.
    - ``supports_deferred_subject``: true when the matcher expects a
      zero-argument callable as its subject.
    - ``description``: short human-readable description of the matcher.
    - ``failure_message`` / ``failure_message_when_negated``: messages used
      when ``to`` / ``not_to`` fail.

    Each optional capability can be a method taking no arguments or a plain
    attribute.
    """

    def matches(self, actual: Any) -> bool: ...


class BaseMatcher:
    """Convenience base class implementing every optional capability.

    Subclasses override ``match`` (and ``description`` if the class name is
    not descriptive enough). ``matches`` stores ``actual`` so failure
    messages can reference it.
    """

    expected: Any = None
    actual: Any = None

    def __init__(self, expected: Any = None) -> None:
        self.expected = expected

    def match(self, expected: Any, actual: Any) -> bool:
        raise NotImplementedError

    def matches(self, actual: Any) -> bool:
        self.actual = actual
        return bool(self.match(self.expected, actual))

    def supports_deferred_subject(self) -> bool:
        return False

    def description(self) -> str:
        words = []
        for char in type(self).__name__:
            if char.isupper() and words:
                words.append(" ")
            words.append(char.lower())
        text = "".join(words)
        if self.expected is not None:
            text = f"{text} {format_object(self.expected)}"
        return text

    def failure_message(self) -> str:
        return f"expected {format_object(self.actual)} to {self.description()}"

    def failure_message_when_negated(self) -> str:
        return f"expected {format_object(self.actual)} not to {self.description()}"
