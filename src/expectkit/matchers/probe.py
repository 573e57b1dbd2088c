"""Lookup of optional matcher capabilities with safe defaults."""

from __future__ import annotations

from typing import Any

from expectkit.config import configuration

ELLIPSIS = "..."

_MISSING = object()


def _lookup(matcher: Any, name: str) -> Any:
    """Return ``matcher.<name>``, or ``_MISSING`` when the matcher lacks it.

    Only the lookup of ``name`` itself counts as absence. An AttributeError
    raised for some other attribute, or raised bare from inside a property,
    propagates. A bare AttributeError is read as absence only when the
    matcher's class defines ``__getattr__``, since hand-written lookups
    rarely set ``name``; a property of such a class raising one bare is
    indistinguishable and is treated as absent too.
    """
    try:
        return getattr(matcher, name)
    except AttributeError as exc:
        if exc.name == name and exc.obj is matcher:
            return _MISSING
        if exc.name is None and hasattr(type(matcher), "__getattr__"):
            return _MISSING
        raise


def _resolve(value: Any) -> Any:
    return value() if callable(value) else value


def has_capability(matcher: Any, name: str) -> bool:
    return _lookup(matcher, name) is not _MISSING


def format_object(obj: Any) -> str:
    """``repr(obj)``, shortened to ``max_formatted_output_length`` characters."""
    text = repr(obj)
    limit = configuration().max_formatted_output_length
    if limit is None or len(text) <= limit:
        return text
    head = limit // 2
    tail = limit - head
    return f"{text[:head]}{ELLIPSIS}{text[len(text) - tail:]}"


def supports_deferred_subject(matcher: Any) -> bool:
    value = _lookup(matcher, "supports_deferred_subject")
    if value is _MISSING:
        return False
    return bool(_resolve(value))


def description_of(matcher: Any) -> str:
    value = _lookup(matcher, "description")
    if value is _MISSING:
        return format_object(matcher)
    return str(_resolve(value))


def failure_message_of(matcher: Any, negated: bool = False) -> str | None:
    name = "failure_message_when_negated" if negated else "failure_message"
    value = _lookup(matcher, name)
    if value is _MISSING:
        return None
    message = _resolve(value)
    return None if message is None else str(message)


def expected_and_actual(matcher: Any) -> tuple[Any, Any]:
    """Return the matcher's ``expected`` and ``actual`` attributes, if any."""
    expected = _lookup(matcher, "expected")
    actual = _lookup(matcher, "actual")
    return (
        None if expected is _MISSING else expected,
        None if actual is _MISSING else actual,
    )
