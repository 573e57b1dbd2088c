from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class _Undefined:
    """Marks an argument that was not passed (``None`` is a valid value)."""

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


@dataclass(frozen=True)
class Subject:
    """The thing under test.

    Attributes:
        target: The value, or the zero-argument callable when ``deferred``.
        deferred: Whether ``target`` is a deferred computation the matcher
            is expected to invoke.
    """

    target: Any
    deferred: bool = False

    @classmethod
    def of_value(cls, value: Any) -> Subject:
        return cls(target=value, deferred=False)

    @classmethod
    def of_deferred(cls, block: Any) -> Subject:
        return cls(target=block, deferred=True)
