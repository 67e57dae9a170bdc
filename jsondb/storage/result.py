from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Outcome(Enum):
    VALUE = "value"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class Result:
    """Outcome of a store operation: a value, nothing, or a caught error.

    Lets callers decide whether "nothing found" and "store unreadable"
    should look the same to them, instead of catching exceptions.
    """

    outcome: Outcome
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value) -> "Result":
        return cls(Outcome.VALUE, value=value)

    @classmethod
    def empty(cls) -> "Result":
        return cls(Outcome.EMPTY)

    @classmethod
    def failed(cls, error: BaseException) -> "Result":
        return cls(Outcome.ERROR, error=error)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.VALUE

    @property
    def is_empty(self) -> bool:
        return self.outcome is Outcome.EMPTY

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.ERROR

    def unwrap_or(self, default):
        return self.value if self.is_ok else default

    def unwrap(self):
        """Return the value; re-raise the stored error; None when empty."""
        if self.is_error:
            raise self.error
        return self.value
