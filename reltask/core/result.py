"""Result type for explicit error handling.

Every step of a release task returns a Result instead of raising, so the
caller decides how a collaborator failure is presented and which exit code
it maps to. Results are consumed with pattern matching or isinstance.

Usage:
    match repo.checkout("HEAD", "CHANGELOG.md"):
        case Ok(_):
            ...
        case Err(error):
            print(f"checkout failed: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
