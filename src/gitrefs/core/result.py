from __future__ import annotations

"""Value-style outcome of a gitrefs operation.

``Success`` wraps the operation's value; ``Failure`` carries the error kind,
message, diagnostic context and the wrapped cause. ``unwrap`` turns a failure
back into the matching typed exception.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

from gitrefs.errors import ErrorKind, GitRefsError, error_for

T = TypeVar('T')


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, exc: GitRefsError) -> 'Failure':
        return cls(kind=exc.kind, message=exc.message, context=dict(exc.context), cause=exc.cause)

    def to_error(self) -> GitRefsError:
        return error_for(self.kind, self.message, context=self.context, cause=self.cause)

    def unwrap(self) -> Any:
        raise self.to_error() from self.cause


Outcome = Union[Success[T], Failure]


def capture(fn: Callable[[], T]) -> 'Outcome[T]':
    """Run *fn* and fold a GitRefsError into a Failure.

    Errors outside the gitrefs taxonomy propagate unchanged.
    """
    try:
        return Success(fn())
    except GitRefsError as exc:
        return Failure.from_error(exc)
