"""Call-shape dispatch and partial application.

An arity-dispatched operation inspects how many positional arguments a call
supplied and turns them into one of three call shapes:

* ``Empty``: no arguments, the operation answers with itself;
* ``Partial``: fewer arguments than the arity, the operation answers with a
  ``Closure`` over the supplied arguments;
* ``Full``: exactly the arity, the primitive runs.

The shapes are plain values, so a caller can also build one explicitly and
hand it to ``evaluate_call`` instead of relying on the count of ``*args``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Protocol, Union

from .errors import ArityError
from .values import OperationInfo


class CallShape(str, Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


@dataclass(frozen=True)
class Empty:
    shape: ClassVar[CallShape] = CallShape.EMPTY

    @property
    def args(self) -> tuple[object, ...]:
        return ()


@dataclass(frozen=True)
class Partial:
    args: tuple[object, ...]
    shape: ClassVar[CallShape] = CallShape.PARTIAL

    def __post_init__(self) -> None:
        if not self.args:
            raise ArityError("Partial call needs at least one argument")


@dataclass(frozen=True)
class Full:
    args: tuple[object, ...]
    shape: ClassVar[CallShape] = CallShape.FULL


Call = Union[Empty, Partial, Full]


class Dispatchable(Protocol):
    """What ``evaluate_call`` needs from an operation."""

    arity: int

    def bind(self, args: tuple[object, ...]) -> "Closure":
        ...

    def complete(self, args: tuple[object, ...]) -> object:
        ...


def classify_call(args: tuple[object, ...], *, arity: int, name: str = "operation") -> Call:
    supplied = len(args)
    if supplied > arity:
        raise ArityError.too_many(name, arity, supplied)
    if supplied == 0:
        return Empty()
    if supplied < arity:
        return Partial(tuple(args))
    return Full(tuple(args))


def evaluate_call(operation: Dispatchable, call: Call) -> object:
    """Evaluate an explicit call shape against ``operation``."""
    if isinstance(call, Empty):
        return operation
    if isinstance(call, Partial):
        if len(call.args) >= operation.arity:
            raise ArityError(
                f"Partial call with {len(call.args)} arguments does not fit arity {operation.arity}",
                arity=operation.arity,
                supplied=len(call.args),
            )
        return operation.bind(call.args)
    if isinstance(call, Full):
        if len(call.args) != operation.arity:
            raise ArityError(
                f"Full call with {len(call.args)} arguments does not fit arity {operation.arity}",
                arity=operation.arity,
                supplied=len(call.args),
            )
        return operation.complete(call.args)
    raise TypeError(f"evaluate_call() expects Empty, Partial or Full, got {type(call).__name__}")


@dataclass(frozen=True, eq=False, repr=False)
class ArityDispatched:
    """An n-ary primitive that answers calls with 0..n positional arguments."""

    name: str
    arity: int
    primitive: Callable[..., object]
    _fp_operation_kind: ClassVar[str] = "dispatched"

    def __post_init__(self) -> None:
        if self.arity < 1:
            raise ValueError("arity must be at least 1")
        object.__setattr__(self, "__name__", self.name)
        object.__setattr__(self, "__doc__", getattr(self.primitive, "__doc__", None))
        object.__setattr__(self, "__wrapped__", self.primitive)

    def __call__(self, *args: object) -> object:
        return evaluate_call(self, classify_call(args, arity=self.arity, name=self.name))

    def __repr__(self) -> str:
        return f"<{self.name}/{self.arity}>"

    def bind(self, args: tuple[object, ...]) -> "Closure":
        return Closure(operation=self, captured=tuple(args))

    def complete(self, args: tuple[object, ...]) -> object:
        return self.primitive(*args)

    @property
    def info(self) -> OperationInfo:
        return OperationInfo(kind=self._fp_operation_kind, name=self.name, arity=self.arity)


@dataclass(frozen=True, eq=False, repr=False)
class Closure:
    """Captured arguments of a partial call, waiting for the rest.

    Calling with the remaining arguments completes the original operation,
    calling with some of them captures more, and calling with none returns
    the closure itself.
    """

    operation: ArityDispatched
    captured: tuple[object, ...]
    _fp_operation_kind: ClassVar[str] = "closure"

    @property
    def arity(self) -> int:
        return self.operation.arity - len(self.captured)

    @property
    def name(self) -> str:
        return self.operation.name

    def __call__(self, *args: object) -> object:
        return evaluate_call(self, classify_call(args, arity=self.arity, name=self.name))

    def __repr__(self) -> str:
        return f"<{self.name}/{self.operation.arity} captured={len(self.captured)}>"

    def bind(self, args: tuple[object, ...]) -> "Closure":
        return Closure(operation=self.operation, captured=self.captured + tuple(args))

    def complete(self, args: tuple[object, ...]) -> object:
        return self.operation.complete(self.captured + tuple(args))

    @property
    def info(self) -> OperationInfo:
        return OperationInfo(
            kind=self._fp_operation_kind,
            name=self.name,
            arity=self.operation.arity,
            captured=len(self.captured),
        )


def arity_dispatched(arity: int) -> Callable[[Callable[..., object]], ArityDispatched]:
    """Decorate an ``arity``-ary primitive into an ``ArityDispatched`` operation."""

    def decorate(primitive: Callable[..., object]) -> ArityDispatched:
        return ArityDispatched(name=primitive.__name__, arity=arity, primitive=primitive)

    return decorate
