"""Left-to-right composition of unary functions."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, ClassVar, Generic, TypeVar, overload

from .errors import ArityError
from .values import OperationInfo

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, eq=False, repr=False)
class Pipeline(Generic[A, B]):
    """A unary function threading its input through ``functions`` in order.

    Every function runs exactly once per call. Exceptions raised by any of
    them propagate unchanged and stop the chain.
    """

    functions: tuple[Callable[[Any], Any], ...]
    _fp_operation_kind: ClassVar[str] = "pipeline"

    def __post_init__(self) -> None:
        if not self.functions:
            raise ArityError("Pipeline needs at least one function", name="pipe", supplied=0)

    def __call__(self, value: A) -> B:
        result = self.functions[0](value)
        for fn in self.functions[1:]:
            result = fn(result)
        return result

    def __len__(self) -> int:
        return len(self.functions)

    def __repr__(self) -> str:
        names = ", ".join(getattr(fn, "__name__", type(fn).__name__) for fn in self.functions)
        return f"<pipe({names})>"

    def then(self, fn: Callable[[B], C]) -> "Pipeline[A, C]":
        return Pipeline(self.functions + (fn,))

    @property
    def info(self) -> OperationInfo:
        return OperationInfo(kind=self._fp_operation_kind, name="pipe", arity=1, captured=len(self.functions))


@overload
def pipe() -> Callable[..., Any]:
    ...


@overload
def pipe(f1: Callable[[A], B], /) -> Pipeline[A, B]:
    ...


@overload
def pipe(f1: Callable[[A], B], f2: Callable[[B], C], /) -> Pipeline[A, C]:
    ...


@overload
def pipe(f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], /) -> Pipeline[A, D]:
    ...


@overload
def pipe(
    f1: Callable[[A], B], f2: Callable[[B], C], f3: Callable[[C], D], f4: Callable[[D], E], /
) -> Pipeline[A, E]:
    ...


@overload
def pipe(
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    /,
) -> Pipeline[A, F]:
    ...


@overload
def pipe(*functions: Callable[[Any], Any]) -> Pipeline[Any, Any]:
    ...


def pipe(*functions):
    """Compose ``functions`` left to right; with no functions, return ``pipe``."""
    if not functions:
        return pipe
    logger.debug("pipe: composing %d functions", len(functions))
    return Pipeline(tuple(functions))
