"""Structured error types for arity-dispatched operations."""

from __future__ import annotations


class FnError(Exception):
    """Base class for structured fp-jax errors."""


class ArityError(FnError, TypeError):
    """A call supplied arguments that do not fit the operation's arity.

    Raised for too many positional arguments and for explicit call-shape
    variants that disagree with the operation they are evaluated against.
    Type and value errors of the wrapped primitives are never translated
    into this class; they propagate as raised.
    """

    def __init__(self, message: str, *, name: str | None = None, arity: int | None = None, supplied: int | None = None) -> None:
        super().__init__(message)
        self.name = name
        self.arity = arity
        self.supplied = supplied

    @classmethod
    def too_many(cls, name: str, arity: int, supplied: int) -> "ArityError":
        return cls(
            f"{name}() takes at most {arity} arguments ({supplied} given)",
            name=name,
            arity=arity,
            supplied=supplied,
        )
