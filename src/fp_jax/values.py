"""Operation metadata and sequence packing for the functional core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import jax.numpy as jnp


class SequenceKind(str, Enum):
    LIST = "list"
    TUPLE = "tuple"
    ARRAY = "array"
    ITERABLE = "iterable"


@dataclass(frozen=True)
class OperationInfo:
    kind: str
    name: str | None
    arity: int | None
    captured: int = 0

    @property
    def remaining(self) -> int | None:
        if self.arity is None:
            return None
        return self.arity - self.captured


def operation_info(value: object) -> OperationInfo | None:
    if hasattr(value, "info"):
        info = getattr(value, "info")
        if isinstance(info, OperationInfo):
            return info

    if callable(value):
        name = getattr(value, "__name__", None)
        if not isinstance(name, str):
            name = None
        return OperationInfo(kind="callable", name=name, arity=None)
    return None


def is_array(value: object) -> bool:
    return isinstance(value, jnp.ndarray)


def sequence_kind(value: object) -> SequenceKind:
    if isinstance(value, list):
        return SequenceKind.LIST
    if isinstance(value, tuple):
        return SequenceKind.TUPLE
    if is_array(value):
        return SequenceKind.ARRAY
    return SequenceKind.ITERABLE


def pack_like(template: object, items: list[object]) -> object:
    """Build a new sequence of the same kind as ``template`` from ``items``.

    Lists and tuples keep their container type. Jax arrays are stacked back
    along axis 0 when every item is an array of one shape; an empty result
    keeps the template's dtype and trailing shape. Anything else (and arrays
    whose items cannot be stacked) becomes a plain list.
    """
    kind = sequence_kind(template)
    if kind is SequenceKind.TUPLE:
        return tuple(items)
    if kind is SequenceKind.ARRAY:
        if not items:
            return template[:0]
        if all(isinstance(x, jnp.ndarray) for x in items):
            first_shape = items[0].shape
            if all(x.shape == first_shape for x in items):
                return jnp.stack(items, axis=0)
    return list(items)
