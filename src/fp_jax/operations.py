"""Arity-dispatched collection and arithmetic operations."""

from __future__ import annotations

import logging
import os
from typing import Callable, Final

import jax.numpy as jnp

from .arity import arity_dispatched
from .values import is_array, pack_like

logger = logging.getLogger(__name__)

_USE_FOLD_FAST_PATH: Final[bool] = os.environ.get("FP_JAX_DISABLE_FOLD_FAST_PATH", "0") != "1"
_NO_FAST_PATH: Final = object()


@arity_dispatched(2)
def map(transformer: Callable[[object], object], sequence):
    """
    2 arguments: a new sequence holding ``transformer`` applied to every
    element of ``sequence``, in order.

    1 argument: a closure which accepts the sequence.

    0 arguments: ``map`` itself.
    """
    return pack_like(sequence, [transformer(item) for item in sequence])


@arity_dispatched(2)
def filter(predicate: Callable[[object], object], sequence):
    """
    2 arguments: a new sequence holding the elements of ``sequence`` for
    which ``predicate`` is truthy, in order.

    1 argument: a closure which accepts the sequence.

    0 arguments: ``filter`` itself.
    """
    return pack_like(sequence, [item for item in sequence if predicate(item)])


@arity_dispatched(2)
def add(a, b):
    """
    2 arguments: ``a + b``.

    1 argument: a closure which expects ``b``.

    0 arguments: ``add`` itself.
    """
    return a + b


@arity_dispatched(2)
def subtract(a, b):
    """
    2 arguments: ``a - b``.

    1 argument: a closure which expects ``b``.

    0 arguments: ``subtract`` itself.
    """
    return a - b


@arity_dispatched(2)
def prop(obj, prop_name):
    """
    2 arguments: ``obj[prop_name]`` for subscriptable objects, otherwise the
    attribute ``prop_name`` of ``obj``.

    1 argument: a closure which expects ``prop_name``.

    0 arguments: ``prop`` itself.
    """
    if hasattr(type(obj), "__getitem__"):
        return obj[prop_name]
    return getattr(obj, prop_name)


def _init_keeps_dtype(initial_value, dtype) -> bool:
    if isinstance(initial_value, bool):
        return False
    if isinstance(initial_value, int):
        return True
    return is_array(initial_value) and initial_value.dtype == dtype


def _fast_fold_array(reducer, initial_value, sequence):
    if not _USE_FOLD_FAST_PATH:
        return _NO_FAST_PATH
    if reducer is not add and reducer is not subtract:
        return _NO_FAST_PATH
    if not is_array(sequence) or sequence.ndim < 1 or sequence.shape[0] == 0:
        return _NO_FAST_PATH
    # Wrapping integer sums are order independent; float and promoting folds are not.
    if not jnp.issubdtype(sequence.dtype, jnp.integer):
        return _NO_FAST_PATH
    if not _init_keeps_dtype(initial_value, sequence.dtype):
        return _NO_FAST_PATH

    total = jnp.sum(sequence, axis=0, dtype=sequence.dtype)
    logger.debug("reduce: %s fold fast path over shape %s", reducer.name, tuple(sequence.shape))
    if reducer is add:
        return initial_value + total
    return initial_value - total


@arity_dispatched(3)
def reduce(reducer: Callable[[object, object], object], initial_value, sequence):
    """
    3 arguments: folds ``sequence`` left to right with ``reducer`` starting
    from ``initial_value`` and returns the final accumulator. An empty
    sequence gives back ``initial_value`` unchanged.

    2 arguments: a closure which expects the sequence.

    1 argument: a closure which, called with ``(initial_value, sequence)``
    folds, called with ``(initial_value)`` returns a closure expecting the
    sequence, and called with nothing returns itself.

    0 arguments: ``reduce`` itself.
    """
    fast = _fast_fold_array(reducer, initial_value, sequence)
    if fast is not _NO_FAST_PATH:
        return fast

    accumulator = initial_value
    for item in sequence:
        accumulator = reducer(accumulator, item)
    return accumulator
