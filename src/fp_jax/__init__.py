"""fp-jax public API."""

import logging

from .arity import (
    ArityDispatched,
    Call,
    CallShape,
    Closure,
    Empty,
    Full,
    Partial,
    arity_dispatched,
    classify_call,
    evaluate_call,
)
from .errors import ArityError, FnError
from .operations import add, filter, map, prop, reduce, subtract
from .pipeline import Pipeline, pipe
from .str_utils import (
    StringTransformer,
    str_invert_case,
    str_randomize,
    str_reverse,
    str_to_lower,
    str_to_upper,
)
from .values import OperationInfo, operation_info

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "map",
    "filter",
    "reduce",
    "add",
    "subtract",
    "prop",
    "pipe",
    "Pipeline",
    "ArityDispatched",
    "Closure",
    "arity_dispatched",
    "Call",
    "CallShape",
    "Empty",
    "Partial",
    "Full",
    "classify_call",
    "evaluate_call",
    "StringTransformer",
    "str_reverse",
    "str_to_lower",
    "str_to_upper",
    "str_randomize",
    "str_invert_case",
    "OperationInfo",
    "operation_info",
    "FnError",
    "ArityError",
]
