"""String transformers, each a pure ``str -> str`` function."""

from __future__ import annotations

import random
from typing import Callable

StringTransformer = Callable[[str], str]


def str_reverse(value: str) -> str:
    return value[::-1]


def str_to_lower(value: str) -> str:
    return value.lower()


def str_to_upper(value: str) -> str:
    return value.upper()


def str_randomize(value: str) -> str:
    """Return the characters of ``value`` in a random order."""
    return "".join(random.sample(value, len(value)))


def str_invert_case(value: str) -> str:
    return value.swapcase()
