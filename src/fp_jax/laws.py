"""Executable partial-application and composition laws with report helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import string
from typing import Callable, Iterator, Sequence

import jax.numpy as jnp

from .pipeline import Pipeline, pipe
from .values import is_array

logger = logging.getLogger(__name__)

Equality = Callable[[object, object], bool]


@dataclass(frozen=True)
class LawCheck:
    operation: str
    law: str
    call: str
    passed: bool
    detail: str | None = None


@dataclass(frozen=True)
class LawSummary:
    name: str
    checks: int
    passed: int
    failed: int
    pass_rate: float | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status in {"pass", "empty"}


def values_equal(left: object, right: object) -> bool:
    if is_array(left) or is_array(right):
        return bool(jnp.array_equal(jnp.asarray(left), jnp.asarray(right)))
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if type(left) is not type(right) or len(left) != len(right):
            return False
        return all(values_equal(l_item, r_item) for l_item, r_item in zip(left, right, strict=True))
    return bool(left == right)


def _compositions(n: int) -> Iterator[tuple[int, ...]]:
    """Every ordered split of ``n`` arguments into non-empty call groups."""
    if n == 0:
        yield ()
        return
    for first in range(n, 0, -1):
        for rest in _compositions(n - first):
            yield (first,) + rest


def _operation_name(operation: object) -> str:
    name = getattr(operation, "__name__", None)
    return name if isinstance(name, str) else "f"


def application_shapes(
    operation: Callable[..., object],
    args: Sequence[object],
    *,
    names: Sequence[str] | None = None,
) -> dict[str, object]:
    """Apply ``args`` to ``operation`` in every supported call shape.

    Keys are readable call labels such as ``reduce(a)(b, c)``; the first key
    is always the direct full call. A leading empty call ``op()(...)`` is
    included as the last entry.
    """
    args = tuple(args)
    name = _operation_name(operation)
    if names is None:
        names = tuple(string.ascii_lowercase[: len(args)])
    if len(names) != len(args):
        raise ValueError("names must label every argument")

    shapes: dict[str, object] = {}
    for sizes in _compositions(len(args)):
        fn = operation
        label = name
        offset = 0
        for size in sizes:
            label += "(" + ", ".join(names[offset : offset + size]) + ")"
            fn = fn(*args[offset : offset + size])
            offset += size
        shapes[label] = fn
    shapes[f"{name}()({', '.join(names)})"] = operation()(*args)
    return shapes


def check_partial_application(
    operation: Callable[..., object],
    args: Sequence[object],
    *,
    names: Sequence[str] | None = None,
    equal: Equality = values_equal,
) -> list[LawCheck]:
    name = _operation_name(operation)
    checks = [
        LawCheck(
            operation=name,
            law="self_reference",
            call=f"{name}()",
            passed=operation() is operation,
        )
    ]
    shapes = application_shapes(operation, args, names=names)
    labels = list(shapes)
    direct_label = labels[0]
    direct = shapes[direct_label]
    for label in labels[1:]:
        got = shapes[label]
        passed = equal(got, direct)
        checks.append(
            LawCheck(
                operation=name,
                law="partial_application",
                call=label,
                passed=passed,
                detail=None if passed else f"{label} gave {got!r}, {direct_label} gave {direct!r}",
            )
        )
    return checks


def check_pipe_composition(
    functions: Sequence[Callable[[object], object]],
    value: object,
    *,
    equal: Equality = values_equal,
) -> list[LawCheck]:
    if not functions:
        raise ValueError("check_pipe_composition needs at least one function")

    checks = [LawCheck(operation="pipe", law="self_reference", call="pipe()", passed=pipe() is pipe)]

    nested = value
    for fn in functions:
        nested = fn(nested)
    piped = pipe(*functions)(value)
    passed = equal(piped, nested)
    checks.append(
        LawCheck(
            operation="pipe",
            law="composition",
            call=f"pipe(<{len(functions)} functions>)(x)",
            passed=passed,
            detail=None if passed else f"pipe gave {piped!r}, nested application gave {nested!r}",
        )
    )

    first = functions[0]
    single = pipe(first)(value)
    expected = first(value)
    checks.append(
        LawCheck(
            operation="pipe",
            law="single_function",
            call="pipe(f)(x)",
            passed=equal(single, expected),
        )
    )

    built: Pipeline = pipe(first)
    for fn in functions[1:]:
        built = built.then(fn)
    checks.append(
        LawCheck(
            operation="pipe",
            law="builder",
            call="pipe(f).then(...)(x)",
            passed=equal(built(value), nested),
        )
    )
    return checks


def summarize(name: str, checks: list[LawCheck]) -> LawSummary:
    total = len(checks)
    passed = sum(1 for check in checks if check.passed)
    failed = total - passed
    pass_rate = None if total == 0 else (passed / total) * 100.0
    status = "fail" if failed else ("empty" if total == 0 else "pass")
    summary = LawSummary(
        name=name,
        checks=total,
        passed=passed,
        failed=failed,
        pass_rate=pass_rate,
        status=status,
    )
    logger.debug("laws %s: %d/%d passed", name, passed, total)
    return summary


def checks_to_markdown_table(checks: list[LawCheck]) -> str:
    lines = [
        "| Operation | Law | Call | Status |",
        "|---|---|---|---|",
    ]
    for check in checks:
        status = "pass" if check.passed else "fail"
        lines.append(f"| `{check.operation}` | {check.law} | `{check.call}` | {status} |")
    return "\n".join(lines)


def checks_payload(checks: list[LawCheck]) -> list[dict[str, object]]:
    return [asdict(check) for check in checks]
