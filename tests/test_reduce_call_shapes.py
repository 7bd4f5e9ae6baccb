from __future__ import annotations

import importlib.util
import unittest
from unittest import mock


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


def _plus(acc, x):
    return acc + x


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for reduce tests")
class ReduceCallShapeTests(unittest.TestCase):
    def test_all_call_shapes_agree(self) -> None:
        from fp_jax import reduce

        xs = [1, 2, 3, 4]
        self.assertEqual(reduce(_plus, 0, xs), 10)
        self.assertEqual(reduce(_plus)(0, xs), 10)
        self.assertEqual(reduce(_plus)(0)(xs), 10)
        self.assertEqual(reduce(_plus, 0)(xs), 10)
        self.assertEqual(reduce()(_plus, 0, xs), 10)

    def test_self_reference_at_every_level(self) -> None:
        from fp_jax import reduce

        self.assertIs(reduce(), reduce)
        level_one = reduce(_plus)
        self.assertIs(level_one(), level_one)
        level_two = level_one(0)
        self.assertIs(level_two(), level_two)
        self.assertEqual(level_two()([5]), 5)

    def test_empty_sequence_returns_initial_value_unchanged(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce

        initial = object()
        self.assertIs(reduce(_plus, initial, []), initial)
        self.assertIs(reduce(lambda acc, x: None)(initial)(()), initial)
        self.assertIs(reduce(add, initial, jnp.asarray([])), initial)

    def test_fold_is_left_to_right(self) -> None:
        from fp_jax import reduce, subtract

        self.assertEqual(reduce(lambda acc, x: acc + [x], [], (1, 2, 3)), [1, 2, 3])
        self.assertEqual(reduce(lambda acc, x: f"({acc}{x})", "", "abc"), "(((a)b)c)")
        self.assertEqual(reduce(subtract, 10, [1, 2, 3]), 4)

    def test_reducer_sees_every_element_once(self) -> None:
        from fp_jax import reduce

        seen = []

        def record(acc, x):
            seen.append(x)
            return acc + 1

        self.assertEqual(reduce(record, 0, range(5)), 5)
        self.assertEqual(seen, [0, 1, 2, 3, 4])

    def test_dispatched_reducers(self) -> None:
        from fp_jax import add, reduce

        self.assertEqual(reduce(add, 0, [1, 2, 3]), 6)
        self.assertEqual(reduce(add)("")(["a", "b"]), "ab")

    def test_too_many_arguments_at_nested_level(self) -> None:
        from fp_jax import ArityError, reduce

        with self.assertRaises(ArityError):
            reduce(_plus)(0, [1], [2])
        with self.assertRaises(ArityError):
            reduce(_plus, 0)([1], [2])

    def test_jax_fold_fast_path_matches_generic_fold(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce, subtract

        values = jnp.arange(5)
        self.assertEqual(int(reduce(add, 0, values)), 10)
        self.assertEqual(int(reduce(_plus, 0, values)), 10)
        self.assertEqual(int(reduce(subtract, 10, jnp.asarray([1, 2, 3]))), 4)
        self.assertEqual(int(reduce(subtract)(10)(jnp.asarray([1, 2, 3]))), 4)

        columns = reduce(add, jnp.zeros(3), jnp.ones((2, 3)))
        self.assertEqual(columns.tolist(), [2.0, 2.0, 2.0])

    def test_jax_fold_fast_path_logs_at_debug(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce

        with self.assertLogs("fp_jax", level="DEBUG") as logs:
            reduce(add, 0, jnp.arange(4))
        self.assertTrue(any("fast path" in line for line in logs.output))

    def test_wider_initial_value_promotes_like_left_fold(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce, subtract

        small = jnp.asarray([100, 100], dtype=jnp.int8)
        with self.assertNoLogs("fp_jax", level="DEBUG"):
            widened = reduce(add, jnp.int32(0), small)
        self.assertEqual(int(widened), 200)
        self.assertEqual(int(widened), int(reduce(_plus, jnp.int32(0), small)))
        self.assertEqual(int(reduce(subtract, jnp.int32(0), small)), -200)

    def test_float_fold_keeps_left_to_right_rounding(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce

        values = jnp.asarray([1e8] + [1.0] * 64, dtype=jnp.float32)
        with self.assertNoLogs("fp_jax", level="DEBUG"):
            folded = reduce(add, jnp.float32(0), values)
        self.assertEqual(folded.item(), reduce(_plus, jnp.float32(0), values).item())
        self.assertEqual(folded.item(), 1e8)

    def test_same_dtype_integer_fast_path_matches_left_fold(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce

        small = jnp.asarray([100, 100], dtype=jnp.int8)
        cases = [jnp.int8(0), 0]
        for initial in cases:
            with self.subTest(initial=type(initial).__name__):
                with self.assertLogs("fp_jax", level="DEBUG"):
                    fast = reduce(add, initial, small)
                self.assertEqual(fast.dtype, jnp.int8)
                self.assertEqual(int(fast), int(reduce(_plus, initial, small)))

    def test_generic_fold_when_fast_path_disabled(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, operations, reduce

        with mock.patch.object(operations, "_USE_FOLD_FAST_PATH", False):
            self.assertEqual(int(reduce(add, 0, jnp.arange(4))), 6)

    def test_boolean_arrays_skip_fast_path(self) -> None:
        import jax.numpy as jnp
        from fp_jax import add, reduce

        flags = jnp.asarray([True, True, False])
        self.assertEqual(int(reduce(add, 0, flags)), 2)


if __name__ == "__main__":
    unittest.main()
