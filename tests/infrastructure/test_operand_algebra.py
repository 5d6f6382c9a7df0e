import gc
import unittest

import numpy as np

from keyact import (
    BackendMismatchError,
    BackendReleasedError,
    InvalidAxisError,
    NumpyBackend,
    Operand,
    ShapeMismatchError,
    TypeMismatchError,
    lift_scalar,
)
from keyact.infrastructure.operand import (
    exp,
    maximum,
    minimum,
    negate,
    reciprocal,
    reduce_max,
    reduce_sum,
)

from _backend_test_utils import RecordingBackend, f32


class TestOperandBasics(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend()

    def test_constant_describes_value(self) -> None:
        x = self.backend.constant([[1.0, 2.0, 3.0]])
        self.assertIsInstance(x, Operand)
        self.assertEqual(x.shape, (1, 3))
        self.assertEqual(x.ndim, 2)
        self.assertEqual(x.dtype, np.float32)
        self.assertIs(x.backend, self.backend)

    def test_scalar_constant_is_zero_dimensional(self) -> None:
        c = self.backend.constant(2.0)
        self.assertEqual(c.shape, ())
        self.assertEqual(c.ndim, 0)

    def test_operand_holds_weak_backend_reference(self) -> None:
        backend = NumpyBackend()
        x = backend.constant([1.0])
        del backend
        gc.collect()
        with self.assertRaises(BackendReleasedError):
            _ = x.backend
        self.assertIn("<released>", repr(x))

    def test_operand_is_immutable(self) -> None:
        x = self.backend.constant([1.0])
        with self.assertRaises(AttributeError):
            x.shape = (2,)  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            x.other = 1  # type: ignore[attr-defined]

    def test_materialize(self) -> None:
        x = self.backend.constant([1.0, 2.0])
        t = x.materialize()
        np.testing.assert_array_equal(t.to_numpy(), f32([1.0, 2.0]))


class TestOperandArithmetic(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend()
        self.a_np = f32([[1.0, -2.0, 3.0], [0.5, 4.0, -6.0]])
        self.b_np = f32([[2.0, 2.0, -1.0], [4.0, 0.5, 3.0]])
        self.a = self.backend.constant(self.a_np)
        self.b = self.backend.constant(self.b_np)

    def _np(self, x: Operand) -> np.ndarray:
        return self.backend.materialize(x).to_numpy()

    def test_operand_operand_ops_match_numpy(self) -> None:
        np.testing.assert_array_equal(self._np(self.a + self.b), self.a_np + self.b_np)
        np.testing.assert_array_equal(self._np(self.a - self.b), self.a_np - self.b_np)
        np.testing.assert_array_equal(self._np(self.a * self.b), self.a_np * self.b_np)
        np.testing.assert_array_equal(self._np(self.a / self.b), self.a_np / self.b_np)

    def test_scalar_promotion_both_orders(self) -> None:
        a = self.a_np
        np.testing.assert_array_equal(self._np(self.a + 1.0), a + np.float32(1.0))
        np.testing.assert_array_equal(self._np(1.0 + self.a), np.float32(1.0) + a)
        np.testing.assert_array_equal(self._np(self.a - 2.0), a - np.float32(2.0))
        np.testing.assert_array_equal(self._np(2.0 - self.a), np.float32(2.0) - a)
        np.testing.assert_array_equal(self._np(self.a * 3.0), a * np.float32(3.0))
        np.testing.assert_array_equal(self._np(3.0 * self.a), np.float32(3.0) * a)
        np.testing.assert_array_equal(self._np(self.a / 4.0), a / np.float32(4.0))
        np.testing.assert_array_equal(self._np(4.0 / self.a), np.float32(4.0) / a)

    def test_integer_and_numpy_scalars_are_promoted(self) -> None:
        out = self._np(2 * self.a)
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out, self.a_np * 2)
        out = self._np(np.float32(2.0) * self.a)
        self.assertIsInstance(np.float32(2.0) * self.a, Operand)
        np.testing.assert_array_equal(out, self.a_np * 2)

    def test_scalar_promotion_keeps_operand_dtype(self) -> None:
        x = self.backend.constant([1.0, 2.0], dtype="float64")
        y = x * 0.5
        self.assertEqual(y.dtype, np.float64)

    def test_negation(self) -> None:
        np.testing.assert_array_equal(self._np(-self.a), -self.a_np)
        np.testing.assert_array_equal(self._np(negate(self.a)), -self.a_np)
        self.assertIs(+self.a, self.a)

    def test_inputs_are_not_mutated(self) -> None:
        before = self.a.value.copy()
        _ = self.a + self.b
        _ = -self.a
        _ = exp(self.a)
        np.testing.assert_array_equal(self.a.value, before)
        self.assertFalse(self.a.value.flags.writeable)

    def test_broadcasting(self) -> None:
        row = self.backend.constant(f32([10.0, 20.0, 30.0]))
        out = self.a + row
        self.assertEqual(out.shape, (2, 3))
        np.testing.assert_array_equal(self._np(out), self.a_np + f32([10.0, 20.0, 30.0]))

    def test_shape_mismatch_raises(self) -> None:
        bad = self.backend.constant(f32([1.0, 2.0]))
        with self.assertRaises(ShapeMismatchError):
            _ = self.a + bad

    def test_type_mismatch_raises(self) -> None:
        other = self.backend.constant(self.b_np, dtype="float64")
        with self.assertRaises(TypeMismatchError):
            _ = self.a * other

    def test_mixing_backends_raises(self) -> None:
        other_backend = NumpyBackend()
        other = other_backend.constant(self.b_np)
        with self.assertRaises(BackendMismatchError):
            _ = self.a + other

    def test_unsupported_types(self) -> None:
        with self.assertRaises(TypeError):
            _ = self.a + "x"  # type: ignore[operator]
        with self.assertRaises(TypeError):
            _ = self.a + [1.0, 2.0, 3.0]  # type: ignore[operator]
        with self.assertRaises(TypeError):
            minimum(1.0, 2.0)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            _ = self.a + True  # type: ignore[operator]
        with self.assertRaises(TypeError):
            _ = False * self.a  # type: ignore[operator]


class TestOperandFunctional(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend()
        self.x_np = f32([[-1.5, 0.0, 2.0], [3.0, -4.0, 0.25]])
        self.x = self.backend.constant(self.x_np)

    def _np(self, x: Operand) -> np.ndarray:
        return self.backend.materialize(x).to_numpy()

    def test_lift_scalar(self) -> None:
        c = lift_scalar(self.backend, 3)
        self.assertEqual(c.shape, ())
        self.assertEqual(c.dtype, np.float32)
        like = self.backend.constant([1.0], dtype="float64")
        self.assertEqual(lift_scalar(self.backend, 3, like=like).dtype, np.float64)
        with self.assertRaises(TypeError):
            lift_scalar(self.backend, [1.0])  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            lift_scalar(self.backend, True)

    def test_min_max_with_scalar_either_side(self) -> None:
        for out in (maximum(0.0, self.x), maximum(self.x, 0.0)):
            self.assertEqual(out.shape, self.x.shape)
            np.testing.assert_array_equal(self._np(out), np.maximum(self.x_np, 0.0))
        for out in (minimum(0.0, self.x), minimum(self.x, 0.0)):
            np.testing.assert_array_equal(self._np(out), np.minimum(self.x_np, 0.0))

    def test_exp_and_reciprocal(self) -> None:
        np.testing.assert_allclose(self._np(exp(self.x)), np.exp(self.x_np), rtol=1e-6)
        np.testing.assert_allclose(self._np(self.x.exp()), np.exp(self.x_np), rtol=1e-6)
        nz = self.backend.constant(f32([2.0, -4.0, 0.5]))
        np.testing.assert_array_equal(self._np(reciprocal(nz)), f32([0.5, -0.25, 2.0]))
        np.testing.assert_array_equal(self._np(nz.reciprocal()), f32([0.5, -0.25, 2.0]))

    def test_reductions(self) -> None:
        m = reduce_max(self.x, 1, keepdims=True)
        self.assertEqual(m.shape, (2, 1))
        np.testing.assert_array_equal(self._np(m), np.max(self.x_np, axis=1, keepdims=True))
        s = reduce_sum(self.x, 0)
        self.assertEqual(s.shape, (3,))
        np.testing.assert_allclose(self._np(s), np.sum(self.x_np, axis=0), rtol=1e-6)
        np.testing.assert_array_equal(
            self._np(self.x.max(-1)), np.max(self.x_np, axis=-1)
        )
        np.testing.assert_allclose(
            self._np(self.x.sum(-2, keepdims=True)),
            np.sum(self.x_np, axis=0, keepdims=True),
            rtol=1e-6,
        )

    def test_reduction_axis_validated_before_backend_call(self) -> None:
        backend = RecordingBackend()
        x = backend.constant(self.x_np)
        backend.calls.clear()
        with self.assertRaises(InvalidAxisError):
            reduce_max(x, 2)
        with self.assertRaises(InvalidAxisError):
            reduce_sum(x, -3)
        self.assertEqual(backend.calls, [])


if __name__ == "__main__":
    unittest.main()
