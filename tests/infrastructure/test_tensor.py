import unittest

import numpy as np

from keyact import Tensor


class TestTensor(unittest.TestCase):
    def test_scalars_and_sequences_default_to_float32(self) -> None:
        self.assertEqual(Tensor(1.5).dtype, np.float32)
        self.assertEqual(Tensor([1, 2, 3]).dtype, np.float32)

    def test_numpy_input_keeps_dtype(self) -> None:
        t = Tensor(np.zeros((2, 3), dtype=np.float64))
        self.assertEqual(t.dtype, np.float64)
        self.assertEqual(t.shape, (2, 3))
        self.assertEqual(t.ndim, 2)
        self.assertEqual(t.size, 6)

    def test_input_is_copied(self) -> None:
        src = np.array([1.0, 2.0], dtype=np.float32)
        t = Tensor(src)
        src[0] = 100.0
        np.testing.assert_array_equal(t.to_numpy(), [1.0, 2.0])

    def test_is_read_only(self) -> None:
        t = Tensor([1.0, 2.0])
        with self.assertRaises(ValueError):
            t.to_numpy()[0] = 5.0
        with self.assertRaises(AttributeError):
            t.shape = (1, 2)  # type: ignore[misc]
        with self.assertRaises(AttributeError):
            t.extra = 1  # type: ignore[attr-defined]

    def test_item(self) -> None:
        self.assertEqual(Tensor(0.5).item(), 0.5)
        self.assertEqual(Tensor([[2.0]]).item(), 2.0)
        with self.assertRaises(ValueError):
            Tensor([1.0, 2.0]).item()

    def test_array_protocol(self) -> None:
        t = Tensor([[1.0, 2.0]])
        arr = np.asarray(t)
        self.assertEqual(arr.shape, (1, 2))
        self.assertEqual(np.asarray(t, dtype=np.float64).dtype, np.float64)

    def test_len_and_tolist(self) -> None:
        t = Tensor([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        self.assertEqual(len(t), 3)
        self.assertEqual(t.tolist(), [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        with self.assertRaises(TypeError):
            len(Tensor(1.0))

    def test_from_tensor_copies(self) -> None:
        a = Tensor([1.0, 2.0])
        b = Tensor(a)
        self.assertEqual(b.shape, a.shape)
        self.assertIsNot(b.to_numpy(), a.to_numpy())

    def test_from_numpy(self) -> None:
        t = Tensor.from_numpy(np.arange(4, dtype=np.float64))
        self.assertEqual(t.dtype, np.float64)
        self.assertEqual(t.shape, (4,))


if __name__ == "__main__":
    unittest.main()
