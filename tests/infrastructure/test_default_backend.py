import os
import threading
import unittest
from unittest import mock

import numpy as np

from keyact import (
    BackendNotAvailableError,
    NumpyBackend,
    Relu,
    Sigmoid,
    Tensor,
    available_backends,
    create_backend,
    get_default_backend,
    register_backend,
    reset_default_backend,
    set_default_backend,
    use_backend,
)
from keyact.infrastructure.backends import _default

from _backend_test_utils import RecordingBackend, f32

_CLEAN_ENV = {k: v for k, v in os.environ.items() if not k.startswith("KEYACT_")}


class TestDefaultBackendSlot(unittest.TestCase):
    def setUp(self) -> None:
        self._env = mock.patch.dict(os.environ, _CLEAN_ENV, clear=True)
        self._env.start()
        reset_default_backend()

    def tearDown(self) -> None:
        reset_default_backend()
        self._env.stop()

    def test_lazily_builds_numpy_float32(self) -> None:
        self.assertIsNone(_default._default)
        b = get_default_backend()
        self.assertIsInstance(b, NumpyBackend)
        self.assertEqual(b.dtype, np.float32)
        self.assertIs(get_default_backend(), b)

    def test_environment_selects_dtype(self) -> None:
        os.environ["KEYACT_DTYPE"] = "float64"
        self.assertEqual(get_default_backend().dtype, np.float64)

    def test_unknown_configured_backend(self) -> None:
        os.environ["KEYACT_BACKEND"] = "does-not-exist"
        with self.assertRaises(BackendNotAvailableError):
            get_default_backend()
        self.assertIsNone(_default._default)

    def test_concurrent_first_use_builds_once(self) -> None:
        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(get_default_backend())

        with mock.patch.object(
            _default, "create_backend", wraps=create_backend
        ) as spy:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(spy.call_count, 1)
        self.assertEqual(len(results), 8)
        self.assertTrue(all(r is results[0] for r in results))

    def test_set_default_backend(self) -> None:
        rec = RecordingBackend()
        set_default_backend(rec)
        self.assertIs(get_default_backend(), rec)
        out = Relu()(Tensor([-1.0, 2.0]))
        np.testing.assert_array_equal(out.to_numpy(), f32([0.0, 2.0]))
        self.assertIn("maximum", rec.calls)

    def test_set_default_backend_rejects_non_backend(self) -> None:
        with self.assertRaises(TypeError):
            set_default_backend(object())  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            with use_backend("numpy"):  # type: ignore[arg-type]
                pass

    def test_reset_rebuilds(self) -> None:
        first = get_default_backend()
        reset_default_backend()
        second = get_default_backend()
        self.assertIsNot(first, second)

    def test_use_backend_restores_previous(self) -> None:
        outer = get_default_backend()
        inner = NumpyBackend(dtype="float64")
        with use_backend(inner) as active:
            self.assertIs(active, inner)
            self.assertIs(get_default_backend(), inner)
            self.assertEqual(Sigmoid()(Tensor([0.0])).dtype, np.float64)
        self.assertIs(get_default_backend(), outer)

    def test_use_backend_restores_empty_slot_on_error(self) -> None:
        with self.assertRaises(RuntimeError):
            with use_backend(NumpyBackend()):
                raise RuntimeError("boom")
        self.assertIsNone(_default._default)

    def test_scalar_call_returns_float(self) -> None:
        v = Sigmoid()(0.0)
        self.assertIsInstance(v, float)
        self.assertEqual(v, 0.5)


class TestBackendRegistry(unittest.TestCase):
    def test_bundled_backends_registered(self) -> None:
        names = available_backends()
        self.assertIn("numpy", names)
        self.assertIn("torch", names)

    def test_create_backend_is_case_insensitive(self) -> None:
        b = create_backend("NumPy", dtype="float64")
        self.assertIsInstance(b, NumpyBackend)
        self.assertEqual(b.dtype, np.float64)

    def test_unknown_name(self) -> None:
        with self.assertRaises(BackendNotAvailableError) as ctx:
            create_backend("nope")
        self.assertEqual(ctx.exception.backend, "nope")

    def test_register_custom_backend(self) -> None:
        @register_backend("recording-test")
        class _Recording(RecordingBackend):
            pass

        try:
            self.assertIn("recording-test", available_backends())
            self.assertIsInstance(create_backend("recording-test"), _Recording)
        finally:
            from keyact.infrastructure.backends._registry import _BACKEND_REGISTRY

            _BACKEND_REGISTRY.pop("recording-test", None)


if __name__ == "__main__":
    unittest.main()
