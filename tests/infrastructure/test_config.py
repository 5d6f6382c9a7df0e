import logging
import os
import tempfile
import unittest
from pathlib import Path

from keyact import ConfigError, RuntimeConfig, load_config
from keyact.infrastructure._config import load_yaml_config


class TestRuntimeConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = RuntimeConfig()
        self.assertEqual(cfg.backend, "numpy")
        self.assertEqual(cfg.dtype, "float32")

    def test_backend_name_is_lowercased(self) -> None:
        self.assertEqual(RuntimeConfig(backend="Torch").backend, "torch")

    def test_invalid_values(self) -> None:
        with self.assertRaises(ConfigError):
            RuntimeConfig(dtype="float16")
        with self.assertRaises(ConfigError):
            RuntimeConfig(backend="")
        with self.assertRaises(ConfigError):
            RuntimeConfig(backend=3)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with self.assertRaises(AttributeError):
            RuntimeConfig().backend = "torch"  # type: ignore[misc]


class TestLoadConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        path = self.dir / "keyact.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_empty_environment_gives_defaults(self) -> None:
        self.assertEqual(load_config(environ={}), RuntimeConfig())

    def test_yaml_file(self) -> None:
        path = self._write("backend: torch\ndtype: float64\n")
        cfg = load_config(path, environ={})
        self.assertEqual(cfg, RuntimeConfig(backend="torch", dtype="float64"))

    def test_config_path_from_environment(self) -> None:
        path = self._write("dtype: float64\n")
        cfg = load_config(environ={"KEYACT_CONFIG": str(path)})
        self.assertEqual(cfg.dtype, "float64")
        self.assertEqual(cfg.backend, "numpy")

    def test_environment_overrides_file(self) -> None:
        path = self._write("backend: torch\ndtype: float64\n")
        cfg = load_config(
            path, environ={"KEYACT_BACKEND": "numpy", "KEYACT_DTYPE": "float32"}
        )
        self.assertEqual(cfg, RuntimeConfig())

    def test_missing_file_uses_defaults(self) -> None:
        cfg = load_config(self.dir / "missing.yaml", environ={})
        self.assertEqual(cfg, RuntimeConfig())

    def test_empty_file(self) -> None:
        self.assertEqual(load_yaml_config(self._write("")), {})

    def test_unknown_keys_warn(self) -> None:
        path = self._write("dtype: float64\ncolour: blue\n")
        with self.assertLogs("keyact.infrastructure._config", level=logging.WARNING) as logs:
            cfg = load_config(path, environ={})
        self.assertEqual(cfg.dtype, "float64")
        self.assertTrue(any("colour" in line for line in logs.output))

    def test_invalid_yaml(self) -> None:
        path = self._write("backend: [numpy\n")
        with self.assertRaises(ConfigError):
            load_config(path, environ={})

    def test_non_mapping_top_level(self) -> None:
        path = self._write("- numpy\n- torch\n")
        with self.assertRaises(ConfigError):
            load_config(path, environ={})

    def test_invalid_value_in_file(self) -> None:
        path = self._write("dtype: int8\n")
        with self.assertRaises(ConfigError):
            load_config(path, environ={})

    def test_invalid_environment_value(self) -> None:
        with self.assertRaises(ConfigError):
            load_config(environ={"KEYACT_DTYPE": "half"})

    def test_reads_os_environ_by_default(self) -> None:
        old = os.environ.get("KEYACT_BACKEND")
        os.environ["KEYACT_BACKEND"] = "torch"
        try:
            self.assertEqual(load_config().backend, "torch")
        finally:
            if old is None:
                del os.environ["KEYACT_BACKEND"]
            else:
                os.environ["KEYACT_BACKEND"] = old


if __name__ == "__main__":
    unittest.main()
