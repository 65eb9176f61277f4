import os
import tempfile
import unittest
from pathlib import Path

from puzzle_input.config import InputConfig, load_config, load_default_config, validate_config


class TestInputConfig(unittest.TestCase):
    def test_default_config_loads(self) -> None:
        config = load_default_config()
        self.assertEqual(config.base_url, "https://adventofcode.com")
        self.assertEqual(config.token_env_var, "AOC_SESSION")
        self.assertFalse(config.cache_dir.startswith("~"))
        self.assertEqual(config.cache_dir, os.path.expanduser("~/.cache/puzzle-harness"))

    def test_file_overrides_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "inputs.yaml"
            path.write_text(f"cache_dir: {tmp}\ntimeout_s: 2\n", encoding="utf-8")
            config = load_config(path)
        self.assertEqual(config.cache_dir, tmp)
        self.assertEqual(config.timeout_s, 2.0)
        self.assertEqual(config.retry_total, load_default_config().retry_total)

    def test_unknown_keys_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "inputs.yaml"
            path.write_text("cache_directory: /tmp\n", encoding="utf-8")
            with self.assertRaises(ValueError) as ctx:
                load_config(path)
        self.assertIn("cache_directory", str(ctx.exception))

    def test_wrong_types_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "inputs.yaml"
            path.write_text("retry_total: many\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_validate_rejects_bad_values(self) -> None:
        base = load_default_config()
        cases = {
            "base_url": "adventofcode.com",
            "timeout_s": 0.0,
            "retry_total": -1,
            "user_agent": "",
        }
        for field_name, value in cases.items():
            values = dict(base.__dict__)
            values[field_name] = value
            with self.assertRaises(ValueError, msg=field_name):
                validate_config(InputConfig(**values))


if __name__ == "__main__":
    unittest.main()
