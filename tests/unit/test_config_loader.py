from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

from imgdigest.config import (
    CONFIG_ENV_VAR,
    SEARCH_PATH_ENV_VAR,
    ConfigError,
    dump_example_config,
    load_config,
)

_CLEAN_ENV = {CONFIG_ENV_VAR: "", SEARCH_PATH_ENV_VAR: ""}


class ConfigLoaderTests(unittest.TestCase):
    def test_load_config_defaults(self) -> None:
        with patch.dict(os.environ, _CLEAN_ENV, clear=False):
            config = load_config()

        self.assertEqual(config.digest.chunk_size, 128)
        self.assertEqual(config.digest.max_images, 64)
        self.assertEqual(config.acquisition.search_paths, [])
        self.assertEqual(config.logging.level, "WARNING")
        self.assertIsNone(config.logging.log_path)

    def test_load_config_applies_overrides(self) -> None:
        overrides = {
            "digest.chunk_size": 4096,
            "acquisition": {"retries": 0},
            "logging": {"level": "DEBUG"},
        }

        with patch.dict(os.environ, _CLEAN_ENV, clear=False):
            config = load_config(overrides=overrides)

        self.assertEqual(config.digest.chunk_size, 4096)
        self.assertEqual(config.acquisition.retries, 0)
        self.assertEqual(config.logging.level, "DEBUG")
        self.assertEqual(config.digest.max_images, 64)

    def test_user_file_merges_over_defaults(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "imgdigest.toml"
            path.write_text("[digest]\nmax_images = 3\n", encoding="utf-8")

            with patch.dict(os.environ, _CLEAN_ENV, clear=False):
                config = load_config(path)

        self.assertEqual(config.digest.max_images, 3)
        self.assertEqual(config.digest.chunk_size, 128)

    def test_config_path_from_environment(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "imgdigest.json"
            path.write_text('{"acquisition": {"timeout_seconds": 5}}', encoding="utf-8")

            with patch.dict(os.environ, {CONFIG_ENV_VAR: str(path), SEARCH_PATH_ENV_VAR: ""}, clear=False):
                config = load_config()

        self.assertEqual(config.acquisition.timeout_seconds, 5)

    def test_env_search_path(self) -> None:
        joined = os.pathsep.join(["/srv/tftp", " /var/lib/images "])
        with patch.dict(os.environ, {CONFIG_ENV_VAR: "", SEARCH_PATH_ENV_VAR: joined}, clear=False):
            config = load_config()

        self.assertEqual(config.acquisition.search_paths, [Path("/srv/tftp"), Path("/var/lib/images")])

    def test_invalid_values_raise_config_error(self) -> None:
        with patch.dict(os.environ, _CLEAN_ENV, clear=False):
            with self.assertRaises(ConfigError):
                load_config(overrides={"digest.chunk_size": 0})
            with self.assertRaises(ConfigError):
                load_config(overrides={"digest.unknown": 1})

    def test_missing_or_unsupported_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_config(Path(tmpdir) / "missing.yaml")

            ini = Path(tmpdir) / "config.ini"
            ini.write_text("[digest]\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(ini)

            bad = Path(tmpdir) / "bad.yaml"
            bad.write_text("- just\n- a list\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(bad)

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["digest"]["chunk_size"], 128)
        self.assertIn("acquisition", data)

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
