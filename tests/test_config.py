from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from slashcheck.config import CheckerConfig, apply_overrides, load_config

REPO_ROOT = Path(__file__).resolve().parents[1]


class ConfigTest(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = load_config()
        self.assertEqual(cfg.root_dir, "dist")
        self.assertEqual(cfg.base_url, "https://developer.okta.com")
        self.assertEqual(cfg.excluded_path_substring, "/docs/sdk/")
        self.assertFalse(cfg.ignore_case)

    def test_shipped_default_yaml_matches_builtin_defaults(self) -> None:
        cfg = load_config(REPO_ROOT / "configs" / "default.yaml")
        self.assertEqual(cfg, CheckerConfig())

    def test_overrides_take_precedence_over_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "slashcheck.yaml"
            path.write_text(
                "root_dir: site\nbase_url: https://example.com\n",
                encoding="utf-8",
            )
            cfg = load_config(
                path,
                overrides={"root_dir": "public", "base_url": None, "ignore_case": None},
            )
            self.assertEqual(cfg.root_dir, "public")
            self.assertEqual(cfg.base_url, "https://example.com")
            self.assertEqual(cfg.excluded_path_substring, "/docs/sdk/")
            self.assertFalse(cfg.ignore_case)

    def test_empty_yaml_keeps_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_config(path), CheckerConfig())

    def test_schema_rejects_unknown_keys_and_bad_types(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.yaml"
            path.write_text("root_dir: 3\nfollow_external: true\n", encoding="utf-8")
            with self.assertRaises(ValueError) as ctx:
                load_config(path)
            msg = str(ctx.exception)
            self.assertIn("Config validation failed", msg)
            self.assertIn("root_dir", msg)
            self.assertIn("follow_external", msg)

    def test_non_mapping_yaml_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "list.yaml"
            path.write_text("- dist\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_missing_config_file_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_config(Path(tmp) / "nope.yaml")

    def test_apply_overrides_rejects_unknown_key(self) -> None:
        with self.assertRaises(KeyError):
            apply_overrides(CheckerConfig(), {"rootDir": "x"})


if __name__ == "__main__":
    unittest.main()
