"""Tests for config defaults, YAML overrides and validation."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FederalRegisterMCP.config import DEFAULT_CONFIG, load_config, merge_config_dicts, parse_config_dict
from FederalRegisterMCP.core.constants import BASE_URL


def _with(section: str, **values: object) -> dict:
    return merge_config_dicts(DEFAULT_CONFIG, {section: values})


class TestConfigDefaults(unittest.TestCase):
    def test_defaults_without_file(self) -> None:
        config = load_config()
        self.assertEqual(config.runtime.level, "INFO")
        self.assertFalse(config.runtime.to_file)
        self.assertEqual(config.api.base_url, BASE_URL)
        self.assertEqual(config.api.timeout, 30.0)
        self.assertEqual(config.server.name, "federal-register")
        self.assertEqual(config.server.port, 3000)
        self.assertEqual(config.server.path, "/mcp")


class TestConfigOverride(unittest.TestCase):
    def test_yaml_overrides_merge_with_defaults(self) -> None:
        override_yaml = """
log:
  level: debug

server:
  port: 8080
"""
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "override.yml"
            override_path.write_text(override_yaml, encoding="utf-8")
            config = load_config(override_path)

        self.assertEqual(config.runtime.level, "DEBUG")
        self.assertEqual(config.server.port, 8080)
        self.assertEqual(config.server.host, "127.0.0.1")
        self.assertEqual(config.api.base_url, BASE_URL)

    def test_empty_yaml_keeps_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "empty.yml"
            override_path.write_text("", encoding="utf-8")
            config = load_config(override_path)
        self.assertEqual(config.server.port, 3000)

    def test_non_mapping_root_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            override_path = Path(tmp) / "list.yml"
            override_path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config(override_path)

    def test_base_url_trailing_slash_is_stripped(self) -> None:
        config = parse_config_dict(_with("api", base_url="https://example.test/api/v1/"))
        self.assertEqual(config.api.base_url, "https://example.test/api/v1")


class TestConfigValidation(unittest.TestCase):
    def test_invalid_values_name_the_key(self) -> None:
        cases = [
            (_with("log", level="LOUD"), ValueError, "log.level"),
            (_with("log", to_file="yes"), TypeError, "log.to_file"),
            (_with("api", base_url="ftp://example.test"), ValueError, "api.base_url"),
            (_with("api", timeout=0), ValueError, "api.timeout"),
            (_with("api", timeout=True), TypeError, "api.timeout"),
            (_with("server", port=70000), ValueError, "server.port"),
            (_with("server", port="3000"), TypeError, "server.port"),
            (_with("server", path="mcp"), ValueError, "server.path"),
            (_with("server", path="/health"), ValueError, "server.path"),
        ]
        for raw, error, key in cases:
            with self.subTest(key=key):
                with self.assertRaisesRegex(error, key):
                    parse_config_dict(raw)

    def test_missing_key_is_reported(self) -> None:
        raw = merge_config_dicts(DEFAULT_CONFIG, {})
        raw["server"] = {k: v for k, v in raw["server"].items() if k != "host"}
        with self.assertRaisesRegex(ValueError, "server.host"):
            parse_config_dict(raw)

    def test_section_must_be_mapping(self) -> None:
        raw = merge_config_dicts(DEFAULT_CONFIG, {"api": "oops"})
        with self.assertRaisesRegex(TypeError, "api"):
            parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
