"""Test YAML configuration loading."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml

from revoke.config import (
    format_revert_message,
    format_revive_message,
    get_config_file,
    get_push_preference,
    get_remote,
    get_repo_path,
    load_config,
)


class TestLoadConfig(unittest.TestCase):
    """Test config defaults and overrides."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self.tmp.name) / "config.yml"

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, data):
        with open(self.config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)

    def test_missing_file_gives_defaults(self):
        config = load_config(self.config_file)
        self.assertEqual(get_remote(config), "origin")
        self.assertIsNone(get_repo_path(config))
        self.assertIsNone(get_push_preference(config))
        self.assertEqual(format_revert_message(config, "Merge branch 'a'"), "Revoke \"Merge branch 'a'\"")
        self.assertEqual(format_revive_message(config, "a"), "Revive 'a' changes")

    def test_partial_file_keeps_other_defaults(self):
        self.write({"default": {"remote": "upstream"}, "preferences": {"push": "always"}})
        config = load_config(self.config_file)

        self.assertEqual(get_remote(config), "upstream")
        self.assertIsNone(get_repo_path(config))
        self.assertTrue(get_push_preference(config))
        self.assertEqual(format_revive_message(config, "a"), "Revive 'a' changes")

    def test_empty_file(self):
        self.config_file.write_text("")
        self.assertEqual(get_remote(load_config(self.config_file)), "origin")

    def test_never_push(self):
        self.write({"preferences": {"push": "never"}})
        self.assertFalse(get_push_preference(load_config(self.config_file)))

    def test_invalid_push_preference(self):
        self.write({"preferences": {"push": "sometimes"}})
        with self.assertRaises(ValueError):
            get_push_preference(load_config(self.config_file))

    def test_custom_messages(self):
        self.write({"messages": {"revert": "Revert {message}", "revive": "Reapply {branch}"}})
        config = load_config(self.config_file)
        self.assertEqual(format_revert_message(config, "m"), "Revert m")
        self.assertEqual(format_revive_message(config, "b"), "Reapply b")

    def test_template_using_other_field(self):
        self.write({"messages": {"revert": "Undo {branch}"}})
        with self.assertRaises(ValueError):
            load_config(self.config_file)

    def test_template_with_positional_field(self):
        self.write({"messages": {"revive": "Revive {0}"}})
        with self.assertRaises(ValueError):
            load_config(self.config_file)

    def test_top_level_list(self):
        self.config_file.write_text("- a\n- b\n")
        with self.assertRaises(ValueError) as ctx:
            load_config(self.config_file)
        self.assertIn("Invalid config file", str(ctx.exception))

    def test_top_level_scalar(self):
        self.config_file.write_text("just text\n")
        with self.assertRaises(ValueError):
            load_config(self.config_file)

    def test_malformed_yaml(self):
        self.config_file.write_text("default: {remote: [origin\n")
        with self.assertRaises(ValueError) as ctx:
            load_config(self.config_file)
        self.assertIn("Invalid config file", str(ctx.exception))

    def test_env_override(self):
        with mock.patch.dict(os.environ, {"REVOKE_CONFIG": str(self.config_file)}):
            self.assertEqual(get_config_file(), self.config_file)


if __name__ == "__main__":
    unittest.main()
