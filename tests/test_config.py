"""Config loader tests."""

import tempfile
import unittest
from pathlib import Path

from mdslides.config import load_config


class TestConfig(unittest.TestCase):
    def test_load_config_success(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            config = load_config(root)
            self.assertEqual(Path(config.project_root), root)
            self.assertEqual(Path(config.runs_dir), root / "runs")
            self.assertEqual(
                Path(config.sample_document_path), root / "inputs" / "sample_deck.md"
            )

    def test_default_root_has_sample_document(self) -> None:
        config = load_config()
        self.assertTrue(Path(config.sample_document_path).exists())

    def test_load_config_missing_root(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config(Path("/nonexistent/project"))


if __name__ == "__main__":
    unittest.main()
