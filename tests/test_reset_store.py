"""Tests for the reset_store maintenance CLI."""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from toolshare.core.config import Settings
from toolshare.scripts import reset_store
from toolshare.services.collections import default_users


class TestResetStore(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.data_dir = Path(tmp.name)
        settings = Settings(_env_file=None, STORE_BACKEND="json", DATA_DIR=self.data_dir)
        patcher = patch.object(reset_store, "get_settings", return_value=settings)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _read(self, name: str) -> list:
        return json.loads((self.data_dir / f"{name}.json").read_text(encoding="utf-8"))

    def test_requires_confirmation(self) -> None:
        self.assertEqual(reset_store.main(["users"]), 1)
        self.assertFalse((self.data_dir / "users.json").exists())

    def test_resets_one_store(self) -> None:
        (self.data_dir / "users.json").write_text(json.dumps([{"id": 9}]), encoding="utf-8")
        self.assertEqual(reset_store.main(["users", "--yes"]), 0)
        self.assertEqual(self._read("users"), default_users())
        self.assertFalse((self.data_dir / "werkzeuge.json").exists())

    def test_resets_all_stores(self) -> None:
        self.assertEqual(reset_store.main(["all", "--yes"]), 0)
        self.assertEqual(len(self._read("users")), 3)
        self.assertEqual(len(self._read("werkzeuge")), 2)

    def test_recovers_corrupt_store_under_fail_policy(self) -> None:
        settings = Settings(
            _env_file=None,
            STORE_BACKEND="json",
            DATA_DIR=self.data_dir,
            CORRUPT_STORE_POLICY="fail",
        )
        (self.data_dir / "users.json").write_text("[{", encoding="utf-8")
        with patch.object(reset_store, "get_settings", return_value=settings):
            self.assertEqual(reset_store.main(["users", "--yes"]), 0)
        self.assertEqual(self._read("users"), default_users())

    def test_unknown_store_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit):
            reset_store.main(["books", "--yes"])


if __name__ == "__main__":
    unittest.main()
