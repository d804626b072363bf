"""JSON file store backend: one pretty-printed array per store under DATA_DIR."""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from toolshare.core.errors import StoreCorruptedError
from toolshare.services.repository import Record, RecordRepository, SeedFactory

logger = logging.getLogger(__name__)


class JsonFileRepository(RecordRepository):
    """
    Store records as a JSON array in <data_dir>/<name>.json.

    A missing file is seeded on construction and whenever it disappears later.
    A file that does not parse to a list of objects is handled by
    corrupt_policy: "reseed" moves it aside to <name>.corrupt-<timestamp>.json
    before seeding, "fail"
    raises StoreCorruptedError. Other read errors propagate unchanged.
    With initialize=False nothing is read until first use, so reset() can
    overwrite a corrupt file whatever the policy.
    """

    def __init__(
        self,
        name: str,
        seed: SeedFactory,
        data_dir: Path,
        label: str | None = None,
        corrupt_policy: Literal["reseed", "fail"] = "reseed",
        initialize: bool = True,
    ) -> None:
        super().__init__(name, seed, label)
        self.data_dir = Path(data_dir)
        self.path = self.data_dir / f"{name}.json"
        self.corrupt_policy = corrupt_policy
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if initialize:
            with self._lock:
                self._load()

    def _load(self) -> list[Record]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("No %s found, initializing with defaults", self.path)
            return self.reset()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._recover(e)
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            return self._recover(None)
        return data

    def _save(self, records: list[Record]) -> None:
        """Write records atomically: temp file first, then replace."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(records, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def _recover(self, cause: Exception | None) -> list[Record]:
        if self.corrupt_policy == "fail":
            logger.error("Store file %s is not a JSON array", self.path)
            raise StoreCorruptedError(self.name, cause)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        backup = self.path.with_name(f"{self.name}.corrupt-{stamp}.json")
        os.replace(self.path, backup)
        logger.warning(
            "Store file %s is not a JSON array; moved it to %s and reseeded",
            self.path,
            backup,
        )
        return self.reset()
