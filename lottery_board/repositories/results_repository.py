"""Repository layer for the results document.

The document lives in a single JSON file. It is created with empty tiers on
first access and overwritten wholesale on every save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from lottery_board.models.results import LotteryResults

logger = logging.getLogger(__name__)


class JsonResultsRepository:
    """Read/write operations for the results JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._path.exists():
            return

        logger.info("Creating empty results document at %s", self._path)
        self._write(LotteryResults.empty().to_dict())

    def load(self) -> Any:
        """Return the stored document exactly as persisted."""

        self.ensure_file()
        with self._path.open("r", encoding="utf-8") as fh:
            return json.load(fh)

    def save(self, document: Any) -> None:
        """Overwrite the stored document. No validation, no merge."""

        self.ensure_file()
        self._write(document)

    def reset(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._write(LotteryResults.empty().to_dict())

    def _write(self, document: Any) -> None:
        with self._path.open("w", encoding="utf-8") as fh:
            json.dump(document, fh, ensure_ascii=False, indent=2)
