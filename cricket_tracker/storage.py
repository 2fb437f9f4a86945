# cricket_tracker/storage.py
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the record file cannot be written."""
    pass


class RecordStore:
    """
    JSON-file persistence for the record collection.

    - load(): last saved list, or [] when missing/unreadable/not a list
    - save(): temp file + os.replace, so readers never see a half-written file
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("unreadable record file %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("record file %s holds %s, expected a list", self.path, type(data).__name__)
            return []

        return data

    def save(self, records: Sequence[Dict[str, Any]]) -> None:
        text = json.dumps(list(records), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Unable to save records to {self.path}: {e}") from e

        logger.debug("saved %d records to %s", len(records), self.path)
