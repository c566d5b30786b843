"""
JSON file persistence for lab requests.

The whole collection lives in a single pretty-printed JSON document of
the form ``{"requests": [...]}``.  Every operation loads the full
collection, changes it in memory and writes it back in one piece; there
is no indexing and no partial update.  Writes go to a temporary file
that is then renamed over the original, so readers never observe a
half-written document.

The async ``aload``/``asave`` variants run the file I/O in a worker
thread so the event loop keeps serving other requests meanwhile.
``JSONFileStore.lock`` must therefore be held around a
read-modify-write cycle; it serialises them inside one process.
Several processes sharing the same file are not coordinated and the
last writer wins.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError as SchemaError

from .errors import StorageError
from ..schemas.lab_request import LabRequest

logger = logging.getLogger(__name__)


class JSONFileStore:
    """Load and save the request collection as one JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.lock = asyncio.Lock()

    def init(self) -> None:
        """Create an empty document if the data file does not exist yet."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {self.path.parent}: {e}") from e
        self.save([])
        logger.info("Initialised empty data file at %s", self.path)

    def load(self) -> List[LabRequest]:
        """Read every stored request, in insertion order.

        A missing data file counts as first use: an empty document is
        written and an empty list returned.
        """
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError:
            logger.warning("Data file %s is missing; starting with an empty collection", self.path)
            self.init()
            return []
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(document, dict) or not isinstance(document.get("requests"), list):
            raise StorageError(f"{self.path} does not contain a 'requests' array")
        try:
            return [LabRequest.model_validate(item) for item in document["requests"]]
        except SchemaError as e:
            raise StorageError(f"Malformed request entry in {self.path}: {e}") from e

    def save(self, requests: List[LabRequest]) -> None:
        """Overwrite the data file with ``requests``."""
        document = {"requests": [r.to_document() for r in requests]}
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    async def aload(self) -> List[LabRequest]:
        return await run_in_threadpool(self.load)

    async def asave(self, requests: List[LabRequest]) -> None:
        await run_in_threadpool(self.save, requests)
