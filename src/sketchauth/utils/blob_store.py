# -*- coding: utf-8 -*-
"""
src/sketchauth/utils/blob_store.py

Minimal key-value persistence for serialized blobs.

The template store only needs one named slot it can read, write and clear.
`MemoryBlobStore` keeps blobs in a dictionary (tests, embedding), while
`FileBlobStore` keeps one file per key inside a directory, normally the
application data directory.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class BlobStore:
    """Interface of a key-value blob store."""

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryBlobStore(BlobStore):
    """Blob store backed by a plain dictionary."""

    def __init__(self):
        self._blobs: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._blobs.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._blobs[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._blobs.pop(key, None)


class FileBlobStore(BlobStore):
    """
    Blob store keeping each key in its own `<key>.json` file.

    Writes go to a temporary file in the same directory that is then moved
    over the target, so a reader never sees a half-written blob.
    """

    def __init__(self, directory: Path, suffix: str = ".json"):
        """
        Args:
            directory (Path): Folder holding the blobs. Created if missing.
            suffix (str): File extension appended to every key.
        """
        self.directory = Path(directory)
        self.suffix = suffix
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not _VALID_KEY.match(key):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self.directory / f"{key}{self.suffix}"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read blob '{key}' from {path}: {e}")
            raise

    def set(self, key: str, value: bytes) -> None:
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, path)
            logger.debug(f"Wrote {len(value)} bytes to {path}")
        except OSError as e:
            logger.error(f"Could not write blob '{key}' to {path}: {e}")
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
            logger.debug(f"Deleted {path}")
        except FileNotFoundError:
            pass
