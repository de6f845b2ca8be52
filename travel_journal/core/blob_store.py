"""
Key-value blob persistence backends.

The record store only needs "load bytes by key" and "save bytes by key";
the backends below provide that over a dict, a directory of files, or Redis.
"""

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

import redis

from travel_journal.config.settings import Settings, StorageBackend
from travel_journal.core.exceptions import BlobStoreError, ErrorCode

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.\-]+$")


class BlobStore(ABC):
    """Opaque byte storage keyed by string."""

    @abstractmethod
    def load(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None when the key is missing."""

    @abstractmethod
    def save(self, key: str, data: bytes) -> None:
        """Store bytes under key, replacing any previous value."""


class MemoryBlobStore(BlobStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def save(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)

    def keys(self):
        return list(self._data)


class FileBlobStore(BlobStore):
    """
    One file per key inside a directory.

    Writes go to a temporary file in the same directory and are moved into
    place with os.replace, so a crash never leaves a half-written blob.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise BlobStoreError(f"Invalid blob key '{key}'", key=key)
        return self.directory / f"{key}.blob"

    def load(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise BlobStoreError(
                f"Failed to read blob '{key}': {e}",
                key=key,
                error_code=ErrorCode.STORAGE_READ_FAILED,
            ) from e

    def save(self, key: str, data: bytes) -> None:
        path = self._path(key)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(dir=self.directory, prefix=f".{key}.", delete=False) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise BlobStoreError(f"Failed to write blob '{key}': {e}", key=key) from e


class RedisBlobStore(BlobStore):
    """Blobs stored as plain Redis string values under a key prefix."""

    def __init__(
        self,
        redis_url: Optional[str] = None,
        key_prefix: str = "",
        socket_timeout: float = 5.0,
        client: Optional[redis.Redis] = None,
    ):
        self.key_prefix = key_prefix
        if client is None:
            if not redis_url:
                raise ValueError("redis_url is required when no client is given")
            logger.info("Using Redis blob store at %s", redis_url)
            client = redis.Redis.from_url(
                redis_url,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
            )
        self.client = client

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def load(self, key: str) -> Optional[bytes]:
        try:
            value = self.client.get(self._key(key))
        except redis.RedisError as e:
            raise BlobStoreError(
                f"Failed to read blob '{key}' from Redis: {e}",
                key=key,
                error_code=ErrorCode.STORAGE_READ_FAILED,
            ) from e
        if value is None:
            return None
        return value.encode("utf-8") if isinstance(value, str) else value

    def save(self, key: str, data: bytes) -> None:
        try:
            self.client.set(self._key(key), data)
        except redis.RedisError as e:
            raise BlobStoreError(f"Failed to write blob '{key}' to Redis: {e}", key=key) from e


def create_blob_store(app_settings: Settings) -> BlobStore:
    """Build the backend selected by `storage.backend`."""
    storage = app_settings.storage
    if storage.backend == StorageBackend.MEMORY:
        return MemoryBlobStore()
    if storage.backend == StorageBackend.REDIS:
        return RedisBlobStore(
            redis_url=app_settings.redis.url,
            key_prefix=app_settings.redis.key_prefix,
            socket_timeout=app_settings.redis.socket_timeout,
        )
    return FileBlobStore(storage.get_data_dir())
