"""
Core building blocks: persistence backends, errors, logging and validation.
"""

from .blob_store import BlobStore, MemoryBlobStore, FileBlobStore, RedisBlobStore, create_blob_store
from .exceptions import (
    ErrorCode,
    TravelJournalException,
    BlobStoreError,
    ProfileDecodeError,
    LocationLookupError,
)
from .validation import ValidationError

__all__ = [
    "BlobStore",
    "MemoryBlobStore",
    "FileBlobStore",
    "RedisBlobStore",
    "create_blob_store",
    "ErrorCode",
    "TravelJournalException",
    "BlobStoreError",
    "ProfileDecodeError",
    "LocationLookupError",
    "ValidationError",
]
