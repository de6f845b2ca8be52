"""
Custom exceptions for the travel journal record store.

Store operations never let these escape to callers: persistence failures are
reported through SaveResult and lookup failures degrade to empty results.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Storage errors
    STORAGE_READ_FAILED = "STORAGE_READ_FAILED"
    STORAGE_WRITE_FAILED = "STORAGE_WRITE_FAILED"
    PROFILE_DECODE_FAILED = "PROFILE_DECODE_FAILED"
    PROFILE_ENCODE_FAILED = "PROFILE_ENCODE_FAILED"

    # External lookup errors
    LOCATION_LOOKUP_FAILED = "LOCATION_LOOKUP_FAILED"
    LOCATION_NO_RESULTS = "LOCATION_NO_RESULTS"


class TravelJournalException(Exception):
    """Base exception for the travel journal."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class BlobStoreError(TravelJournalException):
    """Raised when a blob store backend cannot read or write a key."""

    def __init__(
        self,
        message: str,
        key: str,
        error_code: ErrorCode = ErrorCode.STORAGE_WRITE_FAILED,
    ):
        super().__init__(message=message, error_code=error_code, details={"key": key})
        self.key = key


class ProfileDecodeError(TravelJournalException):
    """Raised when a persisted profile blob cannot be decoded."""

    def __init__(self, message: str = "Stored profile could not be decoded", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PROFILE_DECODE_FAILED,
            details=details,
        )


class LocationLookupError(TravelJournalException):
    """Raised when the geocoding provider fails or returns garbage."""

    def __init__(
        self,
        message: str = "Location lookup failed",
        error_code: ErrorCode = ErrorCode.LOCATION_LOOKUP_FAILED,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, error_code=error_code, details=details)
