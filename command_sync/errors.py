"""
Sync Errors
Error codes and exceptions raised during command synchronization.
"""

from enum import Enum
from typing import Optional


class SyncErrorCode(Enum):
    """Error codes for sync failures."""
    PARTITION_NOT_FOUND = "PARTITION_NOT_FOUND"  # Target-level: guild cannot be resolved
    REMOTE_CALL_FAILURE = "REMOTE_CALL_FAILURE"  # Item-level: fetch/create/edit rejected
    LOAD_FAILURE = "LOAD_FAILURE"                # Pass-level: definition file broken
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"  # Startup: missing or invalid settings


class SyncError(Exception):
    """Base error for command synchronization."""

    code: SyncErrorCode = SyncErrorCode.REMOTE_CALL_FAILURE

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class PartitionNotFound(SyncError):
    """A scoped guild id could not be resolved to a live guild."""

    code = SyncErrorCode.PARTITION_NOT_FOUND

    def __init__(self, partition_id: str, details: Optional[str] = None):
        super().__init__(f"Found no Guild with id {partition_id}!", details)
        self.partition_id = partition_id


class RemoteCallFailure(SyncError):
    """The registry rejected a request, or the request never completed."""

    code = SyncErrorCode.REMOTE_CALL_FAILURE

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message, details)
        self.status_code = status_code


class DefinitionLoadError(SyncError):
    """A discovered command file failed to load or is malformed."""

    code = SyncErrorCode.LOAD_FAILURE

    def __init__(self, path, message: str, details: Optional[str] = None):
        super().__init__(f"Failed to load command from {path}: {message}", details)
        self.path = path


class ConfigurationError(SyncError):
    """Required configuration is missing or invalid."""

    code = SyncErrorCode.CONFIGURATION_ERROR
