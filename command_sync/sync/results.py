"""
Sync Results
Per-command outcomes and the pass-level report.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from command_sync.errors import SyncError


class SyncStatus(Enum):
    """Outcome of syncing one command against one target."""
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class SyncResult:
    """What happened to one command in one target."""
    status: SyncStatus
    name: str
    target: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[SyncError] = None
    remote_id: Optional[str] = None

    @classmethod
    def created(cls, name: str, target: str, remote_id: Optional[str] = None) -> "SyncResult":
        return cls(SyncStatus.CREATED, name, target, remote_id=remote_id)

    @classmethod
    def updated(cls, name: str, target: str, remote_id: Optional[str] = None) -> "SyncResult":
        return cls(SyncStatus.UPDATED, name, target, remote_id=remote_id)

    @classmethod
    def skipped(cls, name: str, reason: str, target: Optional[str] = None) -> "SyncResult":
        return cls(SyncStatus.SKIPPED, name, target, reason=reason)

    @classmethod
    def failed(cls, name: str, target: str, error: SyncError) -> "SyncResult":
        return cls(SyncStatus.FAILED, name, target, reason=error.message, error=error)


@dataclass
class TargetFailure:
    """A target that could not be reconciled at all."""
    target: str
    error: SyncError


@dataclass
class SyncReport:
    """Aggregate outcome of a sync pass."""
    results: List[SyncResult] = field(default_factory=list)
    target_failures: List[TargetFailure] = field(default_factory=list)

    def _count(self, status: SyncStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def created(self) -> int:
        return self._count(SyncStatus.CREATED)

    @property
    def updated(self) -> int:
        return self._count(SyncStatus.UPDATED)

    @property
    def skipped(self) -> int:
        return self._count(SyncStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(SyncStatus.FAILED)

    @property
    def failures(self) -> List[SyncResult]:
        return [r for r in self.results if r.status == SyncStatus.FAILED]

    @property
    def errors(self) -> List[SyncError]:
        """Every error from the pass, target-level first."""
        errors = [f.error for f in self.target_failures]
        errors.extend(r.error for r in self.failures if r.error is not None)
        return errors

    @property
    def ok(self) -> bool:
        return not self.target_failures and self.failed == 0

    def extend(self, results: List[SyncResult]) -> None:
        self.results.extend(results)

    def summary(self) -> Dict[str, Any]:
        return {
            "created": self.created,
            "updated": self.updated,
            "skipped": self.skipped,
            "failed": self.failed,
            "failed_targets": len(self.target_failures),
        }
