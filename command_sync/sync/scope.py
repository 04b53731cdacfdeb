"""
Scope Resolver
Decides which registries a sync pass targets.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from command_sync.registry.models import GlobalTarget, PartitionTarget, Target


@dataclass(frozen=True)
class SyncScope:
    """
    Global scope, or one independent registry per guild.

    Build with `SyncScope.global_()` or `SyncScope.scoped(ids)`; an empty id
    list is normalized to global.
    """
    partition_ids: Tuple[str, ...] = ()

    @classmethod
    def global_(cls) -> "SyncScope":
        return cls()

    @classmethod
    def scoped(cls, partition_ids: Iterable[str]) -> "SyncScope":
        # Keep first-seen order, drop duplicates and blanks
        stripped = (str(i).strip() for i in partition_ids)
        ids = tuple(dict.fromkeys(s for s in stripped if s))
        return cls(partition_ids=ids)

    @property
    def is_global(self) -> bool:
        return not self.partition_ids

    def __str__(self) -> str:
        if self.is_global:
            return "global"
        return f"guilds {', '.join(self.partition_ids)}"


def resolve_targets(scope: SyncScope) -> List[Target]:
    """Expand a scope into the ordered list of targets to reconcile."""
    if scope.is_global:
        return [GlobalTarget()]
    return [PartitionTarget(pid) for pid in scope.partition_ids]
