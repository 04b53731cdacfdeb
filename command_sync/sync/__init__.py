"""
Sync Module
Reconciliation of local command definitions with the remote registry.
"""

from .classifier import is_publishable, PUBLISHABLE_TYPES
from .options import transform_options, PLACEHOLDER_DESCRIPTION
from .scope import SyncScope, resolve_targets
from .results import SyncStatus, SyncResult, SyncReport, TargetFailure
from .reconciler import RegistryReconciler, build_payload
from .orchestrator import CommandSyncer

__all__ = [
    "is_publishable",
    "PUBLISHABLE_TYPES",
    "transform_options",
    "PLACEHOLDER_DESCRIPTION",
    "SyncScope",
    "resolve_targets",
    "SyncStatus",
    "SyncResult",
    "SyncReport",
    "TargetFailure",
    "RegistryReconciler",
    "build_payload",
    "CommandSyncer",
]
