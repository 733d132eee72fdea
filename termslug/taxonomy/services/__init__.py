from .reconciler import (
    EXCLUDED_TAXONOMIES,
    ChangeRecord,
    Mode,
    ReconcileFailure,
    ReconcileResult,
    reconcile,
)
from .store import DjangoTermStore, TermRecord, TermStore

__all__ = [
    "EXCLUDED_TAXONOMIES",
    "ChangeRecord",
    "DjangoTermStore",
    "Mode",
    "ReconcileFailure",
    "ReconcileResult",
    "TermRecord",
    "TermStore",
    "reconcile",
]
