"""Reconciliation of decoded records into locale categories.

Submodules:
    results - MergeTarget, TargetFailure, TargetResult, MergeReport
    engine  - ReconciliationEngine, resolve_targets
    preview - ImportPreview, build_preview

Python 3.13+.
"""

from .engine import ReconciliationEngine, resolve_targets
from .preview import ImportPreview, build_preview, truncate_text
from .results import MergeReport, MergeTarget, TargetFailure, TargetResolution, TargetResult

__all__ = [
    "ImportPreview",
    "MergeReport",
    "MergeTarget",
    "ReconciliationEngine",
    "TargetFailure",
    "TargetResolution",
    "TargetResult",
    "build_preview",
    "resolve_targets",
    "truncate_text",
]
