"""Patch tracking.

Structure:
- version.py: version token parsing, ordering and discovery in text
- base.py: record types (listing hits, candidates, persisted state)
- extractor.py: listing/article HTML heuristics (selectolax)
- resolver.py: sequential multi-source resolution over httpx
- updater.py: monotonic state update + database rewrite
- runner.py: command line entrypoint (bootstrap, check, lookup, compare)
"""

from .base import PatchCandidate, PatchResolutionError, PatchState
from .version import compare_patch, find_patch, parse_patch

__all__ = [
    "PatchCandidate",
    "PatchResolutionError",
    "PatchState",
    "compare_patch",
    "find_patch",
    "parse_patch",
]
