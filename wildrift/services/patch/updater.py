"""Monotonic patch-state updates.

The persisted patch only moves forward: a candidate is committed when nothing is
stored yet or when it compares strictly greater than the stored patch. Stale
sources, re-published old articles and malformed tokens leave the state alone.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from wildrift.db.json_store import load_database, save_database

from .base import HistoryEntry, PatchCandidate, PatchState, now_iso
from .resolver import PatchResolver
from .version import compare_patch, parse_patch

logger = logging.getLogger(__name__)


@dataclass
class PatchUpdate:
    state: PatchState
    committed: bool

    @property
    def current(self) -> Optional[str]:
        return self.state.patch_current


def apply_candidate(state: PatchState, candidate: PatchCandidate, *, at: Optional[str] = None) -> PatchUpdate:
    """Return the state after considering ``candidate``; the input state is not mutated."""
    cur = state.patch_current
    if cur and parse_patch(cur) is None:
        logger.warning("stored patch %r is not a valid version token; keeping it", cur)
    if cur and compare_patch(candidate.patch, cur) <= 0:
        return PatchUpdate(state=state, committed=False)

    entry = HistoryEntry(patch=candidate.patch, url=candidate.url, at=at or now_iso())
    new_state = dataclasses.replace(
        state,
        patch_current=candidate.patch,
        patch_latest_url=candidate.url,
        patch_published_at=candidate.published_at or None,
        patch_source=candidate.source,
        patch_history=[entry.to_dict()] + list(state.patch_history),
    )
    return PatchUpdate(state=new_state, committed=True)


async def refresh_patch(db_path: str, *, resolver: Optional[PatchResolver] = None) -> Tuple[PatchCandidate, PatchUpdate]:
    """Resolve the latest patch and persist it if it is newer.

    The database document is read once and rewritten only on commit; both
    file operations run in a worker thread so the event loop stays free.
    Raises PatchResolutionError when no source produced a candidate.
    """
    doc = await asyncio.to_thread(load_database, db_path)
    latest = await (resolver or PatchResolver()).resolve(doc.get("patch_check_sources") or [])

    result = apply_candidate(PatchState.from_document(doc), latest)
    if result.committed:
        await asyncio.to_thread(save_database, db_path, result.state.merge_into(doc))
        logger.info("PATCH updated -> %s", result.current)
    else:
        logger.info("PATCH keep %s (latest seen: %s)", result.current, latest.patch)
    return latest, result


async def update_patch_info(db_path: str, *, resolver: Optional[PatchResolver] = None) -> Optional[str]:
    """Resolve, apply and persist; returns the now-current patch."""
    _, result = await refresh_patch(db_path, resolver=resolver)
    return result.current
