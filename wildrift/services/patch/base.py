from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


def now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


class PatchResolutionError(RuntimeError):
    """Raised when no configured source produced a patch candidate."""


@dataclass
class ListingHit:
    """A version-bearing link (or heading) found on a listing page."""

    url: str
    title: Optional[str]


@dataclass
class ArticleDetail:
    patch: str
    url: str
    title: Optional[str]
    published_at: Optional[str]


@dataclass
class PatchCandidate:
    patch: str
    url: str
    source: str
    title: Optional[str] = None
    published_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HistoryEntry:
    patch: str
    url: Optional[str]
    at: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PatchState:
    """Patch fields of the database document.

    The rest of the document (mapping config, sources, ...) is not part of the
    state and is left alone when the state is written back. History entries are
    kept exactly as stored; new entries are only ever prepended.
    """

    patch_current: Optional[str] = None
    patch_latest_url: Optional[str] = None
    patch_published_at: Optional[str] = None
    patch_source: Optional[str] = None
    patch_history: List[Any] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PatchState":
        history = doc.get("patch_history")
        return cls(
            patch_current=doc.get("patch_current") or None,
            patch_latest_url=doc.get("patch_latest_url"),
            patch_published_at=doc.get("patch_published_at"),
            patch_source=doc.get("patch_source"),
            patch_history=list(history) if isinstance(history, list) else [],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def merge_into(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``doc`` with the patch fields replaced by this state."""
        out = dict(doc)
        out.update(self.to_dict())
        return out
