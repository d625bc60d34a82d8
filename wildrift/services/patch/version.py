"""Patch version tokens: parsing, ordering and discovery in free text.

A token looks like ``major.minor[letter]`` (``6.2``, ``6.2a``). Ordering is by
(major, minor, suffix rank) where a missing suffix ranks 0 and a letter ranks by
its ASCII code, so ``6.2 < 6.2a < 6.2b < 6.3``.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

_TOKEN_RE = re.compile(r"^(\d+)\.(\d+)([a-z])?$", re.IGNORECASE | re.ASCII)
# A letter followed by more letters is the start of a word, not a suffix.
VERSION_RE = re.compile(r"(\d+\.\d+(?:[a-z](?![a-z]))?)", re.IGNORECASE | re.ASCII)


class ParsedPatch(NamedTuple):
    major: int
    minor: int
    suf_rank: int


def parse_patch(token: Optional[str]) -> Optional[ParsedPatch]:
    m = _TOKEN_RE.match(str(token or "").strip())
    if not m:
        return None
    suffix = (m.group(3) or "").lower()
    return ParsedPatch(int(m.group(1)), int(m.group(2)), ord(suffix) if suffix else 0)


def compare_patch(a: Optional[str], b: Optional[str]) -> int:
    """Compare two tokens; negative, zero or positive like a classic cmp.

    Returns 0 when either side does not parse, so callers that only act on a
    strictly positive result never act on a malformed value.
    """
    pa, pb = parse_patch(a), parse_patch(b)
    if pa is None or pb is None:
        return 0
    if pa.major != pb.major:
        return pa.major - pb.major
    if pa.minor != pb.minor:
        return pa.minor - pb.minor
    return pa.suf_rank - pb.suf_rank


def find_patch(text: Optional[str]) -> Optional[str]:
    """Return the first version token inside ``text``, lowercased."""
    if not text:
        return None
    m = VERSION_RE.search(text)
    return m.group(1).lower() if m else None
