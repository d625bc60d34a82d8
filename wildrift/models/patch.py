from pydantic import BaseModel, Field
from typing import Any, List, Optional


class PatchStateOut(BaseModel):
    patch_current: Optional[str] = Field(None, description="Current patch token, e.g. '6.2a'")
    patch_latest_url: Optional[str] = None
    patch_published_at: Optional[str] = None
    patch_source: Optional[str] = Field(None, description="Listing page the patch was resolved from")
    patch_history: List[Any] = Field(
        default_factory=list,
        description="Newest first; {patch, url, at} entries plus whatever older entries were stored",
    )


class PatchRefreshOut(BaseModel):
    patch_current: Optional[str]
    committed: bool
    latest_seen: str
    source: str
