from fastapi import APIRouter, HTTPException

from wildrift.config import get_database_path, get_fetch_timeout
from wildrift.db.json_store import load_database
from wildrift.models.patch import PatchRefreshOut, PatchStateOut
from wildrift.services.patch.base import PatchResolutionError, PatchState
from wildrift.services.patch.resolver import PatchResolver
from wildrift.services.patch.updater import refresh_patch

router = APIRouter(tags=["patch"])


def get_resolver() -> PatchResolver:
    return PatchResolver(timeout=get_fetch_timeout())


@router.get("/patch", response_model=PatchStateOut)
def api_get_patch():
    try:
        doc = load_database(get_database_path())
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Database not found")
    return PatchState.from_document(doc).to_dict()


@router.post("/patch/refresh", response_model=PatchRefreshOut)
async def api_refresh_patch():
    try:
        latest, result = await refresh_patch(get_database_path(), resolver=get_resolver())
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Database not found")
    except PatchResolutionError as exc:
        raise HTTPException(status_code=502, detail=f"Patch resolution failed: {exc}")
    return {
        "patch_current": result.current,
        "committed": result.committed,
        "latest_seen": latest.patch,
        "source": latest.source,
    }
