from fastapi import APIRouter, HTTPException, Query

from wildrift.models.mapping import EntityType, LookupOut, MappingSummaryOut
from wildrift.services.mapping.loader import find_translation, get_dictionaries, lookup

router = APIRouter(tags=["mappings"])


def _dictionaries(force: bool = False):
    try:
        return get_dictionaries(force=force)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Database not found")


@router.get("/mappings", response_model=MappingSummaryOut)
def api_mapping_summary():
    dicts = _dictionaries()
    return {"policy": dicts.strategy, "counts": dicts.counts()}


@router.post("/mappings/reload", response_model=MappingSummaryOut)
def api_mapping_reload():
    dicts = _dictionaries(force=True)
    return {"policy": dicts.strategy, "counts": dicts.counts()}


@router.get("/mappings/{entity_type}/lookup", response_model=LookupOut)
def api_lookup(
    entity_type: EntityType,
    name: str = Query(..., min_length=1, description="English entity name, e.g. 'Lee Sin'"),
    locale: str = Query("cn", pattern="^(cn|tw)$"),
):
    dicts = _dictionaries()
    found = find_translation(dicts, entity_type, name, locale) is not None
    return {
        "entity_type": entity_type,
        "name": name,
        "locale": locale,
        "value": lookup(dicts, entity_type, name, locale),
        "found": found,
    }
