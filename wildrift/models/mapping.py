import logging
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class EntityType(str, Enum):
    CHAMPIONS = "champions"
    RUNES = "runes"
    ITEMS = "items"
    SUMMONERS = "summoners"


LOCALES = ("cn", "tw")

FileEntry = Union[str, List[str], None]

DEFAULT_BASE_DIR = "./mappings/"


class MappingFiles(BaseModel):
    """`mapping_files` section of the database document."""
    base_dir: str = Field(DEFAULT_BASE_DIR, description="Dictionary directory, relative to the database file")
    champions: FileEntry = None
    runes: FileEntry = None
    items: FileEntry = None
    summoners: FileEntry = None

    @field_validator("base_dir", mode="before")
    @classmethod
    def _default_base_dir(cls, v: Any) -> Any:
        return v or DEFAULT_BASE_DIR

    def files_for(self, entity_type: EntityType) -> List[str]:
        entry = getattr(self, entity_type.value)
        if not entry:
            return []
        return [entry] if isinstance(entry, str) else list(entry)


class MappingStrategy(BaseModel):
    """`mapping_strategy` section of the database document.

    Hand-edited documents are accepted as leniently as possible: null means
    "use the default", and an unrecognised policy name degrades to the
    non-default behaviour (``last_wins`` / ``empty``) with a warning.
    """
    dedupe_policy: Literal["first_wins", "last_wins"] = "first_wins"
    telemetry: bool = False
    telemetry_file: Optional[str] = None
    missing_policy: Literal["fallback_en", "empty"] = "empty"

    @field_validator("dedupe_policy", mode="before")
    @classmethod
    def _coerce_dedupe(cls, v: Any) -> Any:
        if v is None:
            return "first_wins"
        if v not in ("first_wins", "last_wins"):
            logger.warning("unknown dedupe_policy %r; using last_wins", v)
            return "last_wins"
        return v

    @field_validator("missing_policy", mode="before")
    @classmethod
    def _coerce_missing(cls, v: Any) -> Any:
        if v is None:
            return "empty"
        if v not in ("fallback_en", "empty"):
            logger.warning("unknown missing_policy %r; using empty", v)
            return "empty"
        return v

    @field_validator("telemetry", mode="before")
    @classmethod
    def _coerce_telemetry(cls, v: Any) -> Any:
        return False if v is None else v


class LookupOut(BaseModel):
    entity_type: EntityType
    name: str
    locale: str
    value: str
    found: bool


class MappingSummaryOut(BaseModel):
    policy: MappingStrategy
    counts: Dict[str, Dict[str, int]]
