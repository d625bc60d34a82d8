"""Localized name dictionaries (English -> cn / tw).

Dictionary files are JSON documents with a ``type`` discriminator:

- ``champions`` / ``summoners``: records under ``data``
- ``runes``: records under ``keystones`` plus every array directly under ``minor``
- ``items``: every array-valued top-level section (new categories need no code)

Each record contributes its normalized English name to the ``cn`` and ``tw``
tables when the matching translation is present. Several files may be
configured per entity type; collisions are settled by the dedupe policy
across all files of that type, in configuration order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from wildrift.config import get_database_path
from wildrift.db.json_store import load_database, read_json
from wildrift.models.mapping import LOCALES, EntityType, MappingFiles, MappingStrategy

from .telemetry import FileMissSink, MissSink

logger = logging.getLogger(__name__)

EN_KEYS = ("en", "EN", "name_en")
LOCALE_KEYS = {
    "cn": ("cn", "cn_name", "name_cn"),
    "tw": ("tw", "tw_name", "name_tw"),
}


def normalize_key(s: Any) -> str:
    return str(s or "").strip().lower()


def _first_value(record: Dict[str, Any], keys: Iterable[str]) -> Optional[str]:
    for k in keys:
        v = record.get(k)
        if v:
            return str(v)
    return None


@dataclass
class LocaleTables:
    cn: Dict[str, str] = field(default_factory=dict)
    tw: Dict[str, str] = field(default_factory=dict)

    def table(self, locale: str) -> Dict[str, str]:
        return self.cn if locale == "cn" else self.tw if locale == "tw" else {}

    def index_records(self, records: Any, policy: str = "first_wins") -> int:
        """Merge one record array into both tables. Returns the number of records with an English key."""
        if not isinstance(records, list):
            return 0
        indexed = 0
        for rec in records:
            if not isinstance(rec, dict):
                continue
            en = _first_value(rec, EN_KEYS)
            if not en:
                continue
            key = normalize_key(en)
            indexed += 1
            for locale in LOCALES:
                val = _first_value(rec, LOCALE_KEYS[locale])
                if not val:
                    continue
                tbl = self.table(locale)
                if policy == "first_wins" and key in tbl:
                    continue
                tbl[key] = val
        return indexed


# --- Record-array locations, one reader per dictionary type ---

def _data_sections(doc: Dict[str, Any]) -> List[Any]:
    return [doc.get("data")]


def _rune_sections(doc: Dict[str, Any]) -> List[Any]:
    sections = [doc.get("keystones")]
    minor = doc.get("minor")
    if isinstance(minor, dict):
        sections.extend(v for v in minor.values() if isinstance(v, list))
    return sections


def _item_sections(doc: Dict[str, Any]) -> List[Any]:
    return [v for v in doc.values() if isinstance(v, list)]


SECTION_READERS: Dict[EntityType, Callable[[Dict[str, Any]], List[Any]]] = {
    EntityType.CHAMPIONS: _data_sections,
    EntityType.SUMMONERS: _data_sections,
    EntityType.RUNES: _rune_sections,
    EntityType.ITEMS: _item_sections,
}


def merge_dictionary(tables: LocaleTables, doc: Dict[str, Any], policy: str) -> int:
    try:
        kind = EntityType(doc.get("type"))
    except ValueError:
        logger.warning("mapping file has unknown type %r, skip", doc.get("type"))
        return 0
    return sum(tables.index_records(section, policy) for section in SECTION_READERS[kind](doc))


def load_tables(paths: Iterable[str], policy: str = "first_wins") -> LocaleTables:
    tables = LocaleTables()
    for p in paths:
        if not os.path.isfile(p):
            logger.warning("mapping file missing, skip: %s", p)
            continue
        try:
            doc = read_json(p)
        except (OSError, ValueError) as exc:
            logger.warning("mapping file unreadable, skip: %s (%s)", p, exc)
            continue
        if not isinstance(doc, dict):
            logger.warning("mapping file is not a JSON object, skip: %s", p)
            continue
        count = merge_dictionary(tables, doc, policy)
        logger.debug("indexed %d records from %s", count, p)
    return tables


@dataclass
class Dictionaries:
    tables: Dict[EntityType, LocaleTables]
    strategy: MappingStrategy = field(default_factory=MappingStrategy)
    sink: Optional[MissSink] = None

    def lookup(self, entity_type: Union[EntityType, str], english_name: str, locale: str = "cn") -> str:
        return lookup(self, entity_type, english_name, locale)

    def counts(self) -> Dict[str, Dict[str, int]]:
        return {et.value: {"cn": len(t.cn), "tw": len(t.tw)} for et, t in self.tables.items()}


def find_translation(dicts: Dictionaries, entity_type: Union[EntityType, str], english_name: str, locale: str = "cn") -> Optional[str]:
    try:
        et = EntityType(entity_type)
    except ValueError:
        return None
    tables = dicts.tables.get(et)
    if tables is None:
        return None
    return tables.table(locale).get(normalize_key(english_name)) or None


def lookup(dicts: Dictionaries, entity_type: Union[EntityType, str], english_name: str, locale: str = "cn") -> str:
    """Translate an English name; on a miss, record it and apply the missing policy."""
    hit = find_translation(dicts, entity_type, english_name, locale)
    if hit:
        return hit
    if dicts.sink is not None:
        type_name = entity_type.value if isinstance(entity_type, EntityType) else str(entity_type)
        try:
            dicts.sink.record_miss(type_name, locale, english_name)
        except Exception as exc:
            logger.debug("miss sink failed: %s", exc)
    return english_name if dicts.strategy.missing_policy == "fallback_en" else ""


def _section(doc: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = doc.get(key)
    return value if isinstance(value, dict) else {}


def build_mappings(db_path: str) -> Dictionaries:
    """Build all locale tables from the dictionary files configured in the database document."""
    doc = load_database(db_path)
    db_dir = os.path.dirname(os.path.abspath(db_path))
    files = MappingFiles.model_validate(_section(doc, "mapping_files"))
    strategy = MappingStrategy.model_validate(_section(doc, "mapping_strategy"))
    base_abs = os.path.abspath(os.path.join(db_dir, files.base_dir))

    tables = {
        et: load_tables([os.path.join(base_abs, f) for f in files.files_for(et)], strategy.dedupe_policy)
        for et in EntityType
    }

    sink: Optional[MissSink] = None
    if strategy.telemetry and strategy.telemetry_file:
        sink = FileMissSink(os.path.abspath(os.path.join(db_dir, strategy.telemetry_file)))

    dicts = Dictionaries(tables=tables, strategy=strategy, sink=sink)
    logger.info("mappings built: %s", dicts.counts())
    return dicts


# --- Process-wide cache for the API ---
_DICTS_CACHE: Dict[str, Dictionaries] = {}


def get_dictionaries(db_path: Optional[str] = None, force: bool = False) -> Dictionaries:
    """Build dictionaries once per database path and reuse them until ``force``."""
    path = os.path.abspath(db_path or get_database_path())
    if force or path not in _DICTS_CACHE:
        _DICTS_CACHE[path] = build_mappings(path)
    return _DICTS_CACHE[path]
