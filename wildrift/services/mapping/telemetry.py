from __future__ import annotations

import logging
from typing import Protocol

from wildrift.services.patch.base import now_iso

logger = logging.getLogger(__name__)


class MissSink(Protocol):
    def record_miss(self, entity_type: str, locale: str, key: str) -> None: ...


class FileMissSink:
    """Append one line per lookup miss to a text file.

    Best-effort: write failures are logged and dropped so lookups never fail
    because of telemetry.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def record_miss(self, entity_type: str, locale: str, key: str) -> None:
        line = f"[{now_iso()}] {entity_type} :: {locale} :: {key}\n"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as exc:
            logger.debug("telemetry write failed (%s): %s", self.path, exc)
