"""Localized name mapping.

- loader.py: dictionary file merge into cn/tw tables, lookup with missing policy
- telemetry.py: miss sink (append-only text file)
"""

from .loader import Dictionaries, LocaleTables, build_mappings, lookup
from .telemetry import FileMissSink, MissSink

__all__ = [
    "Dictionaries",
    "FileMissSink",
    "LocaleTables",
    "MissSink",
    "build_mappings",
    "lookup",
]
