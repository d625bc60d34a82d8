import json
import os
import tempfile
from typing import Any, Dict


def read_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_database(path: str) -> Dict[str, Any]:
    """Read the whole database document. A missing file is a configuration error and propagates."""
    doc = read_json(path)
    if not isinstance(doc, dict):
        raise ValueError(f"Database document at '{path}' must be a JSON object")
    return doc


def save_database(path: str, doc: Dict[str, Any]) -> None:
    """Rewrite the database document atomically.

    The document is written to a temp file in the same directory and renamed
    over the original, so readers never see a partial file.
    """
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".wr-db-", suffix=".json", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(doc, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
