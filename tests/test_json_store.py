import json
import os
import tempfile

import pytest

from wildrift.db.json_store import load_database, save_database


def test_save_database_rewrites_whole_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "db.json")
        save_database(path, {"patch_current": "6.2", "note": "李青"})
        save_database(path, {"patch_current": "6.3", "note": "盲僧"})
        assert load_database(path) == {"patch_current": "6.3", "note": "盲僧"}
        with open(path, "r", encoding="utf-8") as f:
            assert "\\u" not in f.read()
        assert os.listdir(tmpdir) == ["db.json"]


def test_load_database_requires_object():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "db.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump([1, 2], f)
        with pytest.raises(ValueError):
            load_database(path)
        with pytest.raises(FileNotFoundError):
            load_database(os.path.join(tmpdir, "missing.json"))
