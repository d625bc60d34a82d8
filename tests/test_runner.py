import asyncio
import json

import httpx

from wildrift.services.patch import runner
from wildrift.services.patch.resolver import PatchResolver


def _write_db(tmp_path, **fields):
    (tmp_path / "mappings").mkdir()
    (tmp_path / "mappings" / "champions.json").write_text(
        json.dumps({"type": "champions", "data": [{"en": "Lee Sin", "cn": "李青"}]}, ensure_ascii=False),
        encoding="utf-8",
    )
    doc = {
        "mapping_files": {"champions": ["champions.json"]},
        "patch_check_sources": ["https://a.example.com/news/"],
    }
    doc.update(fields)
    path = tmp_path / "db.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_compare_command(capsys):
    assert runner.main(["compare", "6.2", "6.2a"]) == 0
    assert runner.main(["compare", "6.3", "6.2b"]) == 0
    assert runner.main(["compare", "junk", "6.2"]) == 0
    assert capsys.readouterr().out.split() == ["<", ">", "="]


def test_lookup_command(capsys, tmp_path):
    db = _write_db(tmp_path)
    assert runner.main(["--db", str(db), "lookup", "champions", "Lee Sin"]) == 0
    assert runner.main(["--db", str(db), "lookup", "champions", "Ahri", "--locale", "tw"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["李青", ""]


def test_check_command_exits_1_when_exhausted(tmp_path):
    db = _write_db(tmp_path, patch_check_sources=[])
    assert runner.main(["--db", str(db), "check"]) == 1


def test_bootstrap_updates_patch_and_builds_mappings(tmp_path):
    db = _write_db(tmp_path)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text='<a href="/news/patch-6-1">6.1 版本更新</a>')

    dicts = asyncio.run(runner.bootstrap(str(db), resolver=PatchResolver(transport=httpx.MockTransport(handler))))
    assert dicts.lookup("champions", "Lee Sin") == "李青"
    stored = json.loads(db.read_text(encoding="utf-8"))
    assert stored["patch_current"] == "6.1"
    assert stored["patch_latest_url"] == "https://a.example.com/news/patch-6-1"
