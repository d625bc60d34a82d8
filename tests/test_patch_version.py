from wildrift.services.patch.version import compare_patch, find_patch, parse_patch


def test_parse_patch_structure():
    assert parse_patch("6.2") == (6, 2, 0)
    assert parse_patch("6.2a") == (6, 2, ord("a"))
    assert parse_patch(" 6.2B ") == (6, 2, ord("b"))
    assert parse_patch("10.15").minor == 15


def test_parse_patch_rejects_malformed():
    for bad in (None, "", "6", "6.", "v6.2", "6.2.1", "6.2ab", "latest", "6,2"):
        assert parse_patch(bad) is None, bad


def test_compare_orders_suffixes_and_minors():
    ordered = ["6.1", "6.2", "6.2a", "6.2b", "6.3", "6.10", "7.0"]
    for lo, hi in zip(ordered, ordered[1:]):
        assert compare_patch(lo, hi) < 0, (lo, hi)
        assert compare_patch(hi, lo) > 0, (hi, lo)
    for x in ordered:
        assert compare_patch(x, x) == 0
    assert compare_patch("6.2A", "6.2a") == 0


def test_compare_with_unparseable_reports_no_order():
    assert compare_patch("garbage", "6.2") == 0
    assert compare_patch("6.2", None) == 0
    assert compare_patch("", "") == 0


def test_find_patch_in_text():
    assert find_patch("6.10 版本更新") == "6.10"
    assert find_patch("Wild Rift Patch 6.2A Notes") == "6.2a"
    assert find_patch("Patch 6.2 and more") == "6.2"
    assert find_patch("6.2and") == "6.2"
    assert find_patch("開發者日誌") is None
    assert find_patch(None) is None


def test_only_ascii_digits_are_version_digits():
    assert parse_patch("６.２") is None
    assert find_patch("６.２ 版本更新") is None
    assert find_patch("６.２ 與 6.3 版本更新") == "6.3"
    assert compare_patch("６.３", "6.2") == 0
