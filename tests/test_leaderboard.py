import json

from spaceimpact.leaderboard import load_leaderboard, merge_score, save_leaderboard


def test_merge_inserts_in_order():
    assert merge_score([500, 300, 100], 150) == [500, 300, 150, 100]


def test_merge_caps_at_ten():
    top = list(range(1000, 0, -100))
    merged = merge_score(top, 550)
    assert len(merged) == 10
    assert 550 in merged
    assert merged[-1] == 200


def test_round_trip(tmp_path):
    path = str(tmp_path / "board.json")
    top = merge_score([500, 300, 100], 150)
    save_leaderboard(top, path)
    assert load_leaderboard(path) == [500, 300, 150, 100]
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["top"] == [500, 300, 150, 100]
    assert "last_updated" in data


def test_missing_file_is_empty(tmp_path):
    assert load_leaderboard(str(tmp_path / "nope.json")) == []


def test_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "board.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_leaderboard(str(path)) == []


def test_wrong_structure_is_empty(tmp_path):
    path = tmp_path / "board.json"
    for payload in ('{"top": "x"}', "[1, 2, 3]", '{"top": [1, "two"]}', '{"top": [true]}'):
        path.write_text(payload, encoding="utf-8")
        assert load_leaderboard(str(path)) == []


def test_load_sorts_and_truncates(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps({"top": list(range(15))}), encoding="utf-8")
    assert load_leaderboard(str(path)) == list(range(14, 4, -1))


def test_save_failure_is_not_fatal(tmp_path):
    # a directory cannot be opened for writing
    save_leaderboard([1, 2, 3], str(tmp_path))
