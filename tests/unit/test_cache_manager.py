# tests/unit/test_cache_manager.py
import hashlib
import os

from core.utils.cache_manager import make_cache_key, get_cached, put_cached, clear_cache


def test_cache_key_is_sha1_of_request():
    url = "https://api.example.com/forecast/key/40.726911,-73.218542"
    assert make_cache_key(url) == hashlib.sha1(url.encode("utf-8")).hexdigest()
    assert make_cache_key(url) == make_cache_key(url)
    assert make_cache_key(url) != make_cache_key(url + "?units=si")


def test_get_absent_returns_none(tmp_path):
    assert get_cached("missing", tmp_path) is None
    assert get_cached("missing", tmp_path / "not-created") is None


def test_put_then_get(tmp_path):
    cache_dir = tmp_path / "cache"
    path = put_cached("abc", b'{"daily": {}}', cache_dir)
    assert path == cache_dir / "abc"
    assert get_cached("abc", cache_dir) == b'{"daily": {}}'


def test_put_overwrites_single_entry(tmp_path):
    put_cached("abc", b"old", tmp_path)
    put_cached("abc", b"new", tmp_path)
    assert get_cached("abc", tmp_path) == b"new"
    assert len(list(tmp_path.iterdir())) == 1


def test_empty_entry_is_ignored(tmp_path):
    (tmp_path / "abc").write_bytes(b"")
    assert get_cached("abc", tmp_path) is None


def test_clear_cache_keeps_newest(tmp_path):
    for i, name in enumerate(["a", "b", "c"]):
        path = put_cached(name, b"x", tmp_path)
        os.utime(path, (1000 + i, 1000 + i))

    assert clear_cache(tmp_path, keep_last_n=1) == 2
    assert [p.name for p in tmp_path.iterdir()] == ["c"]

    assert clear_cache(tmp_path) == 1
    assert list(tmp_path.iterdir()) == []


def test_clear_missing_dir(tmp_path):
    assert clear_cache(tmp_path / "nope") == 0
