import pytest

from mhwgui.stringbuffer import StringBuffer


def test_append_layout():
    buf = StringBuffer()
    buf.append("ab")
    buf.append("c")
    assert buf.view() == b"ab\x00c\x00"
    assert buf.data() == buf.view()


def test_append_returns_offsets_of_strings():
    buf = StringBuffer()
    words = ["first", "second", "", "third"]
    positions = [buf.append(w) for w in words]
    assert positions[0] == 0
    for word, pos in zip(words, positions):
        encoded = word.encode()
        assert buf.view()[pos : pos + len(encoded)] == encoded
        assert buf[pos + len(encoded)] == 0
    assert len(buf) == sum(len(w) + 1 for w in words)


def test_append_raw_has_no_terminator():
    buf = StringBuffer()
    pos = buf.append_raw(b"xyz")
    assert pos == 0
    assert buf.view() == b"xyz"
    assert buf.append_raw("q") == len(b"xyz")


def test_find_whole_strings_only():
    buf = StringBuffer()
    buf.append("hello")
    pos = buf.append("world")
    assert buf.find("world") == pos
    assert buf.find("hello") == 0
    assert buf.find("ell") is None
    assert buf.find("wor") is None
    assert buf.find("missing") is None


def test_find_skips_partial_match_then_finds_later():
    buf = StringBuffer()
    buf.append("abcabc")
    pos = buf.append("abc")
    assert buf.find("abc") == pos


def test_contains():
    buf = StringBuffer()
    buf.append("name")
    assert "name" in buf
    assert b"name" in buf
    assert "nam" not in buf
    assert 5 not in buf


def test_append_no_duplicate_reuses_offset():
    buf = StringBuffer()
    first = buf.append_no_duplicate("alpha")
    second = buf.append_no_duplicate("beta")
    size = len(buf)
    assert buf.append_no_duplicate("alpha") == first
    assert buf.append_no_duplicate("beta") == second
    assert len(buf) == size


def test_append_no_duplicate_adds_substring():
    buf = StringBuffer()
    buf.append("alphabet")
    pos = buf.append_no_duplicate("alpha")
    assert pos > 0
    assert buf.find("alpha") == pos


def test_find_empty_in_empty_buffer():
    buf = StringBuffer()
    assert buf.find("") is None


def test_item_access_and_assignment():
    buf = StringBuffer()
    buf.append("ab")
    buf[0] = ord("z")
    assert buf.view() == b"zb\x00"
    assert list(buf) == list(b"zb\x00")
    assert buf[0:2] == b"zb"
    with pytest.raises(IndexError):
        buf[10]