import pytest

from miniedit.buffer import TAB_STOP, TextBuffer, cx_to_rx
from miniedit.keys import Key


def make_buffer(*lines):
    buf = TextBuffer()
    for line in lines:
        buf.insert_row(buf.numrows, line)
    buf.dirty = 0
    return buf


def test_cx_to_rx_plain_text():
    assert cx_to_rx("abc", 2) == 2


def test_cx_to_rx_leading_tab():
    assert cx_to_rx("\tx", 1) == TAB_STOP
    assert cx_to_rx("\tx", 2) == TAB_STOP + 1


def test_cx_to_rx_tab_after_text_reaches_next_stop():
    assert cx_to_rx("ab\t", 3) == TAB_STOP


def test_typing_into_empty_buffer():
    buf = TextBuffer()
    for ch in "hi":
        buf.insert_char(ch)
    assert buf.rows == ["hi"]
    assert buf.cx == len("hi")
    assert buf.dirty > 0


def test_insert_char_accepts_codes():
    buf = make_buffer("ac")
    buf.cx = 1
    buf.insert_char(ord("b"))
    assert buf.rows == ["abc"]


def test_newline_splits_row():
    buf = make_buffer("hello")
    buf.cx = 2
    buf.insert_newline()
    assert buf.rows == ["he", "llo"]
    assert (buf.cy, buf.cx) == (1, 0)


def test_newline_at_column_zero_inserts_empty_row_above():
    buf = make_buffer("hello")
    buf.insert_newline()
    assert buf.rows == ["", "hello"]
    assert buf.cy == 1


def test_delete_char_in_row():
    buf = make_buffer("abc")
    buf.cx = 2
    buf.delete_char()
    assert buf.rows == ["ac"]
    assert buf.cx == 1


def test_delete_char_joins_lines():
    buf = make_buffer("ab", "cd")
    buf.cy, buf.cx = 1, 0
    buf.delete_char()
    assert buf.rows == ["abcd"]
    assert (buf.cy, buf.cx) == (0, len("ab"))


def test_delete_char_at_origin_does_nothing():
    buf = make_buffer("ab")
    buf.delete_char()
    assert buf.rows == ["ab"]
    assert buf.dirty == 0


def test_delete_char_past_last_row_does_nothing():
    buf = make_buffer("ab")
    buf.cy = 1
    buf.delete_char()
    assert buf.rows == ["ab"]


def test_insert_row_out_of_range_ignored():
    buf = make_buffer("a")
    buf.insert_row(5, "x")
    buf.insert_row(-1, "x")
    assert buf.rows == ["a"]
    assert buf.dirty == 0


def test_delete_row():
    buf = make_buffer("a", "b", "c")
    buf.delete_row(1)
    buf.delete_row(9)
    assert buf.rows == ["a", "c"]


def test_row_insert_char_clamps_position():
    buf = make_buffer("ab")
    buf.row_insert_char(0, 99, "z")
    assert buf.rows == ["abz"]


def test_row_delete_char_out_of_range_ignored():
    buf = make_buffer("ab")
    buf.row_delete_char(0, 2)
    assert buf.rows == ["ab"]


def test_right_at_end_of_line_wraps():
    buf = make_buffer("ab", "cd")
    buf.cx = 2
    buf.move_cursor(Key.ARROW_RIGHT)
    assert (buf.cy, buf.cx) == (1, 0)


def test_left_at_start_of_line_wraps_back():
    buf = make_buffer("ab", "cd")
    buf.cy = 1
    buf.move_cursor(Key.ARROW_LEFT)
    assert (buf.cy, buf.cx) == (0, len("ab"))


def test_down_snaps_column_to_shorter_row():
    buf = make_buffer("abcdef", "ab")
    buf.cx = 5
    buf.move_cursor(Key.ARROW_DOWN)
    assert (buf.cy, buf.cx) == (1, len("ab"))
    buf.move_cursor(Key.ARROW_DOWN)
    assert (buf.cy, buf.cx) == (buf.numrows, 0)
    buf.move_cursor(Key.ARROW_DOWN)
    assert buf.cy == buf.numrows


def test_up_stops_at_top():
    buf = make_buffer("a", "b")
    buf.move_cursor(Key.ARROW_UP)
    assert buf.cy == 0


def test_to_text_ends_every_row_with_newline():
    buf = make_buffer("a", "", "b")
    assert buf.to_text() == "a\n\nb\n"


def test_load_strips_line_endings(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"one\r\ntwo\nthree")
    buf = TextBuffer()
    buf.load(path)
    assert buf.rows == ["one", "two", "three"]
    assert buf.dirty == 0


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextBuffer().load(tmp_path / "missing.txt")


def test_write_and_load_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    buf = TextBuffer()
    for ch in "x\ty":
        buf.insert_char(ch)
    buf.insert_newline()
    buf.insert_char("\xe9")
    written = buf.write(path)
    assert written == len(buf.to_text())
    assert buf.dirty == 0
    again = TextBuffer()
    again.load(path)
    assert again.rows == buf.rows


def test_search_starts_after_current_row():
    buf = make_buffer("foo", "bar", "foo again")
    assert buf.search("foo", 1) == (2, 0)


def test_search_wraps_around():
    buf = make_buffer("xfoo", "bar", "baz")
    buf.cy = 2
    assert buf.search("foo", 1) == (0, 1)


def test_search_backwards():
    buf = make_buffer("foo", "bar", "foo")
    buf.cy = 1
    assert buf.search("foo", -1) == (0, 0)


def test_search_finds_current_row_last():
    buf = make_buffer("only")
    assert buf.search("nl", 1) == (0, 1)


def test_search_not_found():
    buf = make_buffer("abc", "def")
    assert buf.search("zzz", 1) is None
    assert TextBuffer().search("a", 1) is None