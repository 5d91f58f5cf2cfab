from driftpatch.utils.text import (
    detect_eol,
    join_lines,
    leading_ws,
    split_lines,
    split_lines_keepends,
    strip_think_blocks,
)

def test_split_lines_drops_single_trailing_terminator():
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\nb") == ["a", "b"]

def test_split_lines_keeps_inner_blank_lines():
    assert split_lines("a\n\n\nb\n\n") == ["a", "", "", "b", ""]

def test_split_lines_lone_carriage_return_is_not_a_break():
    assert split_lines("a\r\nb\rc\nd") == ["a", "b\rc", "d"]

def test_split_lines_empty_input():
    assert split_lines("") == []
    assert split_lines("\n") == [""]

def test_split_lines_keepends_records_each_terminator():
    assert split_lines_keepends("a\r\nb\rc\nd") == (["a", "b\rc", "d"], ["\r\n", "\n", ""])
    assert split_lines_keepends("a\n\n") == (["a", ""], ["\n", "\n"])
    assert split_lines_keepends("") == ([], [])

def test_split_and_join_are_inverse_on_mixed_text():
    for text in ["a\r\nb\nc", "x\n\r\n\ry\r\n", "progress\r50%\n", "\n\n"]:
        assert join_lines(*split_lines_keepends(text)) == text

def test_detect_eol_picks_the_most_common_terminator():
    assert detect_eol("a\r\nb\r\nc\n") == "\r\n"
    assert detect_eol("a\r\nb\nc\n") == "\n"
    assert detect_eol("a\r\nb\n") == "\n"
    assert detect_eol("a\nb") == "\n"
    assert detect_eol("single line") == "\n"

def test_detect_eol_ignores_lone_carriage_returns():
    assert detect_eol("a\rb\rc") == "\n"
    assert detect_eol("progress\r50%\r\n") == "\r\n"

def test_leading_ws_tabs_and_spaces_only():
    assert leading_ws("\t  x = 1") == "\t  "
    assert leading_ws("x") == ""
    assert leading_ws("   ") == "   "

def test_strip_think_blocks_multiline():
    assert strip_think_blocks("<think>\nStep 1\nStep 2\n</think>\nResult") == "\nResult"

def test_strip_think_blocks_none_safe():
    assert strip_think_blocks(None) == ""
    assert strip_think_blocks("Just normal text.") == "Just normal text."
