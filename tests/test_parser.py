"""Tests for YSO text parsing."""

import io

import pytest

from pyyso import (
    EmptyName,
    MalformedInput,
    UnclosedSectionHeader,
    UnterminatedMultilineValue,
    YsoObject,
    loads,
    parse,
)


# ---------------------------------------------------------------------------
# Sections and pairs
# ---------------------------------------------------------------------------

def test_parse_stream():
    obj = parse(io.StringIO("[s]\nk:v\n"))
    assert isinstance(obj, YsoObject)
    assert obj == {"s": {"k": "v"}}

def test_empty_document():
    assert loads("") == {}

def test_general_scenario():
    src = '[general]\nname:demo\ndesc:"""\nhello\nworld\n"""\n'
    obj = loads(src)
    assert obj == {"general": {"name": "demo", "desc": "hello\nworld"}}

def test_values_and_keys_are_trimmed():
    obj = loads("[s]\n   key  :   some value  \n")
    assert obj["s"]["key"] == "some value"

def test_value_keeps_later_colons():
    assert loads("[s]\nurl:http://host:80/\n")["s"]["url"] == "http://host:80/"

def test_section_name_is_trimmed():
    assert "general" in loads("[  general ]\n")

def test_header_with_surrounding_text():
    assert list(loads("x [a] y\nk:v\n")) == ["a"]

def test_bracketed_value_stays_a_pair():
    obj = loads("[s]\nlist:[1,2]\n")
    assert obj == {"s": {"list": "[1,2]"}}

def test_header_may_hold_colon():
    assert loads("[a:b]\nk:v\n") == {"a:b": {"k": "v"}}

def test_key_with_brackets_stays_a_pair():
    obj = loads("[s]\na[0]:v\nb[:w\n")
    assert obj == {"s": {"a[0]": "v", "b[": "w"}}

def test_lines_before_first_section_are_ignored():
    obj = loads("generated by tool\nk:v\n\n[s]\na:1\n")
    assert obj == {"s": {"a": "1"}}

def test_lines_without_colon_are_ignored():
    assert loads("[s]\njust words\nk:v\n") == {"s": {"k": "v"}}

def test_several_sections():
    obj = loads("[a]\nx:1\n\n[b]\ny:2\n")
    assert obj == {"a": {"x": "1"}, "b": {"y": "2"}}

def test_empty_section():
    assert loads("[a]\n[b]\nk:v\n") == {"a": {}, "b": {"k": "v"}}

def test_repeated_section_overwrites():
    obj = loads("[s]\na:1\n[s]\nb:2\n")
    assert obj == {"s": {"b": "2"}}

def test_repeated_key_last_wins():
    assert loads("[s]\nk:1\nk:2\n")["s"]["k"] == "2"

def test_crlf_line_endings():
    obj = loads('[s]\r\nk:v\r\nm:"""\r\na\r\nb\r\n"""\r\n')
    assert obj == {"s": {"k": "v", "m": "a\nb"}}


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def test_comment_lines_are_skipped():
    src = "# top\n; also top\n[s]\n# k:hidden\n; j:hidden\nk:v\n"
    assert loads(src) == {"s": {"k": "v"}}

def test_commented_header_is_skipped():
    assert loads("# [old]\n[new]\n") == {"new": {}}

def test_indented_comment_is_skipped():
    assert loads("[s]\n    # k:hidden\n") == {"s": {}}


# ---------------------------------------------------------------------------
# Multi-line values
# ---------------------------------------------------------------------------

def test_multiline_markers_on_own_lines():
    obj = loads('[s]\nk:"""\nline1\nline2\nline3\n"""\n')
    assert obj["s"]["k"] == "line1\nline2\nline3"

def test_multiline_markers_glued_to_text():
    obj = loads('[s]\nk:"""line1\nline2\nline3"""\n')
    assert obj["s"]["k"] == "line1\nline2\nline3"

def test_multiline_closed_on_opening_line():
    assert loads('[s]\nk:"""abc"""\n')["s"]["k"] == "abc"

def test_multiline_lines_are_verbatim():
    obj = loads('[s]\nk:"""\n  indented\n\ttab  \n"""\n')
    assert obj["s"]["k"] == "  indented\n\ttab  "

def test_multiline_opening_text_is_verbatim():
    assert loads('[s]\nk:"""a  \nb"""\n')["s"]["k"] == "a  \nb"

def test_multiline_keeps_blank_lines():
    assert loads('[s]\nk:"""\na\n\nb\n"""\n')["s"]["k"] == "a\n\nb"

def test_multiline_ignores_text_after_closing_mark():
    assert loads('[s]\nk:"""\na\nb""" trailing\n')["s"]["k"] == "a\nb"

def test_multiline_content_is_not_structure():
    src = '[s]\nk:"""\n[other]\n# not a comment\nx:y\n"""\nafter:1\n'
    obj = loads(src)
    assert obj == {"s": {"k": "[other]\n# not a comment\nx:y", "after": "1"}}


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------

def test_unclosed_header():
    with pytest.raises(MalformedInput):
        loads("[unclosed\n")

def test_unclosed_header_reports_line():
    with pytest.raises(UnclosedSectionHeader) as exc:
        loads("[ok]\nk:v\n[broken\n")
    assert exc.value.line_no == 3
    assert exc.value.line == "[broken"

def test_unterminated_multiline():
    with pytest.raises(MalformedInput):
        loads('[S]\nk:"""\nabc\n')

def test_unterminated_multiline_reports_opening_line():
    with pytest.raises(UnterminatedMultilineValue) as exc:
        loads('[S]\nk:"""\nabc\n')
    assert exc.value.line_no == 2
    assert "line 2" in str(exc.value)

def test_empty_section_name():
    with pytest.raises(EmptyName):
        loads("[]\n")
    with pytest.raises(EmptyName):
        loads("[s]\n[   ]\n")

def test_empty_key():
    with pytest.raises(EmptyName):
        loads("[s]\n:value\n")

def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        loads("[unclosed\n")
