import pytest

from mhwgui.richtext import RichTextError, TaggedText, parse_rich_text


def test_plain_text_single_run():
    runs = parse_rich_text("hello world", 0x12345678)
    assert runs == [TaggedText(text="hello world", color=0x12345678)]


def test_empty_text():
    assert parse_rich_text("") == []


def test_default_color_when_omitted():
    runs = parse_rich_text("abc")
    assert [r.color for r in runs] == [0xFFFFFFFF]


def test_color_tag():
    runs = parse_rich_text("<C FF0000>red</C>", 0x1)
    assert [(r.text, r.color) for r in runs] == [("red", 0xFF0000)]


def test_nested_colors():
    runs = parse_rich_text("a<C 11>b<C 22>c</C>d</C>e", 0x5)
    assert [(r.text, r.color) for r in runs] == [
        ("a", 0x5),
        ("b", 0x11),
        ("c", 0x22),
        ("d", 0x11),
        ("e", 0x5),
    ]


def test_color_with_hex_prefix():
    runs = parse_rich_text("<C 0xAB>z</C>", 0)
    assert [(r.text, r.color) for r in runs] == [("z", 0xAB)]


def test_trailing_run_keeps_open_flags():
    runs = parse_rich_text("<B>x")
    assert len(runs) == 1
    assert runs[0].text == "x"
    assert runs[0].bold is True
    assert runs[0].italic is False


def test_trailing_run_after_several_tags():
    runs = parse_rich_text("<I><U><S>tail")
    assert runs[-1].text == "tail"
    assert (runs[-1].italic, runs[-1].underline, runs[-1].strike_through) == (True, True, True)


def test_unknown_tags_are_literal():
    text = "<X>abc</Y>def"
    runs = parse_rich_text(text)
    assert "".join(r.text for r in runs) == text


def test_tags_are_removed_from_text():
    runs = parse_rich_text("one<B>two</B>three<C 10>four</C>five")
    assert "".join(r.text for r in runs) == "onetwothreefourfive"


def test_too_short_for_tag_is_literal():
    runs = parse_rich_text("<B>")
    assert [r.text for r in runs] == ["<B>"]


def test_missing_closing_color_tag():
    with pytest.raises(RichTextError):
        parse_rich_text("<C FF>never closed")


def test_closing_color_without_opening():
    with pytest.raises(RichTextError):
        parse_rich_text("text</C>more")


def test_unterminated_color_tag():
    with pytest.raises(RichTextError):
        parse_rich_text("ab<C FF")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_rich_text("x</C>yz")