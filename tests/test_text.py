import pytest

from aiwdisasm import escape_text, make_decoder


def test_escape_keeps_listing_on_one_line() -> None:
    escaped = escape_text('line1\nline2\r\t"quoted"\\end')
    assert escaped == 'line1\\nline2\\r\\t\\"quoted\\"\\\\end'
    assert "\n" not in escaped


def test_escape_other_control_characters() -> None:
    assert escape_text("\x01\x7f") == "\\x01\\x7F"
    assert escape_text("a\u2028b") == "a\\u2028b"
    assert escape_text("日本語") == "日本語"


def test_decoder_rejects_unknown_codec() -> None:
    with pytest.raises(LookupError):
        make_decoder("no-such-codec")


def test_decoder_replaces_invalid_bytes_by_default() -> None:
    decode = make_decoder("ascii")
    assert decode(b"ok\xff") == "ok\ufffd"


def test_decoder_strict_mode_raises() -> None:
    decode = make_decoder("ascii", "strict")
    with pytest.raises(UnicodeDecodeError):
        decode(b"\xff")


def test_decoder_gbk() -> None:
    decode = make_decoder("gbk")
    assert decode("中文".encode("gbk")) == "中文"
