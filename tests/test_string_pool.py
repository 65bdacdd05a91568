import pytest

from aiwdisasm import FormatError, StringPool, make_decoder
from aiwdisasm.string_pool import parse_string_pool


def test_entries_are_keyed_by_running_offset() -> None:
    entries = parse_string_pool(b"abc\0\0de\0", make_decoder("ascii"))
    assert entries == {0: "abc", 4: "", 5: "de"}


def test_empty_pool_has_no_entries() -> None:
    assert parse_string_pool(b"", make_decoder("ascii")) == {}


def test_unterminated_entry_reports_absolute_address() -> None:
    with pytest.raises(FormatError) as excinfo:
        parse_string_pool(b"abc\0xy", make_decoder("ascii"), base=0x100)
    assert excinfo.value.address == 0x104


def test_legacy_multibyte_codec() -> None:
    text = "テスト文字列"
    data = text.encode("shift_jis") + b"\0" + "次".encode("shift_jis") + b"\0"
    pool = StringPool.from_bytes(data, make_decoder("shift_jis"))

    assert pool[0] == text
    assert pool[len(text.encode("shift_jis")) + 1] == "次"


def test_indexing_is_repeatable() -> None:
    data = b"one\0two\0\0three\0"
    decoder = make_decoder("ascii")
    first = StringPool.from_bytes(data, decoder, base=0x40)
    second = StringPool.from_bytes(data, decoder, base=0x40)

    assert dict(first) == dict(second)
    assert list(first) == [0, 4, 8, 9]


def test_addresses_include_pool_base() -> None:
    pool = StringPool.from_bytes(b"a\0bc\0", make_decoder("ascii"), base=0x30)

    assert pool.address_of(2) == 0x32
    assert pool.items_by_address() == [(0x30, "a"), (0x32, "bc")]
    assert pool.get(1) is None


def test_undecodable_entry_reports_absolute_address() -> None:
    with pytest.raises(FormatError) as excinfo:
        parse_string_pool(b"ok\0\xff\0", make_decoder("ascii", "strict"), base=0x20)

    assert excinfo.value.address == 0x23
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
