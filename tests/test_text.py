import pytest

from nodekit.text import (
    compare,
    find,
    slice_text,
    splice_text,
    to_capital_case,
    to_lower_case,
    to_slugify,
    to_upper_case,
    xor,
)


def test_slice_basic():
    assert slice_text("hello", 1, 3) == "el"


def test_slice_to_end():
    assert slice_text("hello", 2) == "hello"[2:]


def test_slice_negative_start():
    assert slice_text("hello", -3) == "hello"[-3:]


def test_slice_negative_stop():
    assert slice_text("hello", 0, -1) == "hello"[:-1]


@pytest.mark.parametrize("start,stop", [(2, 2), (3, 1), (9, 10), (-9, 3)])
def test_slice_empty_selection(start, stop):
    assert slice_text("hello", start, stop) == ""


def test_slice_empty_text():
    assert slice_text("", 0, 3) == ""


def test_slice_stop_past_end_is_clamped():
    assert slice_text("hello", 1, 100) == "hello"[1:]


def test_slice_bytes():
    assert slice_text(b"hello", 1, 3) == b"hello"[1:3]


def test_splice_removes_and_inserts():
    result, removed = splice_text("hello world", 0, 5, "howdy")
    assert removed == "hello"
    assert result == "howdy world"


def test_splice_without_value():
    result, removed = splice_text("hello", 1, 2)
    assert result + "" == "h" + "hello"[3:]
    assert removed == "hello"[1:3]


def test_splice_count_past_end():
    result, removed = splice_text("hello", 3, 100)
    assert removed == "hello"[3:]
    assert result == "hello"[:3]


def test_splice_out_of_range_keeps_text():
    assert splice_text("hello", 10, 2) == ("hello", "")


def test_splice_negative_count_rejected():
    with pytest.raises(ValueError):
        splice_text("hello", 0, -1)


def test_splice_invariant_lengths():
    text = "abcdefgh"
    result, removed = splice_text(text, 2, 3, "XY")
    assert len(result) == len(text) - len(removed) + 2


def test_find_present():
    assert find("Host: example.com", ": ") == (4, 6)


def test_find_absent():
    assert find("hello", "xyz") is None


def test_find_empty_inputs():
    assert find("", "a") is None
    assert find("abc", "") is None


def test_find_with_offset():
    text = "abcabc"
    span = find(text, "abc", 1)
    assert span is not None
    assert text[span[0] : span[1]] == "abc"
    assert span[0] >= 1


def test_compare_by_length_first():
    assert compare("zz", "aaa") == -1
    assert compare("aaa", "zz") == 1


def test_compare_same_length():
    assert compare("abc", "abc") == 0
    assert compare("abc", "abd") == -1
    assert compare("abd", "abc") == 1


def test_capital_case():
    assert to_capital_case("hello WORLD-foo") == "Hello World-Foo"


def test_capital_case_empty():
    assert to_capital_case("") == ""


def test_lower_and_upper_case_ascii():
    text = "Mixed Case 123!"
    assert to_lower_case(text) == text.lower()
    assert to_upper_case(text) == text.upper()


def test_case_round_trip_preserves_length():
    text = "Some Text"
    assert len(to_upper_case(to_lower_case(text))) == len(text)


def test_slugify_keeps_alnum_lowered():
    result = to_slugify("Hello, World 42!")
    assert result == to_lower_case("HelloWorld42")
    assert all(c.isalnum() for c in result)


def test_xor_round_trip_str():
    data = "secret message"
    key = "k" * len(data)
    assert xor(xor(data, key), key) == data


def test_xor_round_trip_bytes():
    data = b"\x00\x01\xff"
    key = b"\x0f\x0f\x0f\x0f"
    assert xor(xor(data, key), key) == data


def test_xor_with_self_is_zero():
    assert xor(b"abc", b"abc") == bytes(3)


def test_xor_short_key_rejected():
    with pytest.raises(ValueError):
        xor("abc", "a")