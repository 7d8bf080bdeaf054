import pytest

from nietzsche.pdf.pages import parse_page_range


def test_documented_example():
    assert parse_page_range("1,3-5,7") == ["1", "3", "4", "5", "7"]


def test_whitespace_is_trimmed():
    assert parse_page_range(" 2 , 4-4 ") == ["2", "4"]


def test_range_length_invariant():
    result = parse_page_range("10-20")
    assert len(result) == 11
    assert result[0] == "10" and result[-1] == "20"
    assert [int(p) for p in result] == sorted(int(p) for p in result)


def test_single_page_kept_verbatim():
    assert parse_page_range("007") == ["007"]


def test_empty_raises():
    with pytest.raises(ValueError, match="page range cannot be empty"):
        parse_page_range("")


def test_reversed_range_raises():
    with pytest.raises(ValueError, match="start page is greater than end page"):
        parse_page_range("5-3")


@pytest.mark.parametrize("bad", ["a", "1,,2", "1-", "-3", "1-2-3", "1;2", "٣"])
def test_bad_format_raises(bad):
    with pytest.raises(ValueError, match="invalid page range format"):
        parse_page_range(bad)