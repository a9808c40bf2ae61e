"""Tests for start/end resolution and clamping."""

import pytest

from collab.errors import MissingParameters, PaginationError, ParseError, StartGreaterThanEnd
from collab.pagination import Pagination, extract_pagination, parse_bound


class TestExtractPagination:
    def test_no_parameters_is_unbounded(self):
        assert extract_pagination({}) == Pagination(start=0, end=None)

    def test_other_parameters_are_ignored(self):
        assert extract_pagination({"sort": "asc"}) == Pagination()

    def test_both_parameters(self):
        assert extract_pagination({"start": "1", "end": "4"}) == Pagination(start=1, end=4)

    def test_equal_bounds_are_allowed(self):
        assert extract_pagination({"start": "3", "end": "3"}) == Pagination(start=3, end=3)

    @pytest.mark.parametrize("params", [{"start": "2"}, {"end": "2"}, {"start": "x"}])
    def test_exactly_one_parameter_is_missing(self, params):
        with pytest.raises(MissingParameters) as exc_info:
            extract_pagination(params)
        assert str(exc_info.value) == "Missing parameter"

    def test_start_greater_than_end_carries_pagination(self):
        with pytest.raises(StartGreaterThanEnd) as exc_info:
            extract_pagination({"start": "3", "end": "1"})
        assert exc_info.value.pagination == Pagination(start=3, end=1)
        assert str(exc_info.value).startswith("Start greater end")
        assert "start=3" in str(exc_info.value)
        assert "end=1" in str(exc_info.value)

    @pytest.mark.parametrize(
        "start,end", [(1, 0), (3, 1), (10, 9), (10**20, 0), (10**20, 10**20 - 1)]
    )
    def test_any_start_above_end_is_rejected(self, start, end):
        with pytest.raises(StartGreaterThanEnd) as exc_info:
            extract_pagination({"start": str(start), "end": str(end)})
        assert exc_info.value.pagination == Pagination(start=start, end=end)

    @pytest.mark.parametrize(
        "start,end",
        [("abc", "5"), ("1", "abc"), ("-1", "5"), ("1.5", "2"), (" 1", "2"), ("", "2"), ("1", "")],
    )
    def test_unparseable_bound(self, start, end):
        with pytest.raises(ParseError) as exc_info:
            extract_pagination({"start": start, "end": end})
        assert str(exc_info.value).startswith("Cannot parse parameter: ")

    def test_parse_error_wins_over_ordering(self):
        with pytest.raises(ParseError):
            extract_pagination({"start": "9", "end": "x"})

    def test_all_failures_share_a_base(self):
        for params in ({"start": "1"}, {"start": "2", "end": "1"}, {"start": "a", "end": "1"}):
            with pytest.raises(PaginationError):
                extract_pagination(params)


class TestParseBound:
    @pytest.mark.parametrize("raw,expected", [("0", 0), ("7", 7), ("+7", 7), ("007", 7)])
    def test_valid(self, raw, expected):
        assert parse_bound(raw) == expected

    def test_very_large_value(self):
        assert parse_bound("99999999999999999999999") == 99999999999999999999999

    def test_digit_count_beyond_int_limit(self):
        with pytest.raises(ParseError) as exc_info:
            parse_bound("1" * 5000)
        assert exc_info.value.detail == "number too large to fit in target type"

    def test_empty_detail(self):
        with pytest.raises(ParseError) as exc_info:
            parse_bound("")
        assert exc_info.value.detail == "cannot parse integer from empty string"

    @pytest.mark.parametrize("raw", ["abc", "-0", "1e3", "٣", "²", "+"])
    def test_invalid_digit_detail(self, raw):
        with pytest.raises(ParseError) as exc_info:
            parse_bound(raw)
        assert exc_info.value.detail == "invalid digit found in string"


class TestBounds:
    @pytest.mark.parametrize("length", [0, 1, 5, 12])
    @pytest.mark.parametrize("start,end", [(0, 0), (0, 3), (2, 10), (4, 4), (5, 5), (7, 20)])
    def test_range_is_clamped(self, length, start, end):
        lo, hi = Pagination(start=start, end=end).bounds(length)
        assert (lo, hi) == (min(start, length), min(end, length))
        assert 0 <= lo <= hi <= length

    @pytest.mark.parametrize("length", [0, 1, 5])
    def test_unbounded_covers_everything(self, length):
        assert Pagination().bounds(length) == (0, length)

    def test_huge_end_does_not_overflow(self):
        assert Pagination(start=1, end=10**30).bounds(3) == (1, 3)

    def test_apply_slices(self):
        items = ["a", "b", "c", "d", "e"]
        assert Pagination(start=2, end=10).apply(items) == ["c", "d", "e"]
        assert Pagination(start=5, end=9).apply(items) == []
        assert Pagination().apply(items) == items

    def test_inverted_pagination_gives_empty_range(self):
        # only reachable by building Pagination directly
        assert Pagination(start=3, end=1).bounds(5) == (3, 3)
