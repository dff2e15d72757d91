"""
Tests for pagination and identifier helpers.
"""

import pytest

from library_api.exceptions import ValidationError
from library_api.utils.pagination import (
    MAX_PAGE,
    build_page_meta,
    parse_positive_int,
    resolve_window,
    total_pages,
)
from library_api.utils.validators import is_valid_isbn, is_valid_uuid, validate_uuid


class TestParsePositiveInt:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3", 3),
            (" 7 ", 7),
            (5, 5),
            ("0", 10),
            ("-2", 10),
            ("abc", 10),
            ("2.5", 10),
            ("", 10),
            (None, 10),
            (True, 10),
        ],
    )
    def test_values(self, value, expected):
        assert parse_positive_int(value, 10) == expected


class TestResolveWindow:
    def test_offset(self):
        window = resolve_window("3", "10")

        assert window.page == 3
        assert window.limit == 10
        assert window.offset == 20

    def test_defaults(self):
        assert resolve_window(None, None) == (1, 10, 0)

    def test_limit_clamped_to_maximum(self):
        assert resolve_window("1", "500").limit == 100

    def test_page_clamped_to_maximum(self):
        window = resolve_window("99999999999999999999", "100")

        assert window.page == MAX_PAGE
        assert window.offset == (MAX_PAGE - 1) * 100


class TestTotalPages:
    @pytest.mark.parametrize(
        "total, limit, expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (23, 10, 3), (23, 0, 3)],
    )
    def test_ceiling(self, total, limit, expected):
        assert total_pages(total, limit) == expected


class TestBuildPageMeta:
    def test_example(self):
        meta = build_page_meta(23, "1", "10")

        assert meta.model_dump(by_alias=True) == {
            "total": 23,
            "page": 1,
            "limit": 10,
            "totalPages": 3,
        }

    def test_invalid_limit_matches_service_window(self):
        """Meta reports the limit that was actually used for the query."""
        meta = build_page_meta(23, "2", "zero")

        assert meta.limit == resolve_window("2", "zero").limit == 10
        assert meta.total_pages == 3

    def test_empty(self):
        meta = build_page_meta(0, "1", "10")

        assert meta.total == 0
        assert meta.total_pages == 0


class TestValidators:
    def test_uuid_roundtrip_lowercases(self):
        value = "0B6F2B8E-4A51-4C1E-9D55-2F4F0D1F6A3E"

        assert validate_uuid(value) == value.lower()

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "0b6f2b8e4a514c1e9d552f4f0d1f6a3e",
            "0b6f2b8e-4a51-6c1e-9d55-2f4f0d1f6a3e",
            "0b6f2b8e-4a51-4c1e-7d55-2f4f0d1f6a3e",
        ],
    )
    def test_uuid_rejected(self, value):
        assert not is_valid_uuid(value)
        with pytest.raises(ValidationError):
            validate_uuid(value)

    @pytest.mark.parametrize(
        "value",
        ["0306406152", "0-306-40615-2", "9780451524935", "978-0-451-52493-5"],
    )
    def test_isbn_accepted(self, value):
        assert is_valid_isbn(value)

    @pytest.mark.parametrize(
        "value",
        ["030640615", "97804515249", "978-0451524935X", "ISBN 0306406152", "12345678901234"],
    )
    def test_isbn_rejected(self, value):
        assert not is_valid_isbn(value)
