"""Unit tests for the inventory search service."""

import pytest

from ims.domain.service.inventory_search import parse_int, search_parts, search_products
from tests.fakes import make_product, sample_parts


class TestParseInt:

    @pytest.mark.parametrize("text,expected", [("7", 7), ("-3", -3), ("+12", 12), ("007", 7)])
    def test_integers(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", " 7", "7 ", "1_000", "3.5", "seven", "0x1f"])
    def test_non_integers(self, text):
        assert parse_int(text) is None

    def test_overlong_digit_run_is_not_a_number(self):
        assert parse_int("9" * 5000) is None


class TestSearchParts:

    def test_empty_query_returns_everything_in_order(self):
        parts = sample_parts()
        result = search_parts(parts, "")
        assert result == parts
        assert result is not parts

    def test_id_query_returns_single_part(self):
        parts = sample_parts()
        assert search_parts(parts, "7") == [parts[2]]

    def test_unknown_id_returns_empty_list(self):
        assert search_parts(sample_parts(), "42") == []

    def test_name_query_is_case_sensitive_substring(self):
        parts = sample_parts()
        result = search_parts(parts, "Hammer")
        assert [p.id for p in result] == [1, 7]

    def test_name_query_without_matches(self):
        assert search_parts(sample_parts(), "Saw") == []

    def test_overlong_digit_query_is_a_name_search(self):
        assert search_parts(sample_parts(), "9" * 5000) == []

    def test_numeric_looking_name_is_not_an_id_search_with_spaces(self):
        assert search_parts(sample_parts(), " 7") == []


class TestSearchProducts:

    def test_products_follow_the_same_rules(self):
        products = [make_product(1, "Giant Bike"), make_product(2, "Tricycle")]
        assert search_products(products, "") == products
        assert search_products(products, "2") == [products[1]]
        assert search_products(products, "Bike") == [products[0]]
