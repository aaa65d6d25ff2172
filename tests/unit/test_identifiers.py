"""Tests for billsync.reconcile.identifiers."""

from billsync.reconcile.identifiers import (
    candidate_bill_numbers,
    clean_number,
    jurisdiction_to_state,
    normalize_numbers,
)


class TestCleanNumber:
    def test_uppercases_and_strips_separators(self):
        assert clean_number(" hf 1099 ") == "HF1099"
        assert clean_number("SF-12") == "SF12"
        assert clean_number("hf\t- 7") == "HF7"

    def test_empty_values(self):
        assert clean_number("") == ""
        assert clean_number(None) == ""


class TestNormalizeNumbers:
    def test_house_number_in_senate_field_is_moved(self):
        result = normalize_numbers("", "HF1099")

        assert result.house == "HF1099"
        assert result.senate == ""
        assert result.corrections == {
            "house-file-number": "HF1099",
            "senate-file-number": "",
        }

    def test_senate_number_in_house_field_is_moved(self):
        result = normalize_numbers("sf 42", "")

        assert result.house == ""
        assert result.senate == "SF42"
        assert result.corrections == {
            "senate-file-number": "SF42",
            "house-file-number": "",
        }

    def test_correctly_filed_pair_has_no_corrections(self):
        result = normalize_numbers("HF 1", "sf-2")

        assert (result.house, result.senate) == ("HF1", "SF2")
        assert result.corrections == {}

    def test_no_swap_when_target_field_is_occupied(self):
        result = normalize_numbers("HF5", "HF6")

        assert (result.house, result.senate) == ("HF5", "HF6")
        assert result.corrections == {}

    def test_both_empty(self):
        result = normalize_numbers(None, "  ")

        assert result.is_empty
        assert result.primary == ""

    def test_primary_prefers_house(self):
        assert normalize_numbers("HF1", "SF2").primary == "HF1"
        assert normalize_numbers("", "SF2").primary == "SF2"


class TestCandidateBillNumbers:
    def test_state_bill_has_single_candidate(self):
        assert candidate_bill_numbers("HF12", "MN") == ["HF12"]

    def test_federal_house_file_tries_alternate_prefixes(self):
        assert candidate_bill_numbers("HF12", "US") == ["HF12", "HR12", "HB12"]

    def test_federal_senate_file_tries_alternate_prefixes(self):
        assert candidate_bill_numbers("sf 7", "us") == ["SF7", "S7", "SB7"]

    def test_federal_unknown_prefix_is_tried_as_is(self):
        assert candidate_bill_numbers("HR9", "US") == ["HR9"]

    def test_empty_number(self):
        assert candidate_bill_numbers("", "US") == []


class TestJurisdictionToState:
    def test_federal(self):
        assert jurisdiction_to_state("Federal", "MN") == "US"

    def test_anything_else_is_the_state(self):
        assert jurisdiction_to_state("State", "mn") == "MN"
        assert jurisdiction_to_state("", "MN") == "MN"
