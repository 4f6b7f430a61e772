"""Tests for free-text address parsing."""

from __future__ import annotations

from propbrief.aggregation.address import parse_address


class TestParseAddress:
    def test_full_address(self):
        parsed = parse_address("123 Main St, Springfield, IL 62701")
        assert parsed.address == "123 Main St"
        assert parsed.city == "Springfield"
        assert parsed.state == "IL"
        assert parsed.zip_code == "62701"

    def test_no_commas_uses_placeholders(self):
        parsed = parse_address("123 Main St")
        assert parsed.address == "123 Main St"
        assert parsed.city == "Unknown City"
        assert parsed.state == "XX"
        assert parsed.zip_code == "00000"

    def test_missing_zip(self):
        parsed = parse_address("9 Pine Rd, Salem, OR")
        assert parsed.state == "OR"
        assert parsed.zip_code == "00000"

    def test_extra_spaces_in_state_zip(self):
        parsed = parse_address("9 Pine Rd,  Salem ,  OR   97301 ")
        assert parsed.city == "Salem"
        assert parsed.state == "OR"
        assert parsed.zip_code == "97301"

    def test_empty_city_part(self):
        parsed = parse_address("9 Pine Rd, , OR 97301")
        assert parsed.city == "Unknown City"
        assert parsed.state == "OR"

    def test_empty_street_falls_back_to_input(self):
        parsed = parse_address(", Salem, OR 97301")
        assert parsed.address == ", Salem, OR 97301"
        assert parsed.city == "Salem"

    def test_empty_string_never_fails(self):
        parsed = parse_address("")
        assert parsed.address == ""
        assert parsed.city == "Unknown City"
        assert parsed.state == "XX"
        assert parsed.zip_code == "00000"

    def test_serializes_camel_case(self):
        data = parse_address("123 Main St, Springfield, IL 62701").model_dump(by_alias=True)
        assert data == {
            "address": "123 Main St",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
        }
