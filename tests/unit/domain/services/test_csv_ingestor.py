"""Tests for line parsing and template framing detection."""

from __future__ import annotations

import pytest

from nda_validator.domain.exceptions import (
    ErrorKind,
    MalformedInputError,
    SchemaMismatchError,
)
from nda_validator.domain.services.csv_ingestor import (
    detect_framing,
    expected_base_name,
    is_template_row,
    parse_line,
    parse_table,
    validate_template_shortname,
)


class TestParseLine:
    """Cell splitting with quote handling."""

    def test_quoted_delimiter(self):
        assert parse_line('a,"b,c",d') == ["a", "b,c", "d"]

    def test_doubled_quote(self):
        assert parse_line('a,"b""c",d') == ["a", 'b"c', "d"]

    def test_cells_are_trimmed(self):
        assert parse_line(" a , b ,c ") == ["a", "b", "c"]

    def test_empty_cells_kept(self):
        assert parse_line("a,,c,") == ["a", "", "c", ""]

    def test_single_cell(self):
        assert parse_line("only") == ["only"]


class TestParseTable:
    def test_blank_lines_dropped(self):
        table = parse_table("a,b,c\r\n\r\n   \n1,2,3\n")

        assert table.rows == (("a", "b", "c"), ("1", "2", "3"))

    def test_empty_text(self):
        assert parse_table("").is_empty


class TestDetectFraming:
    """First-row heuristic for submission templates."""

    def test_two_cell_first_row_is_template(self):
        """A first row of exactly two non-blank cells frames a template."""
        rows = [("demographics", "02"), ("subjectkey", "sex"), ("S1", "M")]

        framing = detect_framing(rows)

        assert framing.is_template
        assert framing.header == ("subjectkey", "sex")
        assert framing.data_rows == (("S1", "M"),)
        assert framing.detected_shortname == "demographics"

    def test_plain_header(self):
        rows = [("subjectkey", "sex", "age"), ("S1", "M", "20")]

        framing = detect_framing(rows)

        assert not framing.is_template
        assert framing.header == ("subjectkey", "sex", "age")
        assert framing.detected_shortname is None

    def test_blank_cell_prevents_template(self):
        assert not is_template_row(("demographics", ""))
        assert not detect_framing([("demographics", " "), ("S1", "M")]).is_template

    def test_no_rows_is_malformed(self):
        with pytest.raises(MalformedInputError):
            detect_framing([])

    def test_template_without_header_is_malformed(self):
        with pytest.raises(MalformedInputError) as exc_info:
            detect_framing([("demographics", "02")])

        assert exc_info.value.kind == ErrorKind.MALFORMED_INPUT


class TestTemplateShortname:
    """Base/version check of the template row."""

    def test_expected_base_strips_trailing_digits(self):
        assert expected_base_name("demographics02") == "demographics"
        assert expected_base_name("image03") == "image"
        assert expected_base_name("abc") == "abc"

    def test_matching_row(self):
        validate_template_shortname(("demographics", "02"), "demographics02")

    def test_base_is_a_prefix_match(self):
        validate_template_shortname(("demographics_extra", "1"), "demographics02")

    def test_wrong_base(self):
        with pytest.raises(SchemaMismatchError) as exc_info:
            validate_template_shortname(("image", "03"), "demographics02")

        assert exc_info.value.kind == ErrorKind.SCHEMA_MISMATCH
        assert str(exc_info.value) == (
            'Invalid structure shortname. Found "image,03". '
            'Should be "demographics" followed by a version number'
        )

    def test_non_numeric_version(self):
        with pytest.raises(SchemaMismatchError):
            validate_template_shortname(("demographics", "v2"), "demographics02")

    def test_single_cell_row(self):
        with pytest.raises(SchemaMismatchError):
            validate_template_shortname(("demographics",), "demographics02")

    def test_fullwidth_version_digits_rejected(self):
        """Only ASCII digits count as a version number."""
        with pytest.raises(SchemaMismatchError):
            validate_template_shortname(("demographics", "０２"), "demographics02")

    def test_non_ascii_trailing_digits_kept_in_base(self):
        assert expected_base_name("demographics０２") == "demographics０２"
