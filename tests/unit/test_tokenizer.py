"""Tests for the CSV tokenizer."""

from __future__ import annotations

import csv
import io

from toastpay.ingest.tokenizer import tokenize


class TestFields:
    def test_splits_on_commas(self):
        assert tokenize("a,b,c") == [["a", "b", "c"]]

    def test_keeps_whitespace(self):
        assert tokenize(" a , b \n") == [[" a ", " b "]]

    def test_trailing_comma_gives_empty_field(self):
        assert tokenize("a,\n") == [["a", ""]]

    def test_ragged_rows_are_kept(self):
        assert tokenize("a,b,c\nd\n") == [["a", "b", "c"], ["d"]]


class TestQuoting:
    def test_quoted_comma_stays_in_field(self):
        assert tokenize('"Doe, Jane",42\n') == [["Doe, Jane", "42"]]

    def test_doubled_quote_is_literal(self):
        assert tokenize('"say ""hi""",x\n') == [['say "hi"', "x"]]

    def test_quoted_newline_stays_in_field(self):
        assert tokenize('"line1\r\nline2",x\n') == [["line1\r\nline2", "x"]]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize('a,"b\nc') == [["a", "b\nc"]]

    def test_round_trip_through_standard_quoting(self):
        original = ['He said "hi", then left', "plain", '""', "a,b,c"]
        buf = io.StringIO()
        csv.writer(buf).writerow(original)
        assert tokenize(buf.getvalue()) == [original]


class TestRowTerminators:
    def test_crlf_and_lf_mixed(self):
        rows = tokenize("a,b\r\nc,d\n")
        assert rows == [["a", "b"], ["c", "d"]]

    def test_bare_cr_ends_row(self):
        assert tokenize("a\rb\r") == [["a"], ["b"]]

    def test_last_row_without_newline_is_flushed(self):
        assert tokenize("a,b\nc,d") == [["a", "b"], ["c", "d"]]

    def test_last_row_ending_in_comma_is_flushed(self):
        assert tokenize("a,b\nc,") == [["a", "b"], ["c", ""]]


class TestBlankRows:
    def test_blank_lines_dropped(self):
        assert len(tokenize("a,b\n\n\nc,d\n")) == 2

    def test_all_empty_fields_dropped(self):
        assert tokenize("a\n,,,\n  ,  \nb\n") == [["a"], ["b"]]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_only_newlines(self):
        assert tokenize("\r\n\n\r\n") == []
