"""Tests for entry_reader.py."""

import openpyxl
import pytest

from models import ClueEntry, CrosswordError
from entry_reader import normalize_answer, read_entries, _unquote, _validate_and_filter


def _write_xlsx(path, rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    wb.save(path)


class TestReadCsv:
    def test_valid_parse(self, tmp_path):
        path = tmp_path / "clues.csv"
        path.write_text("cat,Feline pet\nace,Top card\n", encoding="utf-8")
        entries = read_entries(path)
        assert entries == [
            ClueEntry(0, "Feline pet", "CAT"),
            ClueEntry(1, "Top card", "ACE"),
        ]

    def test_clue_keeps_commas_and_quotes(self, tmp_path):
        path = tmp_path / "clues.csv"
        path.write_text('Parasite,"Bong Joon-ho film, 2019 ""Best Picture"""\n', encoding="utf-8")
        entries = read_entries(path)
        assert entries[0].answer == "PARASITE"
        assert entries[0].clue_text == 'Bong Joon-ho film, 2019 "Best Picture"'

    def test_skips_blank_lines_and_header(self, tmp_path):
        path = tmp_path / "clues.csv"
        path.write_text("answer,clue\n\nLa La Land,Musical\n\n", encoding="utf-8")
        entries = read_entries(path)
        assert [e.answer for e in entries] == ["LALALAND"]

    def test_indices_follow_kept_entries(self, tmp_path, capsys):
        path = tmp_path / "clues.csv"
        path.write_text("cat,One\n42,Number\ndog,Two\ncat,Again\n", encoding="utf-8")
        entries = read_entries(path)
        assert [(e.index, e.answer) for e in entries] == [(0, "CAT"), (1, "DOG")]
        err = capsys.readouterr().err
        assert "skipping '42'" in err
        assert "duplicate answer 'CAT'" in err


class TestReadXlsx:
    def test_valid_parse(self, tmp_path):
        path = tmp_path / "clues.xlsx"
        _write_xlsx(path, [["Answer", "Clue"], ["cat", "Feline pet"], ["ice cream", "Cold dessert"]])
        entries = read_entries(path)
        assert entries == [
            ClueEntry(0, "Feline pet", "CAT"),
            ClueEntry(1, "Cold dessert", "ICECREAM"),
        ]

    def test_missing_clue_is_empty_text(self, tmp_path):
        path = tmp_path / "clues.xlsx"
        _write_xlsx(path, [["oscar"]])
        assert read_entries(path)[0].clue_text == ""


class TestReadErrors:
    def test_file_not_found(self, tmp_path):
        with pytest.raises(CrosswordError, match="File not found"):
            read_entries(tmp_path / "nonexistent.csv")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "clues.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(CrosswordError, match="Unsupported input format"):
            read_entries(path)

    def test_empty_file_error(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(CrosswordError, match="No valid clue entries"):
            read_entries(path)


class TestNormalizeAnswer:
    def test_uppercase(self):
        assert normalize_answer("hello") == "HELLO"

    def test_strip_spaces(self):
        assert normalize_answer("ice cream") == "ICECREAM"

    def test_strip_hyphens(self):
        assert normalize_answer("well-known") == "WELLKNOWN"

    def test_strip_special(self):
        assert normalize_answer("O'Brien") == "OBRIEN"

    def test_strip_accented(self):
        assert normalize_answer("Amélie") == "AMLIE"


class TestUnquote:
    def test_outer_quotes(self):
        assert _unquote('"Top card"') == "Top card"

    def test_doubled_quotes(self):
        assert _unquote('Say ""hi""') == 'Say "hi"'

    def test_plain(self):
        assert _unquote("Top card") == "Top card"


class TestValidateAndFilter:
    def test_length_filter(self):
        result = _validate_and_filter([("A", "short"), ("ox", "ok")])
        assert result == [("OX", "ok")]

    def test_dedup(self):
        result = _validate_and_filter([("cat", "first"), ("CAT", "second")])
        assert result == [("CAT", "first")]
