"""Tests for peak list reading."""

import pytest
from pydantic import ValidationError

from cspfit.core.domain.peaks import label_map, make_record, positions
from cspfit.core.domain.peaks_io import (
    READERS,
    parse_data_line,
    parse_peak_list,
    read_peak_list,
    register_reader,
)
from cspfit.core.domain.report import WarningKind
from cspfit.core.shared.exceptions import DataIOError, MalformedRecordError


def lines(text):
    return text.splitlines(keepends=True)


class TestParseDataLine:
    def test_fields(self):
        record = parse_data_line("  12   8.123  121.456  3.2e5  ok")
        assert record.index == 12
        assert record.coord1 == pytest.approx(8.123)
        assert record.coord2 == pytest.approx(121.456)
        assert record.flag == "ok"
        assert record.label is None

    def test_axis_order_swaps_columns(self):
        record = parse_data_line("1 8.0 120.0 0 ok", axis_order="ba")
        assert record.position == (120.0, 8.0)

    def test_too_few_fields(self):
        with pytest.raises(MalformedRecordError, match="at least 5"):
            parse_data_line("1 8.0 120.0")

    def test_bad_number(self):
        with pytest.raises(MalformedRecordError):
            parse_data_line("1 eight 120.0 0 ok")

    def test_malformed_is_a_data_error(self):
        assert issubclass(MalformedRecordError, DataIOError)


class TestParsePeakList:
    def test_comment_labels_previous_line(self):
        parsed = parse_peak_list(
            lines(
                "Header\n"
                "1 8.0 120.0 0 ok\n"
                "# G12\n"
                "2 9.0 115.0 0 ok\n"
                "3 7.5 125.0 0 ok\n"
                "#A14\n"
            )
        )
        assert parsed.header == "Header"
        assert [r.label for r in parsed.records] == ["G12", None, "A14"]
        assert parsed.is_labeled

    def test_header_is_not_parsed_as_data(self):
        parsed = parse_peak_list(lines("1 8.0 120.0 0 ok\n2 9.0 115.0 0 ok\n"))
        assert len(parsed) == 1
        assert parsed.records[0].index == 2

    def test_leading_comment_is_ignored(self):
        parsed = parse_peak_list(lines("Header\n# orphan\n1 8.0 120.0 0 ok\n"))
        assert parsed.records[0].label is None

    def test_last_of_several_comments_wins(self):
        parsed = parse_peak_list(lines("Header\n1 8.0 120.0 0 ok\n# first\n# second\n"))
        assert parsed.records[0].label == "second"

    def test_malformed_lines_are_skipped_with_warning(self):
        parsed = parse_peak_list(
            lines("Header\n1 8.0 120.0 0 ok\nnot a peak\n\n2 9.0 115.0 0 ok\n"),
            name="t1.list",
        )
        assert [r.index for r in parsed.records] == [1, 2]
        assert len(parsed.warnings) == 1
        warning = parsed.warnings[0]
        assert warning.kind is WarningKind.MALFORMED_RECORD
        assert warning.subject == "t1.list:3"

    def test_empty_input(self):
        parsed = parse_peak_list([])
        assert parsed.header == ""
        assert len(parsed) == 0
        assert not parsed.is_labeled

    def test_raw_line_is_kept(self):
        parsed = parse_peak_list(lines("Header\n1 8.0 120.0 0 ok\n"))
        assert parsed.records[0].raw_line == "1 8.0 120.0 0 ok"


class TestReadPeakList:
    def test_text_file(self, tmp_path):
        path = tmp_path / "ref.list"
        path.write_text("Header\n1 8.0 120.0 0 ok\n# G12\n")
        parsed = read_peak_list(path)
        assert parsed.name == "ref.list"
        assert parsed.records[0].label == "G12"

    def test_unknown_extension_reads_as_text(self, tmp_path):
        path = tmp_path / "ref.dat"
        path.write_text("Header\n1 8.0 120.0 0 ok\n")
        assert len(read_peak_list(path)) == 1

    def test_csv_file(self, tmp_path):
        path = tmp_path / "ref.csv"
        path.write_text("index,coord_a,coord_b,flag,label\n1,8.0,120.0,ok,G12\n2,9.0,115.0,ok,\n")
        parsed = read_peak_list(path, axis_order="ba")
        assert [r.label for r in parsed.records] == ["G12", None]
        assert parsed.records[0].position == (120.0, 8.0)

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / "ref.csv"
        path.write_text("index,x\n1,8.0\n")
        with pytest.raises(DataIOError, match="coord_a"):
            read_peak_list(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="Cannot read"):
            read_peak_list(tmp_path / "missing.list")

    @pytest.mark.parametrize("name", ["ref.list", "ref.csv"])
    def test_undecodable_file(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b"index,coord_a,coord_b\n1 8.0 120.0 0 ok\n# G\xff\xfe12\n")
        with pytest.raises(DataIOError, match="Cannot read peak list"):
            read_peak_list(path)

    def test_csv_bad_rows_are_skipped_with_warning(self, tmp_path):
        path = tmp_path / "ref.csv"
        path.write_text(
            "index,coord_a,coord_b,flag,label\n"
            "1,8.0,120.0,ok,G12\n"
            ",9.0,115.0,ok,H13\n"
            "3,abc,110.0,ok,K14\n"
        )
        parsed = read_peak_list(path)
        assert [r.label for r in parsed.records] == ["G12"]
        assert parsed.records[0].position == (8.0, 120.0)
        assert [w.kind for w in parsed.warnings] == [WarningKind.MALFORMED_RECORD] * 2
        assert [w.subject for w in parsed.warnings] == ["ref.csv:3", "ref.csv:4"]

    def test_register_reader(self):
        @register_reader("xyz-test")
        def reader(path, axis_order="ab"):
            raise NotImplementedError

        try:
            assert READERS["xyz-test"] is reader
        finally:
            del READERS["xyz-test"]


class TestRecordHelpers:
    def test_label_map_skips_unlabeled(self):
        records = [make_record(1, 0, 0, label="A"), make_record(2, 1, 1)]
        assert list(label_map(records)) == ["A"]

    def test_label_map_rejects_duplicates(self):
        records = [make_record(1, 0, 0, label="A"), make_record(2, 1, 1, label="A")]
        with pytest.raises(DataIOError, match="Duplicate label 'A'"):
            label_map(records)

    def test_positions_shape(self):
        assert positions([]).shape == (0, 2)
        xy = positions([make_record(1, 1.0, 2.0), make_record(2, 3.0, 4.0)])
        assert xy.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_records_are_immutable(self):
        record = make_record(1, 0.0, 0.0)
        with pytest.raises(ValidationError):
            record.label = "A"
