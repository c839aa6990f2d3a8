"""Unit tests for the ManifestCsvAdapter."""

from pathlib import Path

import pytest

from seatnorm.exceptions import ManifestLoadError, MalformedManifestRowError
from seatnorm.ingestion.manifest_csv import ManifestCsvAdapter
from seatnorm.normalization.keys import NameKey


@pytest.fixture
def adapter() -> ManifestCsvAdapter:
    return ManifestCsvAdapter()


class TestParse:
    def test_skips_header(self, adapter: ManifestCsvAdapter, manifest_file: Path):
        rows = adapter.parse(manifest_file)
        assert len(rows) == 6
        assert rows[0] == ["101", "Upper 2", "1", "a"]
        assert rows[3] == ["200", "Plaza 10"]

    def test_without_header(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("1,Box 3,1,A\n2,Box 4\n")
        assert adapter.parse(f) == [["1", "Box 3", "1", "A"], ["2", "Box 4"]]

    def test_header_after_blank_line(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("\n\nsection_id,section_name\n1,Box 3\n")
        assert adapter.parse(f) == [["1", "Box 3"]]

    def test_header_only_skipped_once(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("1,Box 3\nsection_id,section_name\n")
        assert adapter.parse(f) == [["1", "Box 3"], ["section_id", "section_name"]]

    def test_blank_lines_and_bom(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_bytes("\ufeffsection_id,section_name\n\n1,Box 3\r\n\n".encode("utf-8"))
        assert adapter.parse(f) == [["1", "Box 3"]]

    def test_values_kept_as_given(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("1, Box 3 ,1,a\n")
        assert adapter.parse(f) == [["1", " Box 3 ", "1", "a"]]

    def test_malformed_row_reports_line(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("section_id,section_name\n1,Box 3\n2,Box 4,9\n")
        with pytest.raises(MalformedManifestRowError) as exc_info:
            adapter.parse(f)
        assert exc_info.value.row_number == 3
        assert exc_info.value.field_count == 3
        assert str(f) in str(exc_info.value)

    def test_missing_file(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        with pytest.raises(ManifestLoadError, match="file not found"):
            adapter.parse(tmp_path / "nope.csv")

    def test_directory(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        with pytest.raises(ManifestLoadError, match="not a regular file"):
            adapter.parse(tmp_path)

    def test_not_utf8(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_bytes(b"1,Caf\xe9 3\n")
        with pytest.raises(ManifestLoadError, match="UTF-8"):
            adapter.parse(f)


class TestLoad:
    def test_builds_index(self, adapter: ManifestCsvAdapter, manifest_file: Path):
        index = adapter.load(manifest_file)
        assert index.record_count == 6
        assert len(index.lookup(NameKey("2", "A"))) == 2

    def test_empty_file(self, adapter: ManifestCsvAdapter, tmp_path: Path):
        f = tmp_path / "m.csv"
        f.write_text("")
        assert len(adapter.load(f)) == 0
