"""Shared test fixtures for seatnorm."""

from pathlib import Path

import pytest

from seatnorm.models.manifest import ManifestRecord
from seatnorm.normalization.engine import NormalizationEngine
from seatnorm.normalization.index import ManifestIndex
from seatnorm.normalization.validator import strip_to_letters

MANIFEST_ROWS = [
    ("101", "Upper 2", "1", "a"),
    ("102", "Lower 2", "2", "A"),
    ("103", "Box 7", "3", "B"),
    ("200", "Plaza 10"),
    ("0", "Suite 5", "0", "1"),
    ("300", "Pavilion", "4", "C"),
]


def _make_record(
    section_id: str,
    section_name: str,
    row_id: str | None = None,
    row_name: str | None = None,
) -> ManifestRecord:
    return ManifestRecord(
        section_id=section_id,
        section_name=section_name,
        unique_chars=strip_to_letters(section_name),
        row_id=row_id,
        row_name=row_name,
    )


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def manifest_rows() -> list[tuple[str, ...]]:
    return list(MANIFEST_ROWS)


@pytest.fixture
def manifest_index(manifest_rows: list[tuple[str, ...]]) -> ManifestIndex:
    return ManifestIndex.build(manifest_rows)


@pytest.fixture
def engine(manifest_index: ManifestIndex) -> NormalizationEngine:
    return NormalizationEngine(manifest_index)


@pytest.fixture
def manifest_file(tmp_path: Path, manifest_rows: list[tuple[str, ...]]) -> Path:
    f = tmp_path / "manifest.csv"
    lines = ["section_id,section_name,row_id,row_name"]
    lines += [",".join(row) for row in manifest_rows]
    f.write_text("\n".join(lines) + "\n")
    return f
