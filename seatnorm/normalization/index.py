"""Manifest index: build once from manifest rows, then query many times."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

from seatnorm.exceptions import MalformedManifestRowError
from seatnorm.models.manifest import ManifestRecord
from seatnorm.normalization.keys import NameKey
from seatnorm.normalization.validator import strip_to_letters

logger = logging.getLogger(__name__)


def record_from_row(fields: Sequence[str], row_number: int, source: str = "<rows>") -> ManifestRecord:
    """Build a ManifestRecord from a 2-field or 4-field manifest row."""
    if len(fields) == 2:
        section_id, section_name = fields
        row_id = row_name = None
    elif len(fields) == 4:
        section_id, section_name, row_id, row_name = fields
        row_name = row_name.upper()
    else:
        raise MalformedManifestRowError(row_number, len(fields), source)

    return ManifestRecord(
        section_id=section_id,
        section_name=section_name,
        unique_chars=strip_to_letters(section_name),
        row_id=row_id,
        row_name=row_name,
    )


def manifest_key(record: ManifestRecord) -> NameKey:
    """Manifest-side key: raw section name and the uppercased row name as given."""
    return NameKey(record.section_name, record.row_name)


class ManifestIndex:
    """Read-only mapping from NameKey to the manifest records sharing it.

    Records with the same key accumulate in load order. Construction either
    completes for the whole manifest or raises; there is no partial index.
    """

    def __init__(self, records: Iterable[ManifestRecord]):
        buckets: dict[NameKey, list[ManifestRecord]] = {}
        count = 0
        for record in records:
            buckets.setdefault(manifest_key(record), []).append(record)
            count += 1

        self._entries: MappingProxyType[NameKey, tuple[ManifestRecord, ...]] = MappingProxyType(
            {key: tuple(candidates) for key, candidates in buckets.items()}
        )
        self._record_count = count
        logger.info(
            "Indexed %d manifest record(s) under %d key(s), %d colliding",
            count, len(self._entries), len(self.collisions()),
        )

    @classmethod
    def build(cls, rows: Iterable[Sequence[str]], source: str = "<rows>") -> "ManifestIndex":
        """Index manifest rows of the form (section_id, section_name[, row_id, row_name])."""
        records = [
            record_from_row(fields, row_number, source)
            for row_number, fields in enumerate(rows, start=1)
        ]
        return cls(records)

    @classmethod
    def from_records(cls, records: Iterable[ManifestRecord]) -> "ManifestIndex":
        return cls(records)

    def lookup(self, key: NameKey) -> tuple[ManifestRecord, ...]:
        """Return the candidates for ``key``, or an empty tuple."""
        return self._entries.get(key, ())

    def collisions(self) -> dict[NameKey, tuple[ManifestRecord, ...]]:
        """Keys shared by more than one manifest record."""
        return {key: recs for key, recs in self._entries.items() if len(recs) > 1}

    @property
    def record_count(self) -> int:
        return self._record_count

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[NameKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
