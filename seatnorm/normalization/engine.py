"""Normalization engine: vendor (section, row) pairs to manifest ids."""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from seatnorm.models.manifest import ManifestRecord
from seatnorm.models.results import NormalizationQuery, NormalizationResult
from seatnorm.normalization.disambiguator import Disambiguator
from seatnorm.normalization.index import ManifestIndex
from seatnorm.normalization.keys import NameKey
from seatnorm.normalization.validator import row_token, section_token

logger = logging.getLogger(__name__)

_INTEGER_ID = re.compile(r"[+-]?[0-9]+")


def _parse_id(value: str | None, field: str, record: ManifestRecord) -> int | None:
    if value is None:
        return None
    # ASCII digits with an optional sign, nothing else.
    if not _INTEGER_ID.fullmatch(value):
        logger.warning(
            "Manifest %s %r for section %r is not an integer; leaving it unset",
            field, value, record.section_name,
        )
        return None
    return int(value)


class NormalizationEngine:
    """Resolves vendor section/row strings against a manifest index.

    The engine only reads the index, so one engine (or several sharing an
    index) can serve concurrent callers.
    """

    def __init__(self, index: ManifestIndex, disambiguator: Disambiguator | None = None):
        self.index = index
        self.disambiguator = disambiguator or Disambiguator()

    @classmethod
    def from_manifest(cls, path: Path, disambiguator: Disambiguator | None = None) -> "NormalizationEngine":
        """Load a manifest CSV and build an engine over it."""
        from seatnorm.ingestion.manifest_csv import ManifestCsvAdapter

        index = ManifestCsvAdapter().load(path)
        return cls(index, disambiguator)

    def normalize(self, section: str | None, row: str | None) -> NormalizationResult:
        """Normalize a single (section, row) input.

        Returns ``valid=False`` with unset ids when the pair does not match an
        authorized manifest entry; never raises for bad input.
        """
        section_tok = section_token(section)
        row_tok = row_token(row)
        key = NameKey(section_tok.key, row_tok.key)

        candidates = self.index.lookup(key)
        if not candidates:
            logger.debug(
                "No manifest entry for section=%r row=%r (section %s, row %s)",
                section, row, section_tok.state, row_tok.state,
            )
            return NormalizationResult()

        # Scoring uses the raw section string, not the digit token.
        record = self.disambiguator.choose(candidates, section)
        if record is None:
            return NormalizationResult()

        return NormalizationResult(
            section_id=_parse_id(record.section_id, "section_id", record),
            row_id=_parse_id(record.row_id, "row_id", record),
            valid=True,
        )

    def normalize_query(self, query: NormalizationQuery) -> NormalizationResult:
        return self.normalize(query.section, query.row)

    def normalize_batch(
        self, queries: Iterable[NormalizationQuery | tuple[str | None, str | None]]
    ) -> list[NormalizationResult]:
        """Normalize each input independently; results line up with the inputs."""
        results: list[NormalizationResult] = []
        for query in queries:
            if isinstance(query, NormalizationQuery):
                results.append(self.normalize_query(query))
            else:
                section, row = query
                results.append(self.normalize(section, row))
        return results
