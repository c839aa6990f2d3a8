"""Manifest CSV adapter.

Each line is ``section_id,section_name`` or
``section_id,section_name,row_id,row_name``. Blank lines and an optional
``section_id,...`` header line are skipped. Values are used as given.
"""

import csv
import io
import logging
from pathlib import Path

from seatnorm.exceptions import ManifestLoadError, MalformedManifestRowError
from seatnorm.ingestion.base import BaseAdapter
from seatnorm.normalization.index import ManifestIndex

logger = logging.getLogger(__name__)

_HEADER_FIRST_FIELD = "section_id"


class ManifestCsvAdapter(BaseAdapter):
    """Reads a manifest CSV into field tuples and builds the index from them."""

    def parse(self, file_path: Path) -> list[list[str]]:
        """Return the manifest's data rows. Raises ManifestLoadError."""
        text = self._read_text(file_path)
        try:
            lines = list(csv.reader(io.StringIO(text, newline="")))
        except csv.Error as exc:
            raise self._error(file_path, str(exc)) from exc

        rows: list[list[str]] = []
        first_row = True
        for line_number, fields in enumerate(lines, start=1):
            if not fields:
                continue
            is_header = first_row and fields[0].strip().lower() == _HEADER_FIRST_FIELD
            first_row = False
            if is_header:
                continue
            if len(fields) not in (2, 4):
                raise MalformedManifestRowError(line_number, len(fields), str(file_path))
            rows.append(fields)
        return rows

    def load(self, file_path: Path) -> ManifestIndex:
        """Parse ``file_path`` and build a ManifestIndex from every row."""
        logger.info("Reading manifest from %s", file_path)
        rows = self.parse(file_path)
        if not rows:
            logger.warning("Manifest %s contains no rows", file_path)
        return ManifestIndex.build(rows, source=str(file_path))

    def _error(self, file_path: Path, message: str) -> ManifestLoadError:
        return ManifestLoadError(str(file_path), message)
