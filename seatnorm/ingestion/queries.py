"""Query file adapter for batch normalization input (CSV or JSON)."""

import csv
import io
import json
from pathlib import Path

from pydantic import ValidationError

from seatnorm.exceptions import QueryFileError
from seatnorm.ingestion.base import BaseAdapter
from seatnorm.models.results import NormalizationQuery


class QueryFileAdapter(BaseAdapter):
    """Reads (section, row) inputs from a ``.csv`` or ``.json`` file.

    CSV: ``section,row`` per line, optional header. Cells are kept as given, so
    an empty cell is an empty string, not an absent value; a line with a single
    cell has an absent row. An absent section can only be given in JSON.
    JSON: a list of objects with ``section`` and ``row`` keys (missing or null
    means absent).
    """

    def parse(self, file_path: Path) -> list[NormalizationQuery]:
        suffix = file_path.suffix.lower()
        if suffix not in (".csv", ".json"):
            raise self._error(file_path, "expected a .csv or .json file")

        text = self._read_text(file_path)
        if suffix == ".json":
            return self._parse_json(file_path, text)
        return self._parse_csv(file_path, text)

    def _parse_csv(self, file_path: Path, text: str) -> list[NormalizationQuery]:
        try:
            lines = list(csv.reader(io.StringIO(text, newline="")))
        except csv.Error as exc:
            raise self._error(file_path, str(exc)) from exc

        queries: list[NormalizationQuery] = []
        first_row = True
        for line_number, fields in enumerate(lines, start=1):
            if not fields:
                continue
            is_header = first_row and [f.strip().lower() for f in fields[:2]] == ["section", "row"]
            first_row = False
            if is_header:
                continue
            if len(fields) > 2:
                raise self._error(
                    file_path, f"line {line_number} has {len(fields)} fields, expected 1 or 2"
                )
            # Cells are taken as given: an empty cell is a present, empty
            # string. Only a one-cell line has an absent row.
            row = fields[1] if len(fields) == 2 else None
            queries.append(NormalizationQuery(section=fields[0], row=row))
        return queries

    def _parse_json(self, file_path: Path, text: str) -> list[NormalizationQuery]:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise self._error(file_path, f"invalid JSON ({exc.msg})") from exc

        if not isinstance(raw, list):
            raise self._error(file_path, "expected a JSON list of {section, row} objects")

        try:
            return [NormalizationQuery.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise self._error(file_path, f"invalid query record ({exc.error_count()} error(s))") from exc

    def _error(self, file_path: Path, message: str) -> QueryFileError:
        return QueryFileError(str(file_path), message)
