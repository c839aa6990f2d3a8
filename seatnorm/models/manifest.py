"""Manifest record model."""

from pydantic import BaseModel, ConfigDict


class ManifestRecord(BaseModel):
    """One authorized manifest entry.

    ``unique_chars`` is the section name with every non-letter removed; it is
    computed once when the manifest is indexed and only used for scoring.
    """

    model_config = ConfigDict(frozen=True)

    section_id: str
    section_name: str
    unique_chars: str
    row_id: str | None = None
    row_name: str | None = None
