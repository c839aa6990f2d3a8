"""Normalization query and result models."""

from pydantic import BaseModel


class NormalizationQuery(BaseModel):
    section: str | None = None
    row: str | None = None


class NormalizationResult(BaseModel):
    """Output of the engine for one (section, row) input.

    ``None`` ids mean unset, which is distinct from a legitimate id of 0.
    """

    section_id: int | None = None
    row_id: int | None = None
    valid: bool = False
