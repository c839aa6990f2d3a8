"""Data models for seatnorm."""

from seatnorm.models.enums import TokenState
from seatnorm.models.manifest import ManifestRecord
from seatnorm.models.results import NormalizationQuery, NormalizationResult
from seatnorm.models.tokens import Token

__all__ = [
    "ManifestRecord",
    "NormalizationQuery",
    "NormalizationResult",
    "Token",
    "TokenState",
]
