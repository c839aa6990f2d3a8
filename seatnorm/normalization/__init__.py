"""Normalization layer: token extraction, manifest index, disambiguation."""

from seatnorm.normalization.disambiguator import Disambiguator
from seatnorm.normalization.engine import NormalizationEngine
from seatnorm.normalization.index import ManifestIndex
from seatnorm.normalization.keys import NameKey

__all__ = ["Disambiguator", "ManifestIndex", "NameKey", "NormalizationEngine"]
