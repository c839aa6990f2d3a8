"""Ingestion adapters for manifest and query files."""

from seatnorm.ingestion.base import BaseAdapter
from seatnorm.ingestion.manifest_csv import ManifestCsvAdapter
from seatnorm.ingestion.queries import QueryFileAdapter

__all__ = ["BaseAdapter", "ManifestCsvAdapter", "QueryFileAdapter"]
