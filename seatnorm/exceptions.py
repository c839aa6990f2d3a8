"""Custom exceptions for seatnorm."""


class SeatNormError(Exception):
    """Base exception for seatnorm errors."""


class ManifestLoadError(SeatNormError):
    """Raised when the manifest cannot be loaded at all."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Manifest load error from {source}: {message}")


class MalformedManifestRowError(ManifestLoadError):
    """Raised when a manifest row has neither 2 nor 4 fields."""

    def __init__(self, row_number: int, field_count: int, source: str = "<rows>"):
        self.row_number = row_number
        self.field_count = field_count
        super().__init__(
            source,
            f"row {row_number} has {field_count} field(s), expected 2 or 4",
        )


class QueryFileError(SeatNormError):
    """Raised when a batch query file cannot be read or parsed."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Query file error for {source}: {message}")
