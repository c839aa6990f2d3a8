"""Composite (section, row) lookup key."""

from seatnorm.normalization.validator import extract_section_token


class NameKey:
    """Lookup key for the manifest index.

    The section component may hold a raw section name (manifest side) or an
    already extracted token (query side). Equality and hashing both re-run
    ``extract_section_token`` on the stored section, so the two forms compare
    equal whenever they reduce to the same digit run. Rows compare as plain
    optional strings.
    """

    __slots__ = ("_section", "_row")

    def __init__(self, section: str | None, row: str | None):
        self._section = section
        self._row = row

    @property
    def section(self) -> str | None:
        return self._section

    @property
    def row(self) -> str | None:
        return self._row

    @property
    def section_token(self) -> str | None:
        return extract_section_token(self._section)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, NameKey):
            return NotImplemented
        if self._row != other._row:
            return False
        return extract_section_token(self._section) == extract_section_token(other._section)

    def __hash__(self) -> int:
        return hash((extract_section_token(self._section), self._row))

    def __repr__(self) -> str:
        return f"NameKey(section={self._section!r}, row={self._row!r})"
