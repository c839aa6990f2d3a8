"""Token extraction for vendor-supplied section and row strings.

Section keys are the first run of digits in the section string; row keys are a
number from 1 to 99 or one or two letters. The same extractors are applied to
manifest names when the index is built and to vendor input at query time.
"""

import re

from seatnorm.models.tokens import Token

_SECTION_DIGITS = re.compile(r"[0-9]+")
_ROW_PATTERN = re.compile(r"[1-9][0-9]?|[A-Za-z]{1,2}")
_NON_LETTERS = re.compile(r"[^A-Za-z]")


def extract_section_token(raw: str | None) -> str | None:
    """Return the first digit run of ``raw``, "" if it has none, None if absent."""
    if raw is None:
        return None
    match = _SECTION_DIGITS.search(raw)
    return match.group(0) if match else ""


def extract_row_token(raw: str | None) -> str | None:
    """Return the uppercased row token, "" if ``raw`` is not one, None if absent."""
    if raw is None:
        return None
    match = _ROW_PATTERN.fullmatch(raw)
    return match.group(0).upper() if match else ""


def strip_to_letters(text: str) -> str:
    """Remove everything but ASCII letters, keeping case and order."""
    return _NON_LETTERS.sub("", text)


def _as_token(extracted: str | None) -> Token:
    if extracted is None:
        return Token.absent()
    if extracted == "":
        return Token.invalid()
    return Token.valid(extracted)


def section_token(raw: str | None) -> Token:
    return _as_token(extract_section_token(raw))


def row_token(raw: str | None) -> Token:
    return _as_token(extract_row_token(raw))
