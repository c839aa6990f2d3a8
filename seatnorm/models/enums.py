"""Enumerations for seatnorm."""

from enum import StrEnum


class TokenState(StrEnum):
    ABSENT = "ABSENT"
    INVALID = "INVALID"
    VALID = "VALID"
