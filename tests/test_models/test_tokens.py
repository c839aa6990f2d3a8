"""Tests for the tagged Token model."""

import pytest
from pydantic import ValidationError

from seatnorm.models.enums import TokenState
from seatnorm.models.tokens import Token


class TestToken:
    def test_keys_for_each_state(self):
        assert Token.absent().key is None
        assert Token.invalid().key == ""
        assert Token.valid("12").key == "12"

    def test_absent_and_invalid_are_distinct(self):
        assert Token.absent() != Token.invalid()
        assert Token.absent().state == TokenState.ABSENT
        assert Token.invalid().state == TokenState.INVALID

    def test_valid_requires_value(self):
        with pytest.raises(ValidationError):
            Token(state=TokenState.VALID)

    def test_invalid_cannot_carry_value(self):
        with pytest.raises(ValidationError):
            Token(state=TokenState.INVALID, value="A")

    def test_frozen(self):
        token = Token.valid("A")
        with pytest.raises(ValidationError):
            token.value = "B"
