"""Tagged token variant produced by the validator."""

from pydantic import BaseModel, ConfigDict, model_validator

from seatnorm.models.enums import TokenState


class Token(BaseModel):
    """A raw input field after validation: absent, invalid, or a valid token."""

    model_config = ConfigDict(frozen=True)

    state: TokenState
    value: str | None = None

    @model_validator(mode="after")
    def _check_value(self) -> "Token":
        if self.state == TokenState.VALID and self.value is None:
            raise ValueError("a VALID token requires a value")
        if self.state != TokenState.VALID and self.value is not None:
            raise ValueError(f"a {self.state} token cannot carry a value")
        return self

    @classmethod
    def absent(cls) -> "Token":
        return cls(state=TokenState.ABSENT)

    @classmethod
    def invalid(cls) -> "Token":
        return cls(state=TokenState.INVALID)

    @classmethod
    def valid(cls, value: str) -> "Token":
        return cls(state=TokenState.VALID, value=value)

    @property
    def key(self) -> str | None:
        """Plain optional string used in lookup keys: None, "" or the token."""
        if self.state == TokenState.ABSENT:
            return None
        if self.state == TokenState.INVALID:
            return ""
        return self.value
