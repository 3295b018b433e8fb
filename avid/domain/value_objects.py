"""
Member value objects.

Small immutable wrappers that validate a primitive on construction.
Each one parses from and formats to the flat string stored in the
``members`` table.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Address(BaseModel):
    """Postal address of a member."""

    model_config = ConfigDict(frozen=True)

    country: str
    province: str
    city: str
    postal_code: str


class _Measurement(BaseModel):
    """Positive, finite number stored as a string."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(gt=0, allow_inf_nan=False)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Build the measurement from its stored representation.

        Raises:
            ValueError: If text is not a positive number
        """
        return cls(value=text)

    def format(self) -> str:
        """
        Format for storage.

        Whole numbers drop the trailing ".0" so "180" stays "180".
        """
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def __str__(self) -> str:
        return self.format()


class Height(_Measurement):
    """Height of a member."""


class Weight(_Measurement):
    """Weight of a member."""


class Email(BaseModel):
    """Validated email address."""

    model_config = ConfigDict(frozen=True)

    value: EmailStr

    @classmethod
    def parse(cls, text: str) -> "Email":
        """
        Build an Email from its stored representation.

        Raises:
            ValueError: If text is not a valid email address
        """
        return cls(value=text)

    def format(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
