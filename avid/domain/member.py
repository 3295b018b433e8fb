"""
Member entity.

A Member is identified by its username. Every other field can be
changed in place and persisted with ``MemberRepository.update``.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from avid.domain.value_objects import Address, Email, Height, Weight


class Member(BaseModel):
    """
    Registered member.

    Attributes:
        username: Unique identifier, immutable once created
        password: Hashed password (see avid.core.security)
        address: Postal address
        date_of_birth: Date of birth
        limits: Gambling limits (see GamblingLimit for known values)
        height: Height value object
        weight: Weight value object
        body_type: Free-form body type
        ethnicity: Free-form ethnicity
        email: Email value object

    Example:
        member = Member(
            username="annabel",
            password=hash_password("secret"),
            address=Address(country="CA", province="ON", city="Toronto", postal_code="M5V 2T6"),
            date_of_birth=date(1990, 4, 1),
            limits="low",
            height=Height.parse("170"),
            weight=Weight.parse("60"),
            body_type="athletic",
            ethnicity="other",
            email=Email.parse("annabel@example.com"),
        )
    """

    model_config = ConfigDict(validate_assignment=True)

    username: str = Field(min_length=1, frozen=True)
    password: str
    address: Address
    date_of_birth: date
    limits: str
    height: Height
    weight: Weight
    body_type: str
    ethnicity: str
    email: Email

    def __repr__(self) -> str:
        return f"<Member(username='{self.username}', email='{self.email}')>"

    def __str__(self) -> str:
        return self.username
