from datetime import date

import pytest
from pydantic import ValidationError

from avid.domain import Address, Email, Height, Weight


def test_height_parses_and_formats_whole_numbers():
    height = Height.parse("180")
    assert height.value == 180.0
    assert height.format() == "180"
    assert str(height) == "180"


def test_weight_keeps_fraction():
    weight = Weight.parse("61.5")
    assert weight.format() == "61.5"
    assert Weight.parse(weight.format()) == weight


@pytest.mark.parametrize("text", ["0", "-3", "abc", "", "inf", "nan"])
def test_measurement_rejects_invalid_values(text):
    with pytest.raises(ValueError):
        Height.parse(text)
    with pytest.raises(ValueError):
        Weight.parse(text)


def test_height_and_weight_are_distinct_types():
    assert Height.parse("70") != Weight.parse("70")


def test_parse_returns_the_calling_type():
    assert type(Height.parse("70")) is Height
    assert type(Weight.parse("70")) is Weight


def test_email_accepts_valid_address():
    email = Email.parse("annabel@example.com")
    assert email.format() == "annabel@example.com"
    assert str(email) == "annabel@example.com"


@pytest.mark.parametrize("text", ["", "annabel", "annabel@", "@example.com", "ann bel@example.com"])
def test_email_rejects_invalid_address(text):
    with pytest.raises(ValueError):
        Email.parse(text)


def test_value_objects_are_immutable():
    address = Address(country="CA", province="ON", city="Toronto", postal_code="M5V 2T6")
    with pytest.raises(ValidationError):
        address.city = "Ottawa"
    with pytest.raises(ValidationError):
        Height.parse("180").value = 190


def test_member_username_is_immutable(make_member):
    member = make_member("annabel")
    with pytest.raises(ValidationError):
        member.username = "someone-else"
    assert member.username == "annabel"


def test_member_fields_can_change_in_place(make_member):
    member = make_member()
    member.limits = "high"
    member.height = Height.parse("170")
    assert member.limits == "high"
    assert member.height.format() == "170"


def test_member_assignment_is_validated(make_member):
    member = make_member()
    with pytest.raises(ValidationError):
        member.date_of_birth = "not a date"


def test_members_compare_by_value(make_member):
    assert make_member("annabel") == make_member("annabel")
    assert make_member("annabel") != make_member("annabel", limits="high")


def test_member_rejects_empty_username(make_member):
    with pytest.raises(ValidationError):
        make_member("", email=Email.parse("blank@example.com"))


def test_member_accepts_iso_date_string(make_member):
    member = make_member(date_of_birth="1990-04-01")
    assert member.date_of_birth == date(1990, 4, 1)
