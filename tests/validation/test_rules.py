from __future__ import annotations

from datetime import date

import pytest

from src.laundry_system.laundry_system.core.enums import Role
from src.laundry_system.laundry_system.core.exceptions import UniquenessError, ValidationError
from src.laundry_system.laundry_system.validation.rules import (
    check_customer_registration,
    check_employee,
    check_service,
    check_transaction,
    parse_int,
    parse_role,
)

TODAY = date(2026, 10, 19)


def _never(_value):
    return False


def _customer(**overrides):
    fields = {
        "username": "budi",
        "email": "budi@email.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "gender": "Male",
        "date_of_birth": "2000-01-01",
        "username_taken": _never,
        "email_taken": _never,
        "today": TODAY,
    }
    fields.update(overrides)
    return check_customer_registration(**fields)


def _employee(**overrides):
    fields = {
        "username": "sari",
        "email": "sari@govlash.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "gender": "Female",
        "date_of_birth": "1999-03-04",
        "role": "Receptionist",
        "username_taken": _never,
        "email_taken": _never,
        "today": TODAY,
    }
    fields.update(overrides)
    return check_employee(**fields)


def test_service_accepts_valid_input_and_trims_text():
    res = check_service("  Dry Clean ", "Suits and dresses", "25000", "3")

    assert res.ok
    assert res.value.name == "Dry Clean"
    assert res.value.price == 25000
    assert res.value.duration_days == 3


@pytest.mark.parametrize(
    "name, description, price, duration, reason",
    [
        ("", "desc", "10", "3", "Fields cannot be empty"),
        ("Wash", "   ", "10", "3", "Fields cannot be empty"),
        ("Wash", "desc", "abc", "3", "Price and Duration must be numbers"),
        ("Wash", "desc", "10.5", "3", "Price and Duration must be numbers"),
        # both values are parsed before any range check
        ("Wash", "desc", "-1", "x", "Price and Duration must be numbers"),
        ("Wash", "desc", "0", "3", "Price must be > 0"),
        ("Wash", "desc", "-5", "3", "Price must be > 0"),
        ("Wash", "desc", "10", "0", "Duration must be 1-30 days"),
        ("Wash", "desc", "10", "31", "Duration must be 1-30 days"),
    ],
)
def test_service_rejections(name, description, price, duration, reason):
    assert check_service(name, description, price, duration).reason == reason


def test_service_duration_bounds_are_inclusive():
    assert check_service("Wash", "desc", "1", "1").ok
    assert check_service("Wash", "desc", "1", "30").ok


def test_parse_int_is_strict():
    assert parse_int(" 42 ") == 42
    assert parse_int("+7") == 7
    assert parse_int("4_2") is None
    assert parse_int("1e3") is None
    assert parse_int(True) is None


@pytest.mark.parametrize("weight", ["2", 2.0, "10.5", "50", 50.0])
def test_transaction_weight_in_range(weight):
    assert check_transaction(weight, "").ok


@pytest.mark.parametrize("weight", ["1.999", 0, "50.01", "-3"])
def test_transaction_weight_out_of_range(weight):
    assert check_transaction(weight, "").reason == "Weight must be between 2 and 50kg."


@pytest.mark.parametrize("weight", ["", "heavy", None, "nan", "inf"])
def test_transaction_weight_not_a_number(weight):
    assert check_transaction(weight, "").reason == "Weight must be a valid number."


def test_transaction_notes_limit():
    assert check_transaction("5", "x" * 250).ok
    assert check_transaction("5", "x" * 251).reason == "Notes cannot exceed 250 characters."
    assert check_transaction("5", None).value.notes == ""


def test_customer_registration_happy_path():
    res = _customer()

    assert res.ok
    assert res.value.role == Role.CUSTOMER
    assert res.value.date_of_birth == date(2000, 1, 1)


@pytest.mark.parametrize("field", ["username", "email", "password", "gender", "date_of_birth"])
def test_customer_registration_requires_every_field(field):
    blank = "" if field == "password" else "   "
    assert _customer(**{field: blank}).reason == "All fields must be filled."


def test_customer_age_boundary_on_birthday():
    assert _customer(date_of_birth="2014-10-19").ok
    assert _customer(date_of_birth="2014-10-20").reason == "You must be at least 12 years old."


def test_employee_age_boundary_on_birthday():
    assert _employee(date_of_birth="2009-10-19").ok
    assert _employee(date_of_birth="2009-10-20").reason == "Employees must be at least 17 years old."


def test_email_suffix_depends_on_account_kind():
    assert _customer(email="budi@govlash.com").reason == "Email must end with @email.com"
    assert _employee(email="sari@email.com").reason == "Email must end with '@govlash.com'."


def test_duplicate_username_raises_uniqueness_error():
    res = _customer(username_taken=lambda name: name == "budi")

    assert res.reason == "Username already exists."
    with pytest.raises(UniquenessError):
        res.raise_for_reason()


def test_username_is_checked_before_email_format():
    res = _customer(email="wrong@elsewhere.org", username_taken=lambda _name: True)
    assert res.reason == "Username already exists."


def test_duplicate_email():
    res = _employee(email_taken=lambda email: email == "sari@govlash.com")
    assert res.reason == "Email already exists."
    assert res.error is UniquenessError


def test_password_rules():
    assert _customer(password="12345", confirm_password="12345").reason == (
        "Password must be at least 6 characters long."
    )
    assert _customer(confirm_password="secret2").reason == "Passwords do not match."


def test_unparseable_date_of_birth():
    res = _customer(date_of_birth="19/10/2000")

    assert res.reason == "Date of birth must be a valid date (YYYY-MM-DD)."
    with pytest.raises(ValidationError):
        res.raise_for_reason()


@pytest.mark.parametrize("role", ["Customer", "Manager"])
def test_employee_role_must_be_an_employee_role(role):
    assert _employee(role=role).reason == "Please select a valid role."


def test_employee_role_accepts_value_or_name():
    assert _employee(role="laundry staff").value.role == Role.LAUNDRY_STAFF
    assert _employee(role="LAUNDRY_STAFF").value.role == Role.LAUNDRY_STAFF
    assert parse_role(Role.ADMIN) is Role.ADMIN


def test_numeric_notes_are_measured_as_text():
    res = check_transaction("5", 12345)

    assert res.ok
    assert res.value.notes == "12345"
    assert check_transaction("5", 10 ** 251).reason == "Notes cannot exceed 250 characters."


def test_numeric_password_is_checked_as_text():
    assert _customer(password=1234567, confirm_password="1234567").ok
    assert _customer(password=12345, confirm_password=12345).reason == (
        "Password must be at least 6 characters long."
    )
    assert _customer(password=1234567, confirm_password=7654321).reason == "Passwords do not match."
    assert _customer(password="secret1", confirm_password=None).reason == "Passwords do not match."


def test_service_text_fits_the_columns():
    assert check_service("n" * 100, "d" * 500, "10", "3").ok
    assert check_service("n" * 101, "d", "10", "3").reason == "Service name cannot exceed 100 characters."
    assert check_service("Wash", "d" * 501, "10", "3").reason == (
        "Service description cannot exceed 500 characters."
    )
