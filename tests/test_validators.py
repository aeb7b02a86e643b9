import pytest

from greenchat.constants import Messages
from greenchat.validators import has_errors, missing_fields, validate_email, validate_password, validate_signup


@pytest.mark.parametrize("secret", ["a", "1234567", "abc1", "passwor"])
def test_short_password_is_rejected(secret):
    assert validate_password(secret) == Messages.PASSWORD_RULE


def test_long_password_without_digit_is_rejected():
    assert validate_password("password") == Messages.PASSWORD_RULE


@pytest.mark.parametrize("secret", ["password1", "12345678", "s3cretpassword"])
def test_long_password_with_digit_is_accepted(secret):
    assert validate_password(secret) == ""


def test_empty_password_is_not_an_error():
    assert validate_password("") == ""
    assert validate_password(None) == ""


@pytest.mark.parametrize("email", ["alice@greenriver.edu", "bob@mail.greenriver.edu", "greenriver.edu"])
def test_email_with_allowed_suffix(email):
    assert validate_email(email, suffix="greenriver.edu") == ""


@pytest.mark.parametrize("email", ["", "alice@gmail.com", "alice@greenriver.edu ", "alice@greenriver.education"])
def test_email_without_allowed_suffix(email):
    assert validate_email(email, suffix="greenriver.edu") == "Email must be from a greenriver.edu domain"


def test_email_suffix_is_configurable():
    assert validate_email("carol@example.org", suffix="example.org") == ""
    assert "example.org" in validate_email("carol@greenriver.edu", suffix="example.org")


def test_signup_errors_block_submission():
    form = {"username": "alice", "secret": "short", "email": "alice@gmail.com"}
    errors = validate_signup(form)
    assert errors["passwordError"]
    assert errors["emailError"]
    assert errors["usernameError"] == ""
    assert has_errors(errors)


def test_clean_signup_form_has_no_errors():
    form = {"username": "alice", "secret": "secret123", "email": "alice@greenriver.edu"}
    errors = validate_signup(form)
    assert not has_errors(errors)


def test_backend_username_error_blocks_submission():
    form = {"username": "alice", "secret": "secret123", "email": "alice@greenriver.edu"}
    errors = validate_signup(form, username_error=Messages.USERNAME_TAKEN)
    assert errors["usernameError"] == Messages.USERNAME_TAKEN
    assert has_errors(errors)


def test_every_signup_field_is_required():
    assert missing_fields({"email": "a@greenriver.edu"}) == ["username", "secret", "first_name", "last_name"]


def test_blank_signup_field_counts_as_missing():
    form = {
        "username": "bob",
        "secret": "secret123",
        "email": "bob@greenriver.edu",
        "first_name": "   ",
        "last_name": "Smith",
    }
    assert missing_fields(form) == ["first_name"]
    form["first_name"] = "Bob"
    assert missing_fields(form) == []
