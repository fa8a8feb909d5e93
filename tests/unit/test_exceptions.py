"""Tests for error kinds and the default error factory."""

from authbridge import AuthAdapterError, AuthError, ErrorKind


def test_error_kind_values():
    assert ErrorKind.DUPLICATE_KEY_ID == "AUTH_DUPLICATE_KEY_ID"
    assert ErrorKind.INVALID_USER_ID == "AUTH_INVALID_USER_ID"


def test_adapter_error_from_kind_string():
    error = AuthAdapterError("AUTH_INVALID_USER_ID")

    assert isinstance(error, AuthError)
    assert error.kind == "AUTH_INVALID_USER_ID"
    assert error.message == "AUTH_INVALID_USER_ID: No user exists with this id"


def test_adapter_error_from_enum_member():
    error = AuthAdapterError(ErrorKind.DUPLICATE_KEY_ID)

    assert error.kind == "AUTH_DUPLICATE_KEY_ID"
    assert "already exists" in str(error)


def test_adapter_error_unknown_kind():
    error = AuthAdapterError("AUTH_SOMETHING_ELSE")

    assert error.kind == "AUTH_SOMETHING_ELSE"
    assert str(error) == "AUTH_SOMETHING_ELSE: Unknown error"
