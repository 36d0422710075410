"""Tests for field set definitions."""

import pytest

from form_sync.core import (
    LOGIN_FIELDS,
    FieldSet,
    InvalidFieldValueError,
    UnknownFieldError,
)


class TestFieldSet:
    """Tests for FieldSet."""

    def test_login_fields_defaults(self) -> None:
        """Test the login field set starts empty and unchecked."""
        assert LOGIN_FIELDS.names == ("email", "password", "remember")
        assert LOGIN_FIELDS.defaults() == {"email": "", "password": "", "remember": False}

    def test_defaults_returns_fresh_mapping(self) -> None:
        """Test mutating returned defaults does not affect the field set."""
        defaults = LOGIN_FIELDS.defaults()
        defaults["email"] = "changed"
        assert LOGIN_FIELDS.defaults()["email"] == ""

    def test_of_builds_custom_set(self) -> None:
        """Test declaring an arbitrary fixed field set."""
        fields = FieldSet.of(username="", subscribe=True)
        assert fields.names == ("username", "subscribe")
        assert fields.get("subscribe").value_type is bool
        assert "username" in fields
        assert "email" not in fields

    def test_get_unknown_field(self) -> None:
        """Test unknown field names are rejected."""
        with pytest.raises(UnknownFieldError) as exc_info:
            LOGIN_FIELDS.get("phone")
        assert exc_info.value.name == "phone"
        assert "email" in str(exc_info.value)

    def test_check_accepts_matching_types(self) -> None:
        """Test values of the field's type are accepted."""
        LOGIN_FIELDS.check("email", "a@b.com")
        LOGIN_FIELDS.check("remember", True)

    @pytest.mark.parametrize(
        "name,value",
        [("email", True), ("remember", "yes"), ("password", 1)],
    )
    def test_check_rejects_wrong_types(self, name: str, value: object) -> None:
        """Test values of another type are rejected."""
        with pytest.raises(InvalidFieldValueError) as exc_info:
            LOGIN_FIELDS.check(name, value)  # type: ignore[arg-type]
        assert exc_info.value.name == name
