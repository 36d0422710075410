"""Schema adapters.

Each adapter turns a declarative description of the form's rules into the
validate(values) -> errors contract the ValidationStore consumes. All of
them validate every field at once and return at most one message per field.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

import jsonschema
from pydantic import BaseModel, ValidationError, field_validator

from form_sync.core.fields import FieldValue

# Key used for errors that cannot be attributed to a single field
FORM_ERROR_KEY = "form"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class CallableSchema:
    """Wraps a plain function as a schema."""

    def __init__(self, func: Callable[[Mapping[str, FieldValue]], dict[str, str]]) -> None:
        self._func = func

    def validate(self, values: Mapping[str, FieldValue]) -> dict[str, str]:
        return dict(self._func(values))


class ModelSchema:
    """Validates values by constructing a pydantic model.

    Messages raised from field validators are reported verbatim, without
    pydantic's "Value error, " prefix.
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def validate(self, values: Mapping[str, FieldValue]) -> dict[str, str]:
        try:
            self.model.model_validate(dict(values))
        except ValidationError as e:
            return self._collect(e)
        return {}

    @staticmethod
    def _collect(error: ValidationError) -> dict[str, str]:
        errors: dict[str, str] = {}
        for detail in error.errors():
            loc = detail.get("loc", ())
            field = str(loc[0]) if loc else FORM_ERROR_KEY
            if field in errors:
                continue

            ctx = detail.get("ctx") or {}
            if detail.get("type") == "value_error" and "error" in ctx:
                errors[field] = str(ctx["error"])
            else:
                errors[field] = detail["msg"]
        return errors


class JsonSchema:
    """Validates values against a JSON Schema document.

    Messages can be overridden per field ("email") or per field and
    keyword ("email.minLength"); otherwise jsonschema's own message is used.
    """

    def __init__(
        self,
        schema: dict[str, Any],
        messages: dict[str, str] | None = None,
    ) -> None:
        """Initialize the schema.

        Raises:
            jsonschema.SchemaError: If the schema document itself is invalid.
        """
        validator_cls = jsonschema.validators.validator_for(schema)
        validator_cls.check_schema(schema)
        self._validator = validator_cls(schema)
        self.messages = dict(messages or {})

    def validate(self, values: Mapping[str, FieldValue]) -> dict[str, str]:
        instance = dict(values)
        errors: dict[str, str] = {}

        for error in sorted(self._validator.iter_errors(instance), key=lambda e: list(e.path)):
            for field in self._fields_for(error, instance):
                if field not in errors:
                    errors[field] = self._message_for(field, error)

        return errors

    @staticmethod
    def _fields_for(error: jsonschema.ValidationError, instance: dict[str, Any]) -> list[str]:
        if error.path:
            return [str(error.path[0])]
        if error.validator == "required":
            return [name for name in error.validator_value if name not in instance]
        return [FORM_ERROR_KEY]

    def _message_for(self, field: str, error: jsonschema.ValidationError) -> str:
        keyed = f"{field}.{error.validator}"
        if keyed in self.messages:
            return self.messages[keyed]
        if field in self.messages:
            return self.messages[field]
        return error.message


class LoginCredentials(BaseModel):
    """Rules for the email/password/remember login form."""

    email: str
    password: str
    remember: bool = False

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid email address")
        return v

    @field_validator("password")
    @classmethod
    def password_present(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v


def login_schema() -> ModelSchema:
    """Return the schema for the default login field set."""
    return ModelSchema(LoginCredentials)
