"""Validation layer: local error store and schema adapters."""

from form_sync.validation.schema import (
    FORM_ERROR_KEY,
    CallableSchema,
    JsonSchema,
    LoginCredentials,
    ModelSchema,
    login_schema,
)
from form_sync.validation.store import GateResult, ValidationStore

__all__ = [
    "CallableSchema",
    "FORM_ERROR_KEY",
    "GateResult",
    "JsonSchema",
    "LoginCredentials",
    "ModelSchema",
    "ValidationStore",
    "login_schema",
]
