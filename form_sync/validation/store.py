"""Local validation store.

Holds a projection of the form values, a schema, and the errors shown
beside each field. The projected values are never the source of truth;
they are written by the Synchronizer from the remote form state.
"""

import logging
from collections.abc import Mapping

from pydantic import BaseModel, Field

from form_sync.core.fields import FieldSet, FieldValue
from form_sync.core.protocols import Schema

logger = logging.getLogger(__name__)


class GateResult(BaseModel):
    """Result of gating one submission attempt."""

    passed: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def blocked(self) -> bool:
        """Whether the attempt must not reach the network."""
        return not self.passed

    def __bool__(self) -> bool:
        return self.passed


class ValidationStore:
    """Projected values, a compiled schema and locally displayed errors."""

    def __init__(
        self,
        fields: FieldSet,
        schema: Schema,
        values: Mapping[str, FieldValue] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            fields: The form's field set, used to tell field errors from
                general ones.
            schema: Validation rules applied by gate().
            values: Initial snapshot, normally the remote state's values.
        """
        self.fields = fields
        self.schema = schema
        self._values: dict[str, FieldValue] = dict(values) if values is not None else fields.defaults()
        self._errors: dict[str, str] = {}

    @property
    def values(self) -> dict[str, FieldValue]:
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    def set_field_value(self, name: str, value: FieldValue) -> None:
        """Overwrite the projected value of a field."""
        self._values[name] = value

    def set_errors(self, errors: Mapping[str, str]) -> None:
        """Replace the whole error mapping."""
        self._errors = dict(errors)

    def gate(self) -> GateResult:
        """Validate every field at once and decide whether to submit.

        Returns:
            GateResult with passed=False and the errors to display, or
            passed=True with any leftover errors cleared.
        """
        errors = {k: v for k, v in self.schema.validate(self.values).items() if v}
        if errors:
            logger.debug("Gate blocked submission: %s", sorted(errors))
            self._errors = dict(errors)
            return GateResult(passed=False, errors=errors)

        self._errors = {}
        return GateResult(passed=True)

    # Display helpers --------------------------------------------------
    def error_for(self, name: str) -> str | None:
        """Return the message shown beside one field, if any."""
        return self._errors.get(name)

    def field_errors(self) -> dict[str, str]:
        """Errors attributable to a field of this form."""
        return {k: v for k, v in self._errors.items() if k in self.fields}

    def general_errors(self) -> dict[str, str]:
        """Errors whose key is not a field of this form."""
        return {k: v for k, v in self._errors.items() if k not in self.fields}
