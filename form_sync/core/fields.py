"""Field set definitions.

A form owns a fixed, known set of fields. Each field has a default value
whose type (str or bool) constrains every later write.
"""

from pydantic import BaseModel, ConfigDict

from form_sync.core.errors import InvalidFieldValueError, UnknownFieldError

FieldValue = str | bool


class FieldSpec(BaseModel):
    """A single named field and its default value."""

    name: str
    default: FieldValue = ""

    model_config = ConfigDict(frozen=True)

    @property
    def value_type(self) -> type:
        """Type every value written to this field must have."""
        return type(self.default)


class FieldSet(BaseModel):
    """An ordered, immutable collection of field specs."""

    fields: tuple[FieldSpec, ...]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, **defaults: FieldValue) -> "FieldSet":
        """Build a field set from keyword defaults.

        Example:
            FieldSet.of(email="", password="", remember=False)
        """
        return cls(fields=tuple(FieldSpec(name=k, default=v) for k, v in defaults.items()))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def get(self, name: str) -> FieldSpec:
        """Return the spec for a field.

        Raises:
            UnknownFieldError: If the field is not part of this set.
        """
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise UnknownFieldError(name, self.names)

    def defaults(self) -> dict[str, FieldValue]:
        """Return a fresh mapping of every field to its default."""
        return {spec.name: spec.default for spec in self.fields}

    def check(self, name: str, value: FieldValue) -> None:
        """Ensure a value may be written to a field.

        Raises:
            UnknownFieldError: If the field is not part of this set.
            InvalidFieldValueError: If the value has the wrong type.
        """
        spec = self.get(name)
        # bool is a subclass of int, not str, so an exact type check is enough
        if type(value) is not spec.value_type:
            raise InvalidFieldValueError(name, value, spec.value_type)


LOGIN_FIELDS = FieldSet.of(email="", password="", remember=False)
