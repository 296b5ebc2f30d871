"""Form field descriptors exposed to the web front end.

These models only describe fields; rendering and editing happen in the
front end. The ``type`` tag tells the front end which editor to use.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class FormField(BaseModel):
    """A named, typed field passed between the REST API and the front end."""

    model_config = ConfigDict(frozen=True)

    TEXT: ClassVar[str] = "TEXT"

    name: str = Field(..., min_length=1, description="Parameter name of the field")
    type: str = Field(default=TEXT, description="Front-end editor type tag")
    options: tuple[str, ...] | None = None

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class HostRestrictionField(FormField):
    """Field whose raw value is a semicolon-separated list of hosts.

    The front end splits the value into individual entries so that allowed
    or denied hosts can be managed one by one.
    """

    FIELD_TYPE: ClassVar[str] = "GUAC_HOST_RESTRICTION"

    type: str = Field(default=FIELD_TYPE, frozen=True)

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)


class Form(BaseModel):
    """A named group of fields."""

    model_config = ConfigDict(frozen=True)

    name: str
    form_fields: tuple[FormField, ...] = ()

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": [form_field.to_json() for form_field in self.form_fields],
        }


__all__: list[str] = ["FormField", "HostRestrictionField", "Form"]
