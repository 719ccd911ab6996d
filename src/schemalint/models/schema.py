"""
Schema tree models.

A schema is a mapping of field name to field declaration. Fields whose
values are collections of objects (lists or sets) carry a nested schema
describing each element, which makes the whole declaration a tree.

The field kind is a tagged variant:

    PrimitiveKind(type)      - string, bool, int, float, map
    ListOfObject(elem)       - list whose elements follow `elem`
    SetOfObject(elem)        - set whose elements follow `elem`

A collection of primitive values is a ListOfObject/SetOfObject without
an `elem`, so there is nothing to recurse into.

Declarations can also be written in the flat form used by catalog files:

    settings:
      type: list
      elem:
        api_key: { type: string, sensitive: true }
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator
from typing_extensions import Annotated

from .enums import FieldType


class PrimitiveKind(BaseModel):
    """A scalar or map field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["primitive"] = "primitive"
    type: FieldType

    @field_validator("type")
    @classmethod
    def validate_not_collection(cls, v: FieldType) -> FieldType:
        """Collections are modelled as ListOfObject/SetOfObject."""
        if v.is_collection:
            raise ValueError(f"'{v.value}' is a collection type, use the list/set kinds instead")
        return v


class ListOfObject(BaseModel):
    """A list field, optionally of nested objects."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["list"] = "list"
    elem: Optional[ObjectSchema] = None

    @property
    def type(self) -> FieldType:
        return FieldType.LIST


class SetOfObject(BaseModel):
    """A set field, optionally of nested objects."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["set"] = "set"
    elem: Optional[ObjectSchema] = None

    @property
    def type(self) -> FieldType:
        return FieldType.SET


FieldKind = Annotated[Union[PrimitiveKind, ListOfObject, SetOfObject], Field(discriminator="kind")]


class FieldSchema(BaseModel):
    """
    A single field declaration within a schema.

    Attributes:
        kind: Tagged variant describing the field's type
        sensitive: Whether the field's value is hidden from output
        default: Default value, if the field declares one
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: FieldKind
    sensitive: bool = Field(default=False, description="Whether the value is marked as sensitive")
    default: Optional[Any] = Field(default=None, description="Declared default value")

    @model_validator(mode="before")
    @classmethod
    def normalize_flat_declaration(cls, values: Any) -> Any:
        """Turn `{type: ..., elem: ...}` into the tagged `kind` form."""
        if not isinstance(values, dict) or "kind" in values:
            return values

        values = dict(values)
        if "type" not in values:
            raise ValueError("Field declaration requires a 'type'")

        field_type = FieldType(values.pop("type"))
        elem = values.pop("elem", None)

        if field_type == FieldType.LIST:
            values["kind"] = {"kind": "list", "elem": elem}
        elif field_type == FieldType.SET:
            values["kind"] = {"kind": "set", "elem": elem}
        else:
            if elem is not None:
                raise ValueError(f"'elem' is only valid for list and set fields, got '{field_type.value}'")
            values["kind"] = {"kind": "primitive", "type": field_type}
        return values

    @property
    def type(self) -> FieldType:
        """The declared FieldType, regardless of kind."""
        return self.kind.type

    @property
    def is_composite(self) -> bool:
        return not isinstance(self.kind, PrimitiveKind)

    @property
    def nested_schema(self) -> Optional[ObjectSchema]:
        """The element schema of a list/set of objects, if any."""
        if isinstance(self.kind, PrimitiveKind):
            return None
        return self.kind.elem


class ObjectSchema(RootModel[Dict[str, FieldSchema]]):
    """
    Mapping of field name to FieldSchema.

    Names are stored as given; iteration is always in sorted name order so
    that anything reported from a walk is deterministic.
    """

    model_config = ConfigDict(frozen=True)

    root: Dict[str, FieldSchema] = Field(default_factory=dict)

    def field_names(self) -> List[str]:
        """Field names, lexicographically sorted."""
        return sorted(self.root.keys())

    def get_field(self, name: str) -> FieldSchema:
        """
        Get a field by its exact name.

        Raises:
            KeyError: If no field has that name
        """
        if name not in self.root:
            raise KeyError(f"Field '{name}' not found in schema")
        return self.root[name]

    def items(self) -> List[Tuple[str, FieldSchema]]:
        """(name, field) pairs in sorted name order."""
        return [(name, self.root[name]) for name in self.field_names()]

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: object) -> bool:
        return name in self.root


ListOfObject.model_rebuild()
SetOfObject.model_rebuild()
FieldSchema.model_rebuild()
ObjectSchema.model_rebuild()


__all__ = [
    "PrimitiveKind",
    "ListOfObject",
    "SetOfObject",
    "FieldKind",
    "FieldSchema",
    "ObjectSchema",
]
