from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

TypeKind = Literal["SCALAR", "OBJECT", "INTERFACE", "UNION", "ENUM", "INPUT_OBJECT"]
WrapperKind = Literal["NON_NULL", "LIST"]

TYPE_KINDS: frozenset[str] = frozenset(TypeKind.__args__)  # type: ignore[attr-defined]


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class NamedTypeRef(_IntrospectionModel):
    """Terminal reference; also absorbs refs whose ``kind`` is missing or unrecognized."""

    kind: str | None = None
    name: str | None = None


class NonNullTypeRef(_IntrospectionModel):
    kind: Literal["NON_NULL"]
    of_type: "TypeRef | None" = Field(None, alias="ofType")


class ListTypeRef(_IntrospectionModel):
    kind: Literal["LIST"]
    of_type: "TypeRef | None" = Field(None, alias="ofType")


def _type_ref_tag(value: Any) -> str:
    kind = value.get("kind") if isinstance(value, dict) else getattr(value, "kind", None)
    if kind == "NON_NULL":
        return "non_null"
    if kind == "LIST":
        return "list"
    return "named"


TypeRef = Annotated[
    Annotated[NonNullTypeRef, Tag("non_null")]
    | Annotated[ListTypeRef, Tag("list")]
    | Annotated[NamedTypeRef, Tag("named")],
    Discriminator(_type_ref_tag),
]

NonNullTypeRef.model_rebuild()  # necessary for recursive types
ListTypeRef.model_rebuild()


class InterfaceRef(_IntrospectionModel):
    name: str | None = None


class InputValueDescriptor(_IntrospectionModel):
    """An argument of a field or a member of an input object."""

    name: str | None = None
    description: str | None = None
    type: TypeRef | None = None
    default_value: str | None = Field(None, alias="defaultValue")


class FieldDescriptor(_IntrospectionModel):
    name: str | None = None
    description: str | None = None
    args: list[InputValueDescriptor] | None = None
    type: TypeRef | None = None
    is_deprecated: bool = Field(False, alias="isDeprecated")
    deprecation_reason: str | None = Field(None, alias="deprecationReason")


class TypeDescriptor(_IntrospectionModel):
    """A named schema type. ``kind`` outside ``TYPE_KINDS`` is kept and rendered header-only."""

    kind: TypeKind | WrapperKind | str | None = None
    name: str | None = None
    description: str | None = None
    interfaces: list[InterfaceRef] | None = None
    fields: list[FieldDescriptor] | None = None
    input_fields: list[InputValueDescriptor] | None = Field(None, alias="inputFields")


class SchemaDescriptor(_IntrospectionModel):
    types: list[TypeDescriptor] | None = None

    def find_type(self, name: str) -> TypeDescriptor | None:
        for type_ in self.types or []:
            if type_.name == name:
                return type_
        return None


class SchemaData(_IntrospectionModel):
    schema_: SchemaDescriptor | None = Field(None, alias="__schema")


class SchemaDocument(_IntrospectionModel):
    """Root of an introspection result: ``{"data": {"__schema": {"types": [...]}}}``."""

    data: SchemaData | None = None

    @property
    def schema_descriptor(self) -> SchemaDescriptor:
        if self.data is None or self.data.schema_ is None:
            return SchemaDescriptor()
        return self.data.schema_

    @property
    def types(self) -> list[TypeDescriptor]:
        return list(self.schema_descriptor.types or [])
