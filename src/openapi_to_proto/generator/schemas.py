"""Translates components.schemas into proto enums and messages."""

from typing import Any

from openapi_to_proto.generator.model import Declaration, EnumValue, ProtoEnum, ProtoField, ProtoMessage
from openapi_to_proto.generator.naming import capitalize, normalize_enum
from openapi_to_proto.generator.types import enum_type_name, inline_enum, map_type
from openapi_to_proto.parser.base import Schema, SchemaNode, SchemaRef

LOCAL_SCHEMA_PREFIX = "#/components/schemas/"


def translate_schemas(schemas: dict[str, SchemaNode], warnings: list[str]) -> list[Declaration]:
    """Translate every named schema, in document order.

    A schema produces an enum, a message, both, or nothing (plain scalar
    and array aliases have no proto counterpart). Problems are appended
    to ``warnings``; nothing is raised.
    """
    declarations: list[Declaration] = []
    seen: set[str] = set()

    for name, node in schemas.items():
        schema = _resolve_alias(schemas, node)
        if schema is None:
            warnings.append(f"Schema '{name}' refers to '{node.ref}', which is not a local schema; skipped.")
            continue

        emitted: list[Declaration] = []
        base_name = capitalize(name)
        if schema.enum:
            enum_name = base_name
            if schema.properties:
                enum_name = base_name + "Enum"
                warnings.append(f"Schema '{name}' has both enum and properties; enum emitted as '{enum_name}'.")
            emitted.append(translate_enum(enum_name, schema.enum))
        if schema.properties:
            emitted.append(translate_message(base_name, schema))

        for decl in emitted:
            if decl.name in seen:
                warnings.append(f"Duplicate declaration '{decl.name}' (from schema '{name}').")
            seen.add(decl.name)
        declarations.extend(emitted)

    return declarations


def translate_enum(name: str, values: list[Any]) -> ProtoEnum:
    return ProtoEnum(
        name=name,
        values=[EnumValue(name=normalize_enum(v), number=i) for i, v in enumerate(values)],
    )


def translate_message(name: str, schema: Schema) -> ProtoMessage:
    """Build a message; nested enums first, then fields numbered from 1."""
    enums = []
    for prop_name, prop in schema.properties.items():
        backing = inline_enum(prop)
        if backing is not None:
            enums.append(translate_enum(enum_type_name(prop_name), backing.enum))

    required = set(schema.required)
    fields = [
        ProtoField(
            number=number,
            optional=prop_name not in required,
            type=map_type(prop_name, prop),
            name=prop_name,
        )
        for number, (prop_name, prop) in enumerate(schema.properties.items(), start=1)
    ]
    return ProtoMessage(name=name, enums=enums, fields=fields)


def _resolve_alias(schemas: dict[str, SchemaNode], node: SchemaNode) -> Schema | None:
    """Follow `Alias: {$ref: '#/components/schemas/Target'}` chains."""
    seen = set()
    while isinstance(node, SchemaRef):
        if not node.ref.startswith(LOCAL_SCHEMA_PREFIX) or node.ref in seen:
            return None
        seen.add(node.ref)
        node = schemas.get(node.name)
    return node
