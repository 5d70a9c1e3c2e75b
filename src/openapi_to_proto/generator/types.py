"""Maps OpenAPI schemas onto proto3 type names."""

from openapi_to_proto.generator.naming import capitalize
from openapi_to_proto.parser.base import Schema, SchemaKind, SchemaNode, SchemaRef

EMPTY_TYPE = "google.protobuf.Empty"

SCALAR_TYPES = {
    SchemaKind.INTEGER: "int32",
    SchemaKind.NUMBER: "double",
    SchemaKind.BOOLEAN: "bool",
    SchemaKind.STRING: "string",
    SchemaKind.OBJECT: "map<string, string>",
    SchemaKind.UNKNOWN: "string",
}


def map_type(field_name: str, node: SchemaNode) -> str:
    """Return the proto type of a message field.

    Inline enums are named after the field (``status`` -> ``StatusEnum``)
    and are declared inside the enclosing message.
    """
    if isinstance(node, SchemaRef):
        return capitalize(node.name)

    kind = node.kind
    if kind is SchemaKind.ENUM:
        return enum_type_name(field_name)
    if kind is SchemaKind.ARRAY:
        if node.items is None:
            return SCALAR_TYPES[SchemaKind.UNKNOWN]
        return "repeated " + map_type(field_name, node.items)
    return SCALAR_TYPES[kind]


def resolve_type(node: SchemaNode | None) -> str:
    """Return the RPC request/response type of a body schema.

    Only references name a message; inline schemas count as no payload.
    """
    if isinstance(node, SchemaRef):
        return capitalize(node.name)
    return EMPTY_TYPE


def enum_type_name(field_name: str) -> str:
    return capitalize(field_name) + "Enum"


def inline_enum(node: SchemaNode) -> Schema | None:
    """Return the schema whose values back a field's nested enum, if any.

    That is the field itself, or the items of an array field.
    """
    while isinstance(node, Schema):
        if node.kind is SchemaKind.ENUM:
            return node
        if node.kind is not SchemaKind.ARRAY:
            return None
        node = node.items
    return None
