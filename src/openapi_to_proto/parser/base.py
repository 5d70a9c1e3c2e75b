"""Data models for a loaded OpenAPI document.

The loader converts the raw YAML/JSON mapping into these models so the
generator never has to look at untyped dicts.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel


class SchemaKind(str, Enum):
    """Closed set of shapes an inline schema can take."""

    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    ENUM = "enum"
    UNKNOWN = "unknown"


class SchemaRef(BaseModel):
    """A `$ref` pointer to another schema."""

    ref: str  # #/components/schemas/User

    @property
    def name(self) -> str:
        return self.ref.split("/")[-1]


class Schema(BaseModel):
    """An inline schema definition."""

    type: str | None = None
    enum: list[Any] = []
    properties: dict[str, "SchemaNode"] = {}
    required: list[str] = []
    items: "SchemaNode | None" = None

    @property
    def kind(self) -> SchemaKind:
        if self.enum:
            return SchemaKind.ENUM
        try:
            kind = SchemaKind(self.type)
        except ValueError:
            return SchemaKind.UNKNOWN
        # "enum" and "unknown" are not type tags
        if kind in (SchemaKind.ENUM, SchemaKind.UNKNOWN):
            return SchemaKind.UNKNOWN
        return kind


SchemaNode = Union[Schema, SchemaRef]

Schema.model_rebuild()


class MediaType(BaseModel):
    """One content representation of a request or response body."""

    content_type: str
    schema_: SchemaNode | None = None


class RequestBody(BaseModel):
    content: list[MediaType] = []


class Response(BaseModel):
    status: str  # 200 / 2XX / default
    content: list[MediaType] = []


class Operation(BaseModel):
    """A single HTTP method bound to a path."""

    method: str  # GET / POST / PUT / DELETE / PATCH ...
    path: str  # /users/{id}
    operation_id: str = ""
    request_body: RequestBody | None = None
    responses: list[Response] = []


class ApiDocument(BaseModel):
    """Named schemas and operations, in document order."""

    schemas: dict[str, SchemaNode] = {}
    operations: list[Operation] = []
