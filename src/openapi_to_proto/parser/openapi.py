"""OpenAPI 3.x document loader.

Parses YAML/JSON text, validates it against the OpenAPI specification
and converts it into ApiDocument models.
"""

from pathlib import Path
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

import yaml
from jsonschema.exceptions import ValidationError
from openapi_spec_validator import validate
from openapi_spec_validator.validation.exceptions import ValidatorDetectError
from referencing import Registry, Resource
from referencing.exceptions import NoSuchResource, Unresolvable
from referencing.jsonschema import DRAFT202012

from .base import ApiDocument, MediaType, Operation, RequestBody, Response, Schema, SchemaNode, SchemaRef

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class DocumentError(Exception):
    """Base class for documents that cannot be loaded."""


class DocumentParseError(DocumentError):
    """The input is not a YAML/JSON mapping."""


class DocumentValidationError(DocumentError):
    """The input is not a valid OpenAPI document."""


def parse_openapi(file_path: Path) -> ApiDocument:
    """Load an OpenAPI file into an ApiDocument."""
    text = file_path.read_text(encoding="utf-8")
    return load_document(text, base_uri=file_path.resolve().as_uri())


def load_document(text: str, base_uri: str = "") -> ApiDocument:
    """Parse, validate and convert OpenAPI text.

    References, including ones into other files, are resolved relative
    to ``base_uri``. Raises DocumentParseError or DocumentValidationError.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentParseError(str(e)) from e
    if not isinstance(raw, dict):
        raise DocumentParseError("document root must be a mapping")

    # YAML reads unquoted status codes (200:) as ints
    doc = _stringify_keys(raw)

    try:
        validate(doc, base_uri=base_uri)
    except (ValidationError, ValidatorDetectError, Unresolvable) as e:
        raise DocumentValidationError(str(e)) from e

    return build_document(doc, base_uri=base_uri)


def build_document(doc: dict, base_uri: str = "") -> ApiDocument:
    """Convert an already validated OpenAPI mapping into models.

    Named schemas, path items, request bodies and responses given as
    `$ref`s are replaced by their targets; schema references inside
    them stay references so they can be named.
    """
    resolver = _make_resolver(doc, base_uri)

    components = doc.get("components") or {}
    schemas = {}
    for name, node in (components.get("schemas") or {}).items():
        target = _follow(resolver, node)
        schemas[name] = _parse_schema(target if target is not None else node)

    operations = []
    for path, path_item in (doc.get("paths") or {}).items():
        for method, operation in (_follow(resolver, path_item) or {}).items():
            if method.lower() not in HTTP_METHODS:
                continue
            operations.append(_parse_operation(resolver, method.upper(), path, operation or {}))

    return ApiDocument(schemas=schemas, operations=operations)


def _parse_operation(resolver, method: str, path: str, operation: dict) -> Operation:
    request_body = None
    if operation.get("requestBody"):
        body = _follow(resolver, operation["requestBody"]) or {}
        request_body = RequestBody(content=_parse_content(body.get("content")))

    responses = []
    for status_code, resp in (operation.get("responses") or {}).items():
        resp = _follow(resolver, resp) or {}
        responses.append(Response(status=str(status_code), content=_parse_content(resp.get("content"))))

    return Operation(
        method=method,
        path=path,
        operation_id=operation.get("operationId") or "",
        request_body=request_body,
        responses=responses,
    )


def _parse_content(content: dict | None) -> list[MediaType]:
    result = []
    for content_type, media in (content or {}).items():
        schema = (media or {}).get("schema")
        result.append(
            MediaType(
                content_type=content_type,
                schema_=_parse_schema(schema) if schema is not None else None,
            )
        )
    return result


def _parse_schema(node: Any) -> SchemaNode:
    if not isinstance(node, dict):
        return Schema()
    if "$ref" in node:
        return SchemaRef(ref=node["$ref"])

    type_ = node.get("type")
    if isinstance(type_, list):
        # OpenAPI 3.1 allows ["string", "null"]
        type_ = type_[0] if type_ else None

    items = node.get("items")
    return Schema(
        type=type_,
        enum=node.get("enum") or [],
        properties={name: _parse_schema(prop) for name, prop in (node.get("properties") or {}).items()},
        required=node.get("required") or [],
        items=_parse_schema(items) if items is not None else None,
    )


def _make_resolver(doc: dict, base_uri: str):
    registry = Registry(retrieve=_retrieve).with_resource(base_uri, DRAFT202012.create_resource(doc))
    return registry.resolver(base_uri=base_uri)


def _retrieve(uri: str) -> Resource:
    """Load a referenced YAML/JSON file from a file:// URI."""
    parts = urlsplit(uri)
    if parts.scheme != "file":
        raise NoSuchResource(ref=uri)
    text = Path(url2pathname(parts.path)).read_text(encoding="utf-8")
    return DRAFT202012.create_resource(_stringify_keys(yaml.safe_load(text)))


def _follow(resolver, node: Any) -> dict | None:
    """Follow a `$ref` chain to its target; None when it cannot be resolved."""
    seen = set()
    while isinstance(node, dict) and "$ref" in node:
        if id(node) in seen:
            return None
        seen.add(id(node))
        try:
            resolved = resolver.lookup(node["$ref"])
        except Unresolvable:
            return None
        node, resolver = resolved.contents, resolved.resolver
    return node if isinstance(node, dict) else None


def _stringify_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(k): _stringify_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_stringify_keys(v) for v in node]
    return node
