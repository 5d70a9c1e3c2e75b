"""Translates OpenAPI operations into RPCs with google.api.http bindings."""

from openapi_to_proto.generator.model import HttpRule, Rpc
from openapi_to_proto.generator.naming import rpc_name
from openapi_to_proto.generator.types import EMPTY_TYPE, resolve_type
from openapi_to_proto.parser.base import MediaType, Operation, Response

BODY_METHODS = ("POST", "PUT", "PATCH")


def translate_operations(operations: list[Operation]) -> list[Rpc]:
    return [translate_operation(op) for op in operations]


def translate_operation(operation: Operation) -> Rpc:
    """Build one RPC: name, request/response types and the HTTP binding."""
    method = operation.method.upper()
    name = operation.operation_id or rpc_name(method, operation.path)

    request = EMPTY_TYPE
    if operation.request_body is not None:
        request = _content_type(operation.request_body.content)

    response = EMPTY_TYPE
    success = _success_response(operation.responses)
    if success is not None:
        response = _content_type(success.content)

    return Rpc(
        name=name,
        request=request,
        response=response,
        http=HttpRule(method=method.lower(), path=operation.path, body=method in BODY_METHODS),
    )


def _success_response(responses: list[Response]) -> Response | None:
    """First 2xx or default response; the rest are ignored."""
    for resp in responses:
        if resp.status.startswith("2") or resp.status == "default":
            return resp
    return None


def _content_type(content: list[MediaType]) -> str:
    for media in content:
        if media.schema_ is not None:
            return resolve_type(media.schema_)
    return EMPTY_TYPE
