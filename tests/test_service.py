from openapi_to_proto.generator.service import translate_operation, translate_operations
from openapi_to_proto.generator.types import EMPTY_TYPE
from openapi_to_proto.parser.base import MediaType, Operation, RequestBody, Response, Schema, SchemaRef

USER_REF = SchemaRef(ref="#/components/schemas/User")


def _json(schema=None) -> list[MediaType]:
    return [MediaType(content_type="application/json", schema_=schema)]


class TestRpcName:
    def test_operation_id_used_verbatim(self):
        rpc = translate_operation(Operation(method="POST", path="/users", operation_id="createUser"))
        assert rpc.name == "createUser"

    def test_synthesized_from_method_and_path(self):
        rpc = translate_operation(Operation(method="GET", path="/users/{id}"))
        assert rpc.name == "GetUsers_id_"


class TestRequestType:
    def test_reference_body(self):
        op = Operation(method="POST", path="/users", request_body=RequestBody(content=_json(USER_REF)))
        assert translate_operation(op).request == "User"

    def test_no_body(self):
        assert translate_operation(Operation(method="GET", path="/users")).request == EMPTY_TYPE

    def test_inline_body_is_empty(self):
        inline = Schema(type="object", properties={"name": Schema(type="string")})
        op = Operation(method="POST", path="/users", request_body=RequestBody(content=_json(inline)))
        assert translate_operation(op).request == EMPTY_TYPE

    def test_first_media_type_with_schema_wins(self):
        content = [
            MediaType(content_type="text/plain"),
            MediaType(content_type="application/json", schema_=USER_REF),
            MediaType(content_type="application/xml", schema_=SchemaRef(ref="#/components/schemas/Other")),
        ]
        op = Operation(method="PUT", path="/users", request_body=RequestBody(content=content))
        assert translate_operation(op).request == "User"


class TestResponseType:
    def test_first_2xx(self):
        op = Operation(
            method="GET",
            path="/users",
            responses=[
                Response(status="404", content=_json(SchemaRef(ref="#/components/schemas/Error"))),
                Response(status="200", content=_json(USER_REF)),
            ],
        )
        assert translate_operation(op).response == "User"

    def test_default(self):
        op = Operation(method="GET", path="/users", responses=[Response(status="default", content=_json(USER_REF))])
        assert translate_operation(op).response == "User"

    def test_only_first_success_considered(self):
        op = Operation(
            method="GET",
            path="/users",
            responses=[
                Response(status="204"),
                Response(status="200", content=_json(USER_REF)),
            ],
        )
        assert translate_operation(op).response == EMPTY_TYPE

    def test_no_success_response(self):
        op = Operation(method="GET", path="/users", responses=[Response(status="500", content=_json(USER_REF))])
        assert translate_operation(op).response == EMPTY_TYPE


class TestHttpRule:
    def test_get_has_no_body(self):
        rpc = translate_operation(Operation(method="GET", path="/users/{id}"))
        assert rpc.http.method == "get"
        assert rpc.http.path == "/users/{id}"
        assert rpc.http.body is False

    def test_body_methods(self):
        for method in ("POST", "PUT", "PATCH"):
            assert translate_operation(Operation(method=method, path="/x")).http.body is True
        for method in ("GET", "DELETE", "HEAD", "OPTIONS", "TRACE"):
            assert translate_operation(Operation(method=method, path="/x")).http.body is False


class TestTranslateOperations:
    def test_keeps_order(self):
        ops = [Operation(method="GET", path="/b"), Operation(method="GET", path="/a")]
        assert [rpc.name for rpc in translate_operations(ops)] == ["GetB", "GetA"]
