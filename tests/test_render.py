from openapi_to_proto.generator.model import (
    EnumValue,
    HttpRule,
    ProtoEnum,
    ProtoField,
    ProtoMessage,
    Rpc,
)
from openapi_to_proto.generator.render import render_enum, render_message, render_rpc


class TestRenderEnum:
    def test_top_level(self):
        enum = ProtoEnum(name="Role", values=[EnumValue(name="ADMIN", number=0), EnumValue(name="GUEST", number=1)])
        assert render_enum(enum) == ["enum Role {", "  ADMIN = 0;", "  GUEST = 1;", "}"]


class TestRenderMessage:
    def test_user_message(self):
        msg = ProtoMessage(
            name="User",
            enums=[
                ProtoEnum(
                    name="StatusEnum",
                    values=[EnumValue(name="ACTIVE", number=0), EnumValue(name="INACTIVE", number=1)],
                )
            ],
            fields=[
                ProtoField(number=1, optional=False, type="int32", name="id"),
                ProtoField(number=2, optional=True, type="StatusEnum", name="status"),
            ],
        )
        assert "\n".join(render_message(msg)) == (
            "message User {\n"
            "  enum StatusEnum {\n"
            "    ACTIVE = 0;\n"
            "    INACTIVE = 1;\n"
            "  }\n"
            "  int32 id = 1;\n"
            "  optional StatusEnum status = 2;\n"
            "}"
        )


class TestRenderRpc:
    def test_post_with_body(self):
        rpc = Rpc(name="createUser", request="User", response="User", http=HttpRule(method="post", path="/users", body=True))
        assert render_rpc(rpc) == [
            "  rpc createUser(User) returns (User) {",
            "    option (google.api.http) = {",
            '      post: "/users"',
            '      body: "*"',
            "    };",
            "  }",
        ]

    def test_get_without_body(self):
        rpc = Rpc(
            name="GetUsers_id_",
            request="google.protobuf.Empty",
            response="User",
            http=HttpRule(method="get", path="/users/{id}"),
        )
        lines = render_rpc(rpc)
        assert '      get: "/users/{id}"' in lines
        assert not any("body" in line for line in lines)
