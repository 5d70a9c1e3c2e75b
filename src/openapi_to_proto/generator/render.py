"""Serializes ProtoFile records into .proto text."""

from openapi_to_proto.generator.model import ProtoEnum, ProtoFile, ProtoMessage, ProtoService, Rpc

INDENT = "  "


def render_proto(proto: ProtoFile) -> str:
    lines = ['syntax = "proto3";', "", f"package {proto.package};"]
    lines.extend(f'import "{imp}";' for imp in proto.imports)
    lines.append("")

    for decl in proto.declarations:
        if isinstance(decl, ProtoEnum):
            lines.extend(render_enum(decl))
        else:
            lines.extend(render_message(decl))
        lines.append("")

    lines.extend(render_service(proto.service))
    return "\n".join(lines) + "\n"


def render_enum(enum: ProtoEnum, depth: int = 0) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}enum {enum.name} {{"]
    lines.extend(f"{pad}{INDENT}{v.name} = {v.number};" for v in enum.values)
    lines.append(f"{pad}}}")
    return lines


def render_message(message: ProtoMessage) -> list[str]:
    lines = [f"message {message.name} {{"]
    for enum in message.enums:
        lines.extend(render_enum(enum, depth=1))
    for field in message.fields:
        label = "optional " if field.optional else ""
        lines.append(f"{INDENT}{label}{field.type} {field.name} = {field.number};")
    lines.append("}")
    return lines


def render_service(service: ProtoService) -> list[str]:
    lines = [f"service {service.name} {{"]
    for rpc in service.rpcs:
        lines.extend(render_rpc(rpc))
    lines.append("}")
    return lines


def render_rpc(rpc: Rpc) -> list[str]:
    lines = [
        f"{INDENT}rpc {rpc.name}({rpc.request}) returns ({rpc.response}) {{",
        f"{INDENT * 2}option (google.api.http) = {{",
        f'{INDENT * 3}{rpc.http.method}: "{rpc.http.path}"',
    ]
    if rpc.http.body:
        lines.append(f'{INDENT * 3}body: "*"')
    lines.append(f"{INDENT * 2}}};")
    lines.append(f"{INDENT}}}")
    return lines
