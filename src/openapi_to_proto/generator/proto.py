"""Proto generator — converts a loaded OpenAPI document into .proto text."""

from openapi_to_proto.generator.model import ProtoFile, ProtoMessage, ProtoService
from openapi_to_proto.generator.render import render_proto
from openapi_to_proto.generator.schemas import translate_schemas
from openapi_to_proto.generator.service import translate_operations
from openapi_to_proto.generator.types import EMPTY_TYPE, SCALAR_TYPES
from openapi_to_proto.parser.base import ApiDocument

DEFAULT_PACKAGE = "generated"
DEFAULT_SERVICE = "ApiService"

PROTO_IMPORTS = [
    "google/api/annotations.proto",
    "google/protobuf/struct.proto",
    "google/protobuf/empty.proto",
]


class ProtoGenerator:
    """Generates a proto3 file with one service from an ApiDocument.

    Translation never fails: inconsistencies in the source document end
    up in ``warnings`` and the output is produced anyway.
    """

    def __init__(self, package: str | None = None, service_name: str | None = None):
        self.package = package or DEFAULT_PACKAGE
        self.service_name = service_name or DEFAULT_SERVICE
        self.warnings: list[str] = []

    def generate(self, document: ApiDocument) -> str:
        """Return the .proto text for the document."""
        return render_proto(self.build(document))

    def build(self, document: ApiDocument) -> ProtoFile:
        self.warnings = []
        declarations = translate_schemas(document.schemas, self.warnings)
        service = ProtoService(name=self.service_name, rpcs=translate_operations(document.operations))
        proto = ProtoFile(
            package=self.package,
            imports=list(PROTO_IMPORTS),
            declarations=declarations,
            service=service,
        )
        self._check_references(proto)
        return proto

    def _check_references(self, proto: ProtoFile) -> None:
        """Warn about type names that nothing in the file declares."""
        declared = {decl.name for decl in proto.declarations}
        builtin = set(SCALAR_TYPES.values())

        for decl in proto.declarations:
            if not isinstance(decl, ProtoMessage):
                continue
            nested = {enum.name for enum in decl.enums}
            for field in decl.fields:
                type_name = field.type.removeprefix("repeated ")
                if type_name not in declared and type_name not in nested and type_name not in builtin:
                    self.warnings.append(f"{decl.name}.{field.name}: unknown type '{type_name}'.")

        for rpc in proto.service.rpcs:
            for type_name in (rpc.request, rpc.response):
                if type_name != EMPTY_TYPE and type_name not in declared:
                    self.warnings.append(f"rpc {rpc.name}: unknown type '{type_name}'.")
