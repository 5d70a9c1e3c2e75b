"""Declarations of a generated .proto file.

The generator builds these records first and renders them to text in a
single pass at the end.
"""

from typing import Union

from pydantic import BaseModel


class EnumValue(BaseModel):
    name: str
    number: int


class ProtoEnum(BaseModel):
    name: str
    values: list[EnumValue]


class ProtoField(BaseModel):
    number: int
    optional: bool
    type: str  # int32 / repeated Pet / map<string, string> ...
    name: str


class ProtoMessage(BaseModel):
    name: str
    enums: list[ProtoEnum] = []
    fields: list[ProtoField] = []


class HttpRule(BaseModel):
    """A google.api.http binding."""

    method: str  # get / post / ...
    path: str  # /users/{id}
    body: bool = False


class Rpc(BaseModel):
    name: str
    request: str
    response: str
    http: HttpRule


class ProtoService(BaseModel):
    name: str
    rpcs: list[Rpc] = []


Declaration = Union[ProtoEnum, ProtoMessage]


class ProtoFile(BaseModel):
    package: str
    imports: list[str]
    declarations: list[Declaration] = []
    service: ProtoService
