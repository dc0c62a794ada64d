"""Protobuf messages for the index ``VectorService``.

The descriptors are assembled from ``descriptor_pb2`` and registered in the
default descriptor pool, the same way protoc-generated modules register their
serialized file. Field names and numbers follow the service's
``vector_service.proto``; the proto3 JSON names match the REST payload keys, so
``json_format`` converts between the two representations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory, struct_pb2
from google.protobuf.message import Message

SERVICE_NAME: Final[str] = "VectorService"

_PACKAGE: Final[str] = "pinecone_client.vector_service"
_FILE_NAME: Final[str] = "pinecone_client/vector_service.proto"

_F = descriptor_pb2.FieldDescriptorProto
_STRING = _F.TYPE_STRING
_FLOAT = _F.TYPE_FLOAT
_UINT32 = _F.TYPE_UINT32
_BOOL = _F.TYPE_BOOL
_MESSAGE = _F.TYPE_MESSAGE

_STRUCT = "." + struct_pb2.Struct.DESCRIPTOR.full_name


def _ref(name: str) -> str:
    return f".{_PACKAGE}.{name}"


def _json_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _field(
    name: str,
    number: int,
    type_: int,
    *,
    repeated: bool = False,
    message: str | None = None,
) -> descriptor_pb2.FieldDescriptorProto:
    field = _F(
        name=name,
        number=number,
        type=type_,  # pyright: ignore[reportArgumentType]
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
        json_name=_json_name(name),
    )
    if message is not None:
        field.type_name = message
    return field


def _message(
    name: str,
    *fields: descriptor_pb2.FieldDescriptorProto,
    nested: tuple[descriptor_pb2.DescriptorProto, ...] = (),
) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(fields)
    message.nested_type.extend(nested)
    return message


def _map_entry(name: str, value_type: str) -> descriptor_pb2.DescriptorProto:
    entry = _message(
        name,
        _field("key", 1, _STRING),
        _field("value", 2, _MESSAGE, message=value_type),
    )
    entry.options.map_entry = True
    return entry


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    sparse = _ref("SparseValues")
    file = descriptor_pb2.FileDescriptorProto(
        name=_FILE_NAME,
        package=_PACKAGE,
        syntax="proto3",
    )
    file.dependency.append(struct_pb2.DESCRIPTOR.name)
    file.message_type.extend(
        [
            _message(
                "SparseValues",
                _field("indices", 1, _UINT32, repeated=True),
                _field("values", 2, _FLOAT, repeated=True),
            ),
            _message(
                "Vector",
                _field("id", 1, _STRING),
                _field("values", 2, _FLOAT, repeated=True),
                _field("metadata", 3, _MESSAGE, message=_STRUCT),
                _field("sparse_values", 4, _MESSAGE, message=sparse),
            ),
            _message(
                "ScoredVector",
                _field("id", 1, _STRING),
                _field("score", 2, _FLOAT),
                _field("values", 3, _FLOAT, repeated=True),
                _field("metadata", 4, _MESSAGE, message=_STRUCT),
                _field("sparse_values", 5, _MESSAGE, message=sparse),
            ),
            _message(
                "UpsertRequest",
                _field("vectors", 1, _MESSAGE, repeated=True, message=_ref("Vector")),
                _field("namespace", 2, _STRING),
            ),
            _message("UpsertResponse", _field("upserted_count", 1, _UINT32)),
            _message(
                "DeleteRequest",
                _field("ids", 1, _STRING, repeated=True),
                _field("delete_all", 2, _BOOL),
                _field("namespace", 3, _STRING),
                _field("filter", 4, _MESSAGE, message=_STRUCT),
            ),
            _message("DeleteResponse"),
            _message(
                "FetchRequest",
                _field("ids", 1, _STRING, repeated=True),
                _field("namespace", 2, _STRING),
            ),
            _message(
                "FetchResponse",
                _field(
                    "vectors",
                    1,
                    _MESSAGE,
                    repeated=True,
                    message=_ref("FetchResponse.VectorsEntry"),
                ),
                _field("namespace", 2, _STRING),
                nested=(_map_entry("VectorsEntry", _ref("Vector")),),
            ),
            _message(
                "QueryRequest",
                _field("namespace", 1, _STRING),
                _field("top_k", 2, _UINT32),
                _field("filter", 3, _MESSAGE, message=_STRUCT),
                _field("include_values", 4, _BOOL),
                _field("include_metadata", 5, _BOOL),
                _field("vector", 7, _FLOAT, repeated=True),
                _field("id", 8, _STRING),
                _field("sparse_vector", 9, _MESSAGE, message=sparse),
            ),
            _message(
                "QueryResponse",
                _field("matches", 2, _MESSAGE, repeated=True, message=_ref("ScoredVector")),
                _field("namespace", 3, _STRING),
            ),
            _message(
                "UpdateRequest",
                _field("id", 1, _STRING),
                _field("values", 2, _FLOAT, repeated=True),
                _field("set_metadata", 3, _MESSAGE, message=_STRUCT),
                _field("namespace", 4, _STRING),
                _field("sparse_values", 5, _MESSAGE, message=sparse),
            ),
            _message("UpdateResponse"),
            _message(
                "DescribeIndexStatsRequest",
                _field("filter", 1, _MESSAGE, message=_STRUCT),
            ),
            _message("NamespaceSummary", _field("vector_count", 1, _UINT32)),
            _message(
                "DescribeIndexStatsResponse",
                _field(
                    "namespaces",
                    1,
                    _MESSAGE,
                    repeated=True,
                    message=_ref("DescribeIndexStatsResponse.NamespacesEntry"),
                ),
                _field("dimension", 2, _UINT32),
                _field("index_fullness", 3, _FLOAT),
                _field("total_vector_count", 4, _UINT32),
                nested=(_map_entry("NamespacesEntry", _ref("NamespaceSummary")),),
            ),
        ]
    )
    return file


_pool = descriptor_pool.Default()
_pool.AddSerializedFile(_build_file().SerializeToString())


def message_class(name: str) -> type[Message]:
    """Return the generated class for a message declared in this module."""
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{_PACKAGE}.{name}"))


@dataclass(frozen=True, slots=True)
class Rpc:
    """A unary VectorService method with its request and response classes."""

    name: str
    request: type[Message]
    response: type[Message]

    @property
    def path(self) -> str:
        return f"/{SERVICE_NAME}/{self.name}"


RPCS: Final[dict[str, Rpc]] = {
    name: Rpc(name, message_class(f"{name}Request"), message_class(f"{name}Response"))
    for name in ("Upsert", "Delete", "Fetch", "Query", "Update", "DescribeIndexStats")
}
