"""
Decoder turning a `CodeGeneratorRequest` into the descriptor model.

Phase 1 of a plugin run: walk the file descriptors of the request, build
immutable `SchemaType` nodes and derive their traits.
"""

from __future__ import annotations

import logging

from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2
from google.protobuf.unknown_fields import UnknownFieldSet

from ..errors import DecodingError
from .nodes import FieldDeclaration, FieldKind, FileDeclaration, SchemaSet, SchemaType, Trait, TypeKind

logger = logging.getLogger(__name__)

FieldProto = descriptor_pb2.FieldDescriptorProto

# Field number of the `(entity)` extension of `google.protobuf.MessageOptions`
ENTITY_OPTION_NUMBER = 73842

# Oldest compiler major version able to produce the requests we understand
MIN_COMPILER_MAJOR = 3

COMMANDS_FILE_SUFFIX = "commands.proto"
EVENTS_FILE_SUFFIX = "events.proto"
REJECTIONS_FILE_SUFFIX = "rejections.proto"

UUID_FIELD_NAME = "uuid"


class SchemaDecoder:
    """Builds a `SchemaSet` from a plugin request."""

    def __init__(self, entity_option_number: int = ENTITY_OPTION_NUMBER):
        """
        Initialize the decoder.

        Args:
            entity_option_number: Field number of the message option marking entity states
        """
        self.entity_option_number = entity_option_number
        self._schema: SchemaSet | None = None

    def decode(self, request: plugin_pb2.CodeGeneratorRequest) -> SchemaSet:
        """
        Decode the request into the descriptor model.

        Args:
            request: The parsed plugin request

        Returns:
            The schema set of the request

        Raises:
            DecodingError: If the request is unsupported or inconsistent
        """
        self._check_compiler_version(request)
        if not request.file_to_generate:
            raise DecodingError("No files to generate provided.")

        self._schema = SchemaSet()
        for file_proto in request.proto_file:
            declaration = self._decode_file(file_proto)
            self._schema.files[declaration.path] = declaration

        for path in request.file_to_generate:
            if path not in self._schema.files:
                raise DecodingError(f"File to generate `{path}` is not described in the request.")
            self._schema.files_to_generate.append(path)

        logger.debug(
            "Decoded %d files (%d to generate) declaring %d types",
            len(self._schema.files),
            len(self._schema.files_to_generate),
            len(self._schema.types),
        )
        return self._schema

    def _check_compiler_version(self, request: plugin_pb2.CodeGeneratorRequest) -> None:
        if not request.HasField("compiler_version"):
            return
        version = request.compiler_version
        if version.major < MIN_COMPILER_MAJOR:
            raise DecodingError(
                f"Use protoc of version {MIN_COMPILER_MAJOR}.* or higher, got {version.major}.{version.minor}.{version.patch}."
            )

    def _decode_file(self, file_proto: descriptor_pb2.FileDescriptorProto) -> FileDeclaration:
        if not file_proto.name:
            raise DecodingError("A file descriptor in the request has no name.")
        if file_proto.name in self._schema.files:
            raise DecodingError(f"File `{file_proto.name}` is described twice in the request.")

        types: list[SchemaType] = []
        for message in file_proto.message_type:
            types.append(self._decode_message(message, file_proto, parent=None, depth=0))
        for enum in file_proto.enum_type:
            types.append(self._decode_enum(enum, file_proto, parent=None, depth=0))
        for service in file_proto.service:
            types.append(self._decode_service(service, file_proto))

        options = file_proto.options
        return FileDeclaration(
            path=file_proto.name,
            package=file_proto.package,
            types=tuple(types),
            java_package=options.java_package,
            java_outer_classname=options.java_outer_classname,
            java_multiple_files=options.java_multiple_files,
        )

    def _decode_message(
        self,
        message: descriptor_pb2.DescriptorProto,
        file_proto: descriptor_pb2.FileDescriptorProto,
        parent: str | None,
        depth: int,
    ) -> SchemaType:
        full_name = _qualify(parent or file_proto.package, message.name)

        # Map entries are synthetic nested messages, not declarations of their own
        map_entries = {
            _qualify(full_name, nested.name): nested for nested in message.nested_type if nested.options.map_entry
        }
        fields = tuple(_decode_field(f, full_name, map_entries) for f in message.field)

        nested: list[SchemaType] = []
        for nested_message in message.nested_type:
            if nested_message.options.map_entry:
                continue
            nested.append(self._decode_message(nested_message, file_proto, full_name, depth + 1))
        for nested_enum in message.enum_type:
            nested.append(self._decode_enum(nested_enum, file_proto, full_name, depth + 1))

        schema_type = SchemaType(
            full_name=full_name,
            name=message.name,
            kind=TypeKind.MESSAGE,
            file=file_proto.name,
            parent=parent,
            depth=depth,
            fields=fields,
            nested=tuple(nested),
            traits=self._message_traits(message, fields, file_proto.name, parent),
        )
        return self._register(schema_type)

    def _decode_enum(
        self,
        enum: descriptor_pb2.EnumDescriptorProto,
        file_proto: descriptor_pb2.FileDescriptorProto,
        parent: str | None,
        depth: int,
    ) -> SchemaType:
        schema_type = SchemaType(
            full_name=_qualify(parent or file_proto.package, enum.name),
            name=enum.name,
            kind=TypeKind.ENUM,
            file=file_proto.name,
            parent=parent,
            depth=depth,
            enum_values=tuple(value.name for value in enum.value),
        )
        return self._register(schema_type)

    def _decode_service(
        self,
        service: descriptor_pb2.ServiceDescriptorProto,
        file_proto: descriptor_pb2.FileDescriptorProto,
    ) -> SchemaType:
        schema_type = SchemaType(
            full_name=_qualify(file_proto.package, service.name),
            name=service.name,
            kind=TypeKind.SERVICE,
            file=file_proto.name,
            methods=tuple(method.name for method in service.method),
        )
        return self._register(schema_type)

    def _register(self, schema_type: SchemaType) -> SchemaType:
        if schema_type.full_name in self._schema.types:
            raise DecodingError(f"Type `{schema_type.full_name}` is declared more than once.")
        self._schema.types[schema_type.full_name] = schema_type
        return schema_type

    def _message_traits(
        self,
        message: descriptor_pb2.DescriptorProto,
        fields: tuple[FieldDeclaration, ...],
        file_name: str,
        parent: str | None,
    ) -> frozenset[Trait]:
        traits: set[Trait] = set()

        if _has_unknown_option(message.options, self.entity_option_number):
            traits.add(Trait.ENTITY_STATE)

        # Signals are top-level messages only; their nested types are plain messages
        if parent is None:
            if file_name.endswith(COMMANDS_FILE_SUFFIX):
                traits.add(Trait.COMMAND)
            elif file_name.endswith(EVENTS_FILE_SUFFIX):
                traits.add(Trait.EVENT)
            elif file_name.endswith(REJECTIONS_FILE_SUFFIX):
                traits.add(Trait.REJECTION)

        if len(fields) == 1:
            traits.add(Trait.VALUE_WRAPPER)
            only = fields[0]
            if only.name == UUID_FIELD_NAME and only.kind is FieldKind.SCALAR and only.scalar_type == "string":
                traits.add(Trait.UUID_VALUE)

        return frozenset(traits)


def decode_request(
    request: plugin_pb2.CodeGeneratorRequest,
    entity_option_number: int = ENTITY_OPTION_NUMBER,
) -> SchemaSet:
    """Convenience function decoding a request with a fresh decoder."""
    return SchemaDecoder(entity_option_number).decode(request)


def _qualify(scope: str, name: str) -> str:
    return f"{scope}.{name}" if scope else name


def _type_name(field_proto: FieldProto) -> str:
    # protoc always emits fully-qualified references with a leading dot
    return field_proto.type_name.lstrip(".")


def _scalar_name(field_type: int) -> str:
    return FieldProto.Type.Name(field_type).removeprefix("TYPE_").lower()


def _is_composite(field_type: int) -> bool:
    return field_type in (FieldProto.TYPE_MESSAGE, FieldProto.TYPE_GROUP, FieldProto.TYPE_ENUM)


def _decode_field(
    field_proto: FieldProto,
    declaring_type: str,
    map_entries: dict[str, descriptor_pb2.DescriptorProto],
) -> FieldDeclaration:
    type_name = _type_name(field_proto) if _is_composite(field_proto.type) else None
    scalar_type = None if type_name else _scalar_name(field_proto.type)
    repeated = field_proto.label == FieldProto.LABEL_REPEATED

    if repeated and type_name in map_entries:
        kind = FieldKind.MAP
        value = next(f for f in map_entries[type_name].field if f.number == 2)
        if _is_composite(value.type):
            type_name, scalar_type = _type_name(value), None
        else:
            type_name, scalar_type = None, _scalar_name(value.type)
    elif repeated:
        kind = FieldKind.REPEATED
    elif field_proto.type == FieldProto.TYPE_ENUM:
        kind = FieldKind.ENUM
    elif type_name:
        kind = FieldKind.MESSAGE
    else:
        kind = FieldKind.SCALAR

    return FieldDeclaration(
        name=field_proto.name,
        number=field_proto.number,
        kind=kind,
        declaring_type=declaring_type,
        scalar_type=scalar_type,
        type_name=type_name,
        json_name=field_proto.json_name,
    )


def _has_unknown_option(options, number: int) -> bool:
    """Check whether the options carry an extension this process does not know."""
    return any(unknown.field_number == number for unknown in UnknownFieldSet(options))
