"""
Descriptor model module.

Contains the immutable schema nodes and the decoder building them
from a plugin request.
"""

from __future__ import annotations

from .decoder import ENTITY_OPTION_NUMBER, SchemaDecoder, decode_request
from .nodes import FieldDeclaration, FieldKind, FileDeclaration, SchemaSet, SchemaType, Trait, TypeKind

__all__ = [
    "ENTITY_OPTION_NUMBER",
    "FieldDeclaration",
    "FieldKind",
    "FileDeclaration",
    "SchemaDecoder",
    "SchemaSet",
    "SchemaType",
    "Trait",
    "TypeKind",
    "decode_request",
]
