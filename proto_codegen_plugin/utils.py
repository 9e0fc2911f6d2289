"""
Utility functions for naming generated Java code.
"""

import re

# Regex pattern splitting a proto name into alphanumeric runs
_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")

JAVA_RESERVED_KEYWORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
}


def _capitalize_first(word: str) -> str:
    """Upper-case the first letter, keeping the rest of the word as is."""
    return word[:1].upper() + word[1:]


def to_pascal_case(text: str) -> str:
    """Convert a proto name to PascalCase the way protoc's Java generator does.

    Letters after a separator or a digit are capitalized, other letters keep
    their case.

    Examples:
        "test_generators" -> "TestGenerators"
        "first_name" -> "FirstName"
        "uuid" -> "Uuid"
        "ABC" -> "ABC"
        "version2info" -> "Version2Info"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    result = []
    for word in _WORD_PATTERN.findall(text):
        # protoc starts a new word after every digit run
        for part in re.split(r"(?<=[0-9])(?=[A-Za-z])", word):
            result.append(_capitalize_first(part))
    return "".join(result)


def to_camel_case(text: str) -> str:
    """Convert a proto field name to the camelCase of a Java accessor.

    Examples:
        "first_name" -> "firstName"
        "id" -> "id"
    """
    pascal = to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def java_identifier(name: str) -> str:
    """Escape a name colliding with a Java keyword by appending an underscore."""
    return f"{name}_" if name in JAVA_RESERVED_KEYWORDS else name
