"""
Utility functions for the argument schema to code generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Order matters: '&' first so the entities introduced below are not escaped again
_DOC_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "text_normalizer" -> "TextNormalizer"
        "linearSvm" -> "LinearSvm"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def capitalize(name: str) -> str:
    """Uppercase the first character only: "maxIter" -> "MaxIter"."""
    if not name:
        return name
    return name[0].upper() + name[1:]


def decapitalize(name: str) -> str:
    """Inverse of capitalize for names whose first character was lowercase."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def escape_doc_text(text: str) -> str:
    """Escape text for an XML documentation comment."""
    for char, entity in _DOC_ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_doc_text(text: str) -> str:
    """Reverse escape_doc_text."""
    for char, entity in reversed(_DOC_ESCAPES):
        text = text.replace(entity, char)
    return text
