"""
Local validation of item names, attribute names and attribute values

The store accepts up to 1024 bytes of UTF-8 per name or value, restricted
to characters that are legal in XML 1.0.
"""

import re

from ..exceptions import EncodingError

MAX_NAME_BYTES = 1024
MAX_VALUE_BYTES = 1024

_INVALID_XML_CHARACTERS = re.compile(
    r'[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]'
)


def find_invalid_character(text: str) -> int:
    """
    Return the index of the first character not allowed in XML, or -1.
    """
    match = _INVALID_XML_CHARACTERS.search(text)
    return match.start() if match else -1


def validate_text(text: str, kind: str, max_bytes: int) -> str:
    """
    Check length and charset of a name or value.

    Args:
        text: Name or value to check
        kind: Human readable field kind used in error messages
        max_bytes: Maximum UTF-8 length

    Returns:
        str: The text unchanged

    Raises:
        EncodingError: If the text is too long or holds invalid characters
    """
    size = len(text.encode('utf-8'))
    if size > max_bytes:
        raise EncodingError(
            f"{kind} exceeds {max_bytes} bytes ({size} bytes)",
            "ATTRIBUTE_TOO_LONG",
            {"kind": kind, "size": size, "max_bytes": max_bytes}
        )

    position = find_invalid_character(text)
    if position >= 0:
        raise EncodingError(
            f"{kind} contains a character not allowed in XML at position {position}",
            "INVALID_CHARACTER",
            {"kind": kind, "position": position, "character": hex(ord(text[position]))}
        )

    return text


def validate_item_name(name: str) -> str:
    return validate_text(name, "Item name", MAX_NAME_BYTES)


def validate_attribute_name(name: str) -> str:
    return validate_text(name, "Attribute name", MAX_NAME_BYTES)


def validate_attribute_value(value: str) -> str:
    return validate_text(value, "Attribute value", MAX_VALUE_BYTES)


_DOMAIN_NAME = re.compile(r'^[a-zA-Z0-9_.\-]{3,255}$')


def validate_domain_name(name: str) -> str:
    """
    Check a domain name: 3 to 255 characters of ``a-z A-Z 0-9 _ - .``

    Raises:
        EncodingError: If the name does not match
    """
    if not isinstance(name, str) or not _DOMAIN_NAME.match(name):
        raise EncodingError(
            f"Invalid domain name: {name!r}",
            "INVALID_DOMAIN_NAME",
            {"domain_name": name}
        )
    return name
