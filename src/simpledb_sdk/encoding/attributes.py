"""
Attribute encoding for the SimpleDB query API

This module flattens nested item -> attribute -> value(s) structures into
the indexed parameter names the query API expects, e.g.::

    Item.0.ItemName=item1
    Item.0.Attribute.0.Name=color
    Item.0.Attribute.0.Value=blue
    Item.0.Attribute.0.Replace=true
"""

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import EncodingError
from .validation import (
    validate_attribute_name,
    validate_attribute_value,
    validate_item_name,
)

DEFAULT_NIL_STRING = 'nil'

MULTI_VALUE_TYPES = (list, tuple, set, frozenset)

AttributeMap = Mapping[str, Any]
ItemMap = Mapping[str, AttributeMap]


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(
                f"Binary value is not valid UTF-8: {e}",
                "INVALID_ENCODING",
                {"original_error": str(e)}
            )
    return str(value)


def encode_value(value: Any, nil_string: str = DEFAULT_NIL_STRING) -> str:
    """
    Encode a single attribute value.

    Args:
        value: Value to encode, ``None`` for a nil value
        nil_string: Sentinel sent in place of ``None``

    Returns:
        str: Wire representation of the value
    """
    if value is None:
        return nil_string
    return _to_text(value)


def as_names(names: Optional[Iterable[str]]) -> List[str]:
    """Treat a single name as a one-element list of names."""
    if names is None:
        return []
    if isinstance(names, (str, bytes)):
        names = [names]
    return [_to_text(name) for name in names]


def iter_values(value: Any) -> List[Any]:
    """Expand a possibly multi-valued attribute into its values."""
    if isinstance(value, MULTI_VALUE_TYPES):
        return list(value)
    return [value]


def flatten_attributes(
    attributes: Optional[AttributeMap],
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> Iterator[Tuple[str, str]]:
    """
    Yield one ``(name, value)`` pair per attribute value.

    A multi-valued attribute yields one pair per value, each repeating
    the attribute name.

    Args:
        attributes: Attribute name to value(s) map
        nil_string: Sentinel sent in place of ``None``
        validate: Check names and values before encoding

    Yields:
        tuple: ``(attribute_name, encoded_value)``
    """
    if not attributes:
        return

    for name, value in attributes.items():
        name = _to_text(name)
        if validate:
            validate_attribute_name(name)
        for single_value in iter_values(value):
            encoded = encode_value(single_value, nil_string)
            if validate:
                validate_attribute_value(encoded)
            yield name, encoded


def encode_batch_attributes(
    items: Optional[ItemMap],
    replace_attributes: Optional[Mapping[str, Iterable[str]]] = None,
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> Dict[str, str]:
    """
    Encode attributes of several items for BatchPutAttributes.

    Args:
        items: Item name to attribute map
        replace_attributes: Item name to attribute names whose existing
            values must be replaced rather than appended to
        nil_string: Sentinel sent in place of ``None``
        validate: Check names and values before encoding

    Returns:
        dict: Flat ``Item.<i>.*`` parameter map, empty for no items
    """
    encoded: Dict[str, str] = {}
    if not items:
        return encoded

    replace_attributes = replace_attributes or {}

    for item_index, (item_name, attributes) in enumerate(items.items()):
        item_name = _to_text(item_name)
        if validate:
            validate_item_name(item_name)

        prefix = f"Item.{item_index}"
        encoded[f"{prefix}.ItemName"] = item_name

        replace = set(as_names(replace_attributes.get(item_name)))
        pairs = flatten_attributes(attributes, nil_string, validate)
        for attribute_index, (name, value) in enumerate(pairs):
            attribute_prefix = f"{prefix}.Attribute.{attribute_index}"
            encoded[f"{attribute_prefix}.Name"] = name
            encoded[f"{attribute_prefix}.Value"] = value
            if name in replace:
                encoded[f"{attribute_prefix}.Replace"] = 'true'

    return encoded


def encode_attributes(
    attributes: Optional[AttributeMap],
    replace_attributes: Optional[Iterable[str]] = None,
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> Dict[str, str]:
    """
    Encode attributes of a single item (``Attribute.<j>.*``).

    Args:
        attributes: Attribute name to value(s) map
        replace_attributes: Attribute names to mark as replacing
        nil_string: Sentinel sent in place of ``None``
        validate: Check names and values before encoding

    Returns:
        dict: Flat parameter map, empty for no attributes
    """
    encoded: Dict[str, str] = {}
    replace = set(as_names(replace_attributes))

    pairs = flatten_attributes(attributes, nil_string, validate)
    for index, (name, value) in enumerate(pairs):
        encoded[f"Attribute.{index}.Name"] = name
        encoded[f"Attribute.{index}.Value"] = value
        if name in replace:
            encoded[f"Attribute.{index}.Replace"] = 'true'

    return encoded


def encode_attribute_names(
    attribute_names: Optional[Iterable[str]],
    validate: bool = False,
) -> Dict[str, str]:
    """
    Encode an attribute-name filter (``AttributeName.<j>``).

    Args:
        attribute_names: Names to select
        validate: Check names before encoding

    Returns:
        dict: Flat parameter map, empty for no names
    """
    encoded: Dict[str, str] = {}
    if not attribute_names:
        return encoded

    for index, name in enumerate(attribute_names):
        name = _to_text(name)
        if validate:
            validate_attribute_name(name)
        encoded[f"AttributeName.{index}"] = name

    return encoded


def encode_named_attributes(
    attribute_names: Optional[Iterable[str]],
    validate: bool = False,
) -> Dict[str, str]:
    """
    Encode attribute names without values (``Attribute.<j>.Name``).

    Used by DeleteAttributes to remove every value of the named attributes.

    Args:
        attribute_names: Names to address
        validate: Check names before encoding

    Returns:
        dict: Flat parameter map, empty for no names
    """
    encoded: Dict[str, str] = {}
    if not attribute_names:
        return encoded

    for index, name in enumerate(attribute_names):
        name = _to_text(name)
        if validate:
            validate_attribute_name(name)
        encoded[f"Attribute.{index}.Name"] = name

    return encoded
