"""
Attribute encoding for the SimpleDB query API
"""

from .attributes import (
    DEFAULT_NIL_STRING,
    as_names,
    encode_value,
    flatten_attributes,
    encode_batch_attributes,
    encode_attributes,
    encode_attribute_names,
    encode_named_attributes,
)
from .validation import (
    MAX_NAME_BYTES,
    MAX_VALUE_BYTES,
    validate_item_name,
    validate_attribute_name,
    validate_attribute_value,
    validate_domain_name,
)

__all__ = [
    'DEFAULT_NIL_STRING',
    'as_names',
    'encode_value',
    'flatten_attributes',
    'encode_batch_attributes',
    'encode_attributes',
    'encode_attribute_names',
    'encode_named_attributes',
    'MAX_NAME_BYTES',
    'MAX_VALUE_BYTES',
    'validate_item_name',
    'validate_attribute_name',
    'validate_attribute_value',
    'validate_domain_name',
]
