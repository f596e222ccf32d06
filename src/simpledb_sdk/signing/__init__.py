"""
SimpleDB Python SDK - Request Signing Module

Signature version 2 implementation: canonical query strings signed with
HMAC-SHA256 (or HMAC-SHA1).
"""

from .types import (
    Credentials,
    HttpMethod,
    SignatureMethod,
    SignedRequest,
    ParameterMap,
    SIGNATURE_VERSION,
    DEFAULT_API_VERSION,
    TIMESTAMP_FORMAT,
)

from .hmac_signer import HmacSigner

from .canonical_request import (
    CanonicalRequestBuilder,
    build_string_to_sign,
)

from .utils import (
    generate_timestamp,
    format_timestamp,
    percent_encode,
    drop_absent_parameters,
    sort_parameters,
    build_query_string,
    canonical_host,
)

# Public API exports
__all__ = [
    # Types
    'Credentials',
    'HttpMethod',
    'SignatureMethod',
    'SignedRequest',
    'ParameterMap',
    'SIGNATURE_VERSION',
    'DEFAULT_API_VERSION',
    'TIMESTAMP_FORMAT',
    # Signing
    'HmacSigner',
    'CanonicalRequestBuilder',
    'build_string_to_sign',
    # Utilities
    'generate_timestamp',
    'format_timestamp',
    'percent_encode',
    'drop_absent_parameters',
    'sort_parameters',
    'build_query_string',
    'canonical_host',
]
