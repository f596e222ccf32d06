"""
SimpleDB Python SDK
Signed query-API client for the SimpleDB key-value store
"""

from .version import __version__
from .exceptions import (
    SimpleDBSDKError,
    ConfigurationError,
    ValidationError,
    EncodingError,
    SigningError,
    TransportError,
    DecodingError,
    ServiceError,
)
from .config import ClientConfig
from .client import SimpleDBClient, create_client
from .http_client import SimpleDBHttpClient
from .operations import OperationRequest
from .encoding import (
    encode_batch_attributes,
    encode_attributes,
    encode_attribute_names,
    encode_named_attributes,
)
from .signing import (
    Credentials,
    HttpMethod,
    SignatureMethod,
    SignedRequest,
    CanonicalRequestBuilder,
    HmacSigner,
)
from .parsers import (
    ResponseParser,
    BasicParser,
    ErrorResponseParser,
    ListDomainsParser,
    DomainMetadataParser,
    GetAttributesParser,
    SelectParser,
    BasicResult,
    ListDomainsResult,
    DomainMetadataResult,
    GetAttributesResult,
    SelectResult,
)

# Public API exports
__all__ = [
    '__version__',
    # Exceptions
    'SimpleDBSDKError',
    'ConfigurationError',
    'ValidationError',
    'EncodingError',
    'SigningError',
    'TransportError',
    'DecodingError',
    'ServiceError',
    # Client
    'ClientConfig',
    'SimpleDBClient',
    'create_client',
    'SimpleDBHttpClient',
    'OperationRequest',
    # Encoding
    'encode_batch_attributes',
    'encode_attributes',
    'encode_attribute_names',
    'encode_named_attributes',
    # Signing
    'Credentials',
    'HttpMethod',
    'SignatureMethod',
    'SignedRequest',
    'CanonicalRequestBuilder',
    'HmacSigner',
    # Parsers and results
    'ResponseParser',
    'BasicParser',
    'ErrorResponseParser',
    'ListDomainsParser',
    'DomainMetadataParser',
    'GetAttributesParser',
    'SelectParser',
    'BasicResult',
    'ListDomainsResult',
    'DomainMetadataResult',
    'GetAttributesResult',
    'SelectResult',
]
