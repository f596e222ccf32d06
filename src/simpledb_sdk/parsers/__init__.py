"""
Response parsers for the SimpleDB query API

Each operation names the parser class it expects; the request builder and
the dispatcher do not depend on any of them.
"""

from .types import (
    AttributeValues,
    BasicResult,
    ListDomainsResult,
    DomainMetadataResult,
    GetAttributesResult,
    SelectResult,
    ServiceErrorDetail,
    ErrorResponse,
)
from .base import ResponseParser, ResponseBody
from .basic import BasicParser, ErrorResponseParser
from .domains import ListDomainsParser, DomainMetadataParser
from .items import GetAttributesParser, SelectParser

__all__ = [
    # Results
    'AttributeValues',
    'BasicResult',
    'ListDomainsResult',
    'DomainMetadataResult',
    'GetAttributesResult',
    'SelectResult',
    'ServiceErrorDetail',
    'ErrorResponse',
    # Parsers
    'ResponseParser',
    'ResponseBody',
    'BasicParser',
    'ErrorResponseParser',
    'ListDomainsParser',
    'DomainMetadataParser',
    'GetAttributesParser',
    'SelectParser',
]
