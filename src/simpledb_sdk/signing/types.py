"""
Type definitions for request signing functionality

This module provides type definitions and data classes for SimpleDB
query-API request signing (signature version 2).
"""

from typing import Dict, Optional, Callable
from dataclasses import dataclass
from enum import Enum

from ..exceptions import ConfigurationError


class HttpMethod(str, Enum):
    """HTTP methods understood by the query API"""
    GET = "GET"
    POST = "POST"


class SignatureMethod(str, Enum):
    """HMAC signature methods accepted by the service"""
    HMAC_SHA256 = "HmacSHA256"
    HMAC_SHA1 = "HmacSHA1"


# Protocol constants sent verbatim on every request
SIGNATURE_VERSION = "2"
DEFAULT_API_VERSION = "2007-11-07"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Credentials:
    """
    Access credentials used to sign requests

    Attributes:
        access_key_id: Public access key identifier
        secret_access_key: Secret key used as the HMAC key
    """
    access_key_id: str
    secret_access_key: str

    def __post_init__(self):
        """Validate credentials"""
        if not self.access_key_id or not isinstance(self.access_key_id, str):
            raise ConfigurationError(
                "access_key_id is required",
                "MISSING_CREDENTIALS",
                {"field": "access_key_id"}
            )

        if not self.secret_access_key or not isinstance(self.secret_access_key, str):
            raise ConfigurationError(
                "secret_access_key is required",
                "MISSING_CREDENTIALS",
                {"field": "secret_access_key"}
            )

    def __repr__(self) -> str:
        return f"Credentials(access_key_id='{self.access_key_id}', secret_access_key='***')"


@dataclass(frozen=True)
class SignedRequest:
    """
    Fully signed request ready to be dispatched

    Attributes:
        method: HTTP method the signature was computed for
        url: Complete request URL including the signed query string
        query_string: Canonical query string with the Signature parameter appended
        string_to_sign: Exact string the HMAC was computed over
        signature: Base64 signature (not percent-encoded)
        timestamp: Timestamp parameter included in the signature
        action: Action name of the request
    """
    method: HttpMethod
    url: str
    query_string: str
    string_to_sign: str
    signature: str
    timestamp: str
    action: str


# Type aliases for convenience
ParameterMap = Dict[str, Optional[str]]
TimestampGenerator = Callable[[], str]
