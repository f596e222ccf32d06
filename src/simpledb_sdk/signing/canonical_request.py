"""
Canonical request construction for SimpleDB signature version 2

This module merges caller parameters with the authentication and
versioning fields, builds the sorted canonical query string and the
string-to-sign, and appends the HMAC signature.
"""

import logging
from typing import Dict, Optional

from ..exceptions import SigningError, ValidationError
from .hmac_signer import HmacSigner
from .types import (
    Credentials,
    HttpMethod,
    ParameterMap,
    SignatureMethod,
    SignedRequest,
    TimestampGenerator,
    DEFAULT_API_VERSION,
    SIGNATURE_VERSION,
)
from .utils import (
    build_query_string,
    canonical_host,
    drop_absent_parameters,
    generate_timestamp,
    percent_encode,
)

logger = logging.getLogger(__name__)

CANONICAL_PATH = '/'


def build_string_to_sign(method: HttpMethod, host: str, query_string: str) -> str:
    """
    Build the string-to-sign.

    Args:
        method: HTTP method
        host: Host line (already port-normalized)
        query_string: Canonical query string without the Signature parameter

    Returns:
        str: Newline separated method, host, path and query
    """
    return '\n'.join((method.value, host, CANONICAL_PATH, query_string.rstrip('&')))


class CanonicalRequestBuilder:
    """
    Builds signed requests for one set of credentials and one endpoint

    The builder keeps only immutable configuration. Timestamps and
    signatures are computed per call.
    """

    def __init__(
        self,
        credentials: Credentials,
        host: str,
        port: int = 443,
        scheme: str = 'https',
        api_version: str = DEFAULT_API_VERSION,
        signature_method: SignatureMethod = SignatureMethod.HMAC_SHA256,
        timestamp_generator: Optional[TimestampGenerator] = None,
    ):
        """
        Initialize the builder.

        Args:
            credentials: Access key pair
            host: Endpoint host
            port: Endpoint port
            scheme: URL scheme
            api_version: Value of the Version parameter
            signature_method: HMAC method identifier
            timestamp_generator: Optional replacement for the UTC clock
        """
        self.credentials = credentials
        self.host = host
        self.port = port
        self.scheme = scheme
        self.api_version = api_version
        self.signer = HmacSigner(credentials.secret_access_key, signature_method)
        self.timestamp_generator = timestamp_generator or generate_timestamp

    @property
    def signature_method(self) -> SignatureMethod:
        return self.signer.signature_method

    def endpoint_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}/"

    def canonical_parameters(
        self,
        action: str,
        params: Optional[ParameterMap] = None,
        timestamp: Optional[str] = None,
    ) -> Dict[str, str]:
        """
        Merge caller parameters with the fixed protocol fields.

        Args:
            action: Action name
            params: Caller parameters, ``None`` values meaning absent
            timestamp: Timestamp to sign with (defaults to now)

        Returns:
            dict: Parameters that will be signed, absent ones removed
        """
        if not action:
            raise ValidationError("Action cannot be empty", "INVALID_ACTION")

        merged: ParameterMap = dict(params or {})
        merged.update({
            'Action': action,
            'AWSAccessKeyId': self.credentials.access_key_id,
            'SignatureMethod': self.signature_method.value,
            'SignatureVersion': SIGNATURE_VERSION,
            'Timestamp': timestamp or self.timestamp_generator(),
            'Version': self.api_version,
        })
        return drop_absent_parameters(merged)

    def build(
        self,
        action: str,
        params: Optional[ParameterMap] = None,
        timestamp: Optional[str] = None,
        method: HttpMethod = HttpMethod.GET,
    ) -> SignedRequest:
        """
        Build a signed request.

        Args:
            action: Action name
            params: Caller parameters
            timestamp: Optional fixed timestamp
            method: HTTP method the signature covers

        Returns:
            SignedRequest: Signed request descriptor

        Raises:
            ValidationError: If a parameter is not a string
            SigningError: If the signature cannot be computed
        """
        canonical = self.canonical_parameters(action, params, timestamp)

        for key, value in canonical.items():
            if not isinstance(value, str):
                raise ValidationError(
                    f"Parameter {key} must be a string, got {type(value).__name__}",
                    "INVALID_PARAMETER",
                    {"parameter": key}
                )

        query_string = build_query_string(canonical)
        host = canonical_host(self.host, self.port, self.scheme)
        string_to_sign = build_string_to_sign(method, host, query_string)

        try:
            signature = self.signer.sign(string_to_sign)
        except SigningError:
            raise
        except Exception as e:
            raise SigningError(
                f"Request signing failed: {e}",
                details={"action": action, "original_error": str(e)}
            )

        signed_query = f"{query_string}&Signature={percent_encode(signature)}"
        url = self.endpoint_url()
        if method == HttpMethod.GET:
            url = f"{url}?{signed_query}"

        logger.debug(f"Signed {action} request with {self.signature_method.value}")

        return SignedRequest(
            method=method,
            url=url,
            query_string=signed_query,
            string_to_sign=string_to_sign,
            signature=signature,
            timestamp=canonical['Timestamp'],
            action=action,
        )
