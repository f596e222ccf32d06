"""
HTTP dispatch for signed SimpleDB requests

This module sends a signed request over HTTP(S) and hands the raw response
body to the parser the operation asked for. It performs no retries; any
failure is raised to the caller.
"""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter

from .exceptions import DecodingError, ServiceError, TransportError, ValidationError
from .parsers.base import ResponseParser
from .parsers.basic import ErrorResponseParser
from .signing.types import HttpMethod, SignedRequest
from .version import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f'SimpleDB-Python-SDK/{__version__}'


class SimpleDBHttpClient:
    """
    Dispatcher for signed requests.

    Holds no per-request state. The underlying ``requests.Session`` may be
    supplied by the caller; a session created here has retries disabled.
    """

    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True,
                 session: Optional[requests.Session] = None):
        """
        Initialize the dispatcher.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify TLS certificates
            session: Optional session to send requests through
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._owns_session = session is None
        self.session = session if session is not None else self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session without retry behaviour."""
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            'Accept': 'text/xml',
            'User-Agent': USER_AGENT,
        })

        return session

    def dispatch(self, request: SignedRequest, parser: ResponseParser) -> Any:
        """
        Send a signed request and decode the response.

        Args:
            request: Signed request descriptor
            parser: Parser for a successful response body

        Returns:
            Whatever the parser returns

        Raises:
            ValidationError: For a method other than GET
            TransportError: If no response was received
            ServiceError: If the service answered with an error status
            DecodingError: If a successful body does not decode
        """
        if request.method != HttpMethod.GET:
            raise ValidationError(
                f"Unsupported request method: {request.method.value}",
                "UNSUPPORTED_METHOD",
                {"method": request.method.value}
            )

        try:
            logger.debug(f"Sending {request.action} request to {request.url.split('?', 1)[0]}")
            response = self.session.get(request.url, timeout=self.timeout, verify=self.verify_ssl)
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Request timeout after {self.timeout} seconds",
                "TIMEOUT",
                {"action": request.action, "original_error": str(e)}
            )
        except requests.exceptions.ConnectionError as e:
            raise TransportError(
                f"Connection error: {e}",
                "CONNECTION_ERROR",
                {"action": request.action, "original_error": str(e)}
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request failed: {e}",
                details={"action": request.action, "original_error": str(e)}
            )

        logger.debug(f"{request.action} response: HTTP {response.status_code}")

        if not response.ok:
            raise self._service_error(request, response, parser.nil_string)

        return parser.parse(response.content)

    def _service_error(self, request: SignedRequest, response: requests.Response,
                       nil_string: str) -> ServiceError:
        """Build the ServiceError for an error response."""
        try:
            document = ErrorResponseParser(nil_string).parse(response.content)
        except DecodingError:
            return ServiceError(
                f"HTTP {response.status_code}: {response.reason}",
                "HTTP_ERROR",
                http_status=response.status_code,
                details={"action": request.action}
            )

        if not document.errors:
            return ServiceError(
                f"HTTP {response.status_code}: {response.reason}",
                "HTTP_ERROR",
                http_status=response.status_code,
                request_id=document.request_id,
                details={"action": request.action}
            )

        first = document.errors[0]
        return ServiceError(
            first.message or first.code,
            first.code,
            http_status=response.status_code,
            request_id=document.request_id,
            details={
                "action": request.action,
                "box_usage": first.box_usage,
                "errors": [{"code": e.code, "message": e.message} for e in document.errors],
            }
        )

    def close(self):
        """Close the HTTP session if it was created by this client."""
        if self._owns_session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> 'SimpleDBHttpClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
