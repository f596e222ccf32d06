"""
High-level SimpleDB client

This module composes the operation builders, the canonical request
builder and the HTTP dispatcher into one client object exposing every
SimpleDB operation.
"""

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

import requests

from . import operations
from .config.client_config import ClientConfig
from .encoding.attributes import AttributeMap, ItemMap
from .http_client import SimpleDBHttpClient
from .parsers.base import ResponseParser
from .parsers.types import (
    AttributeValues,
    BasicResult,
    DomainMetadataResult,
    GetAttributesResult,
    ListDomainsResult,
    SelectResult,
)
from .signing.canonical_request import CanonicalRequestBuilder
from .signing.types import SignedRequest, TimestampGenerator

logger = logging.getLogger(__name__)


class SimpleDBClient:
    """
    Client for the SimpleDB query API.

    Configuration is fixed at construction. Each call signs its own request
    with a fresh timestamp, so one client may be shared between threads as
    long as the underlying session is.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
        timestamp_generator: Optional[TimestampGenerator] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration
            session: Optional ``requests`` session to dispatch through
            timestamp_generator: Optional replacement for the UTC clock
        """
        self.config = config
        self.request_builder = CanonicalRequestBuilder(
            credentials=config.credentials,
            host=config.host,
            port=config.port,
            scheme=config.scheme,
            api_version=config.api_version,
            signature_method=config.signature_method,
            timestamp_generator=timestamp_generator,
        )
        self.http_client = SimpleDBHttpClient(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            session=session,
        )

        logger.info(f"Initialized SimpleDB client for endpoint: {config.endpoint_url}")

    @classmethod
    def from_env(cls, **overrides: Any) -> 'SimpleDBClient':
        """Create a client from environment variables."""
        return cls(ClientConfig.from_env(**overrides))

    @property
    def nil_string(self) -> str:
        return self.config.nil_string

    @property
    def _validate(self) -> bool:
        return self.config.validate_attributes

    def sign(self, request: operations.OperationRequest, timestamp: Optional[str] = None) -> SignedRequest:
        """
        Sign an operation request without sending it.

        Args:
            request: Operation request
            timestamp: Optional fixed timestamp

        Returns:
            SignedRequest: Signed request descriptor
        """
        return self.request_builder.build(request.action, request.params, timestamp)

    def execute(self, request: operations.OperationRequest,
                parser: Optional[ResponseParser] = None) -> Any:
        """
        Sign and dispatch an operation request.

        Args:
            request: Operation request
            parser: Parser overriding the one the operation names

        Returns:
            Parsed result record
        """
        logger.debug(f"Executing {operations.describe(request)}")
        signed = self.sign(request)
        return self.http_client.dispatch(signed, parser or request.parser(self.nil_string))

    # Domains

    def create_domain(self, domain_name: str) -> BasicResult:
        """
        Create a domain.

        Args:
            domain_name: 3 to 255 characters of ``a-z A-Z 0-9 _ - .``

        Returns:
            BasicResult: Request id and box usage
        """
        return self.execute(operations.create_domain(domain_name, self._validate))

    def delete_domain(self, domain_name: str) -> BasicResult:
        """Delete a domain and every item in it."""
        return self.execute(operations.delete_domain(domain_name, self._validate))

    def list_domains(self, max_number_of_domains: Optional[int] = None,
                     next_token: Optional[str] = None) -> ListDomainsResult:
        """
        List one page of domains.

        Args:
            max_number_of_domains: Page size between 1 and 100
            next_token: Token returned by the previous page

        Returns:
            ListDomainsResult: Domain names and the next page token
        """
        return self.execute(operations.list_domains(max_number_of_domains, next_token))

    def iter_domains(self, page_size: Optional[int] = None) -> Iterator[str]:
        """
        Iterate over every domain, following pagination tokens.

        Args:
            page_size: Optional page size for each ListDomains call

        Yields:
            str: Domain names
        """
        next_token = None
        while True:
            page = self.list_domains(page_size, next_token)
            yield from page.domains
            next_token = page.next_token
            if not next_token:
                return

    def domain_metadata(self, domain_name: str) -> DomainMetadataResult:
        """Read the counters the service keeps for a domain."""
        return self.execute(operations.domain_metadata(domain_name, self._validate))

    # Items

    def batch_put_attributes(
        self,
        domain_name: str,
        items: ItemMap,
        replace_attributes: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> BasicResult:
        """
        Put attributes of several items in one call.

        Args:
            domain_name: Target domain
            items: ``{item_name: {attribute_name: value or [values]}}``
            replace_attributes: ``{item_name: [attribute_name, ...]}`` whose
                existing values are replaced instead of appended to

        Returns:
            BasicResult: Request id and box usage
        """
        return self.execute(operations.batch_put_attributes(
            domain_name, items, replace_attributes, self.nil_string, self._validate
        ))

    def put_attributes(
        self,
        domain_name: str,
        item_name: str,
        attributes: AttributeMap,
        replace_attributes: Optional[Iterable[str]] = None,
    ) -> BasicResult:
        """Put attributes of a single item."""
        return self.execute(operations.put_attributes(
            domain_name, item_name, attributes, replace_attributes, self.nil_string, self._validate
        ))

    def delete_attributes(
        self,
        domain_name: str,
        item_name: str,
        attributes: Optional[Union[AttributeMap, Iterable[str]]] = None,
    ) -> BasicResult:
        """
        Delete an item or some of its attributes.

        Args:
            domain_name: Target domain
            item_name: Item to delete from
            attributes: ``None`` for the whole item, a name/value mapping,
                or a list of attribute names

        Returns:
            BasicResult: Request id and box usage
        """
        return self.execute(operations.delete_attributes(
            domain_name, item_name, attributes, self.nil_string, self._validate
        ))

    def get_attributes(
        self,
        domain_name: str,
        item_name: str,
        attribute_names: Optional[Iterable[str]] = None,
    ) -> GetAttributesResult:
        """
        Read attributes of an item.

        Args:
            domain_name: Target domain
            item_name: Item to read
            attribute_names: Names to return, every attribute when None

        Returns:
            GetAttributesResult: ``{attribute_name: [values]}``
        """
        return self.execute(operations.get_attributes(
            domain_name, item_name, attribute_names, self._validate
        ))

    def select(self, select_expression: str, next_token: Optional[str] = None) -> SelectResult:
        """
        Run one page of a select query.

        Args:
            select_expression: Query expression
            next_token: Token returned by the previous page

        Returns:
            SelectResult: Items and the next page token
        """
        return self.execute(operations.select(select_expression, next_token))

    def iter_select(self, select_expression: str) -> Iterator[Tuple[str, AttributeValues]]:
        """
        Iterate over every item matching a query, following pagination tokens.

        Yields:
            tuple: ``(item_name, {attribute_name: [values]})``
        """
        next_token = None
        while True:
            page = self.select(select_expression, next_token)
            yield from page.items.items()
            next_token = page.next_token
            if not next_token:
                return

    def close(self):
        """Close the HTTP session."""
        self.http_client.close()

    def __enter__(self) -> 'SimpleDBClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def create_client(
    access_key_id: str,
    secret_access_key: str,
    **options: Any
) -> SimpleDBClient:
    """
    Create a SimpleDB client.

    Args:
        access_key_id: Access key identifier
        secret_access_key: Secret access key
        **options: Any other ``ClientConfig`` field

    Returns:
        SimpleDBClient: Configured client

    Raises:
        ConfigurationError: If credentials are missing or an option is invalid
    """
    config = ClientConfig.from_dict(dict(
        options,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
    ))
    return SimpleDBClient(config)
