"""
Parsers for domain level responses (ListDomains, DomainMetadata)
"""

import xml.etree.ElementTree as ET

from .base import ResponseParser
from .types import DomainMetadataResult, ListDomainsResult


class ListDomainsParser(ResponseParser):
    """Parser for ListDomains responses"""

    result_element = 'ListDomainsResult'

    def parse_document(self, root: ET.Element) -> ListDomainsResult:
        meta = self.metadata(root)
        result = self.result(root)

        return ListDomainsResult(
            request_id=meta.request_id,
            box_usage=meta.box_usage,
            domains=self.names(result, 'DomainName'),
            next_token=self.next_token(result),
        )


class DomainMetadataParser(ResponseParser):
    """
    Parser for DomainMetadata responses

    All counters are required; the metadata timestamp is sent as Unix
    seconds and decoded to an aware UTC datetime.
    """

    result_element = 'DomainMetadataResult'

    def parse_document(self, root: ET.Element) -> DomainMetadataResult:
        meta = self.metadata(root)
        result = self.result(root)

        return DomainMetadataResult(
            request_id=meta.request_id,
            box_usage=meta.box_usage,
            timestamp=self.require_timestamp(result, 'Timestamp'),
            item_count=self.require_int(result, 'ItemCount'),
            attribute_value_count=self.require_int(result, 'AttributeValueCount'),
            attribute_name_count=self.require_int(result, 'AttributeNameCount'),
            item_names_size_bytes=self.require_int(result, 'ItemNamesSizeBytes'),
            attribute_values_size_bytes=self.require_int(result, 'AttributeValuesSizeBytes'),
            attribute_names_size_bytes=self.require_int(result, 'AttributeNamesSizeBytes'),
        )
