"""
Parsers for item level responses (GetAttributes, Select)
"""

import xml.etree.ElementTree as ET
from typing import Dict

from .base import ResponseParser, children
from .types import AttributeValues, GetAttributesResult, SelectResult


class GetAttributesParser(ResponseParser):
    """Parser for GetAttributes responses"""

    result_element = 'GetAttributesResult'

    def parse_document(self, root: ET.Element) -> GetAttributesResult:
        meta = self.metadata(root)
        result = self.result(root)

        return GetAttributesResult(
            request_id=meta.request_id,
            box_usage=meta.box_usage,
            attributes=self.attributes(result),
        )


class SelectParser(ResponseParser):
    """
    Parser for Select responses

    Items are returned as ``{item_name: {attribute_name: [values]}}`` in
    document order.
    """

    result_element = 'SelectResult'

    def parse_document(self, root: ET.Element) -> SelectResult:
        meta = self.metadata(root)
        result = self.result(root)

        items: Dict[str, AttributeValues] = {}
        for item in children(result, 'Item'):
            name = self.require_text(item, 'Name')
            attributes = items.setdefault(name, {})
            for attribute_name, values in self.attributes(item).items():
                attributes.setdefault(attribute_name, []).extend(values)

        return SelectResult(
            request_id=meta.request_id,
            box_usage=meta.box_usage,
            items=items,
            next_token=self.next_token(result),
        )
