"""
Base class for response parsers

Every parser receives the raw response body and the configured nil
sentinel, and either returns a typed result or raises DecodingError.
Elements are matched by local name so responses of any API namespace
version decode the same way.
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Any, Iterator, List, Optional, Union

from ..encoding.attributes import DEFAULT_NIL_STRING
from ..exceptions import DecodingError
from .types import AttributeValues, BasicResult

ResponseBody = Union[str, bytes]


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from an element tag."""
    if tag.startswith('{'):
        return tag.split('}', 1)[1]
    return tag


def children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Iterate direct children with the given local name."""
    for candidate in element:
        if local_name(candidate.tag) == name:
            yield candidate


def child(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first direct child with the given local name."""
    return next(children(element, name), None)


def text_of(element: Optional[ET.Element]) -> Optional[str]:
    if element is None:
        return None
    return element.text or ''


class ResponseParser:
    """
    Base response parser

    Subclasses implement ``parse_document`` and may use the helpers below
    to read required fields.
    """

    #: Local name of the result element, if the response has one
    result_element: Optional[str] = None

    def __init__(self, nil_string: str = DEFAULT_NIL_STRING):
        self.nil_string = nil_string

    def parse(self, body: ResponseBody) -> Any:
        """
        Decode a response body.

        Args:
            body: Raw response body

        Returns:
            Typed result record

        Raises:
            DecodingError: If the body is empty, not XML, or misses
                required elements
        """
        root = self.load(body)
        return self.parse_document(root)

    def parse_document(self, root: ET.Element) -> Any:
        raise NotImplementedError

    def load(self, body: ResponseBody) -> ET.Element:
        if body is None or not body.strip():
            raise DecodingError("Response body is empty", "EMPTY_RESPONSE")

        try:
            return ET.fromstring(body)
        except ET.ParseError as e:
            raise DecodingError(
                f"Malformed XML response: {e}",
                "MALFORMED_XML",
                {"original_error": str(e)}
            )

    def require(self, element: ET.Element, name: str) -> ET.Element:
        """Return a required child element or raise DecodingError."""
        found = child(element, name)
        if found is None:
            raise DecodingError(
                f"Missing <{name}> in <{local_name(element.tag)}>",
                "UNEXPECTED_STRUCTURE",
                {"element": local_name(element.tag), "missing": name}
            )
        return found

    def require_text(self, element: ET.Element, name: str) -> str:
        return text_of(self.require(element, name))

    def require_int(self, element: ET.Element, name: str) -> int:
        value = self.require_text(element, name)
        try:
            return int(value)
        except ValueError:
            raise DecodingError(
                f"<{name}> is not an integer: {value!r}",
                "UNEXPECTED_VALUE",
                {"element": name, "value": value}
            )

    def require_timestamp(self, element: ET.Element, name: str) -> datetime:
        """Read a required Unix-seconds element as an aware UTC datetime."""
        seconds = self.require_int(element, name)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise DecodingError(
                f"<{name}> is not a valid timestamp: {seconds}",
                "UNEXPECTED_VALUE",
                {"element": name, "value": seconds, "original_error": str(e)}
            )

    def to_float(self, value: str, name: str) -> float:
        try:
            return float(value)
        except ValueError:
            raise DecodingError(
                f"<{name}> is not a number: {value!r}",
                "UNEXPECTED_VALUE",
                {"element": name, "value": value}
            )

    def result(self, root: ET.Element) -> ET.Element:
        """Return the operation's result element."""
        return self.require(root, self.result_element)

    def metadata(self, root: ET.Element) -> BasicResult:
        """
        Read the ResponseMetadata block shared by all responses.

        Raises:
            DecodingError: If request id or box usage are missing
        """
        meta = self.require(root, 'ResponseMetadata')
        request_id = self.require_text(meta, 'RequestId')
        box_usage = self.to_float(self.require_text(meta, 'BoxUsage'), 'BoxUsage')
        return BasicResult(request_id=request_id, box_usage=box_usage)

    def decode_value(self, value: str) -> Optional[str]:
        """Map the nil sentinel back to ``None``."""
        return None if value == self.nil_string else value

    def attributes(self, element: ET.Element) -> AttributeValues:
        """Collect ``<Attribute><Name/><Value/></Attribute>`` children."""
        collected: AttributeValues = {}
        for attribute in children(element, 'Attribute'):
            name = self.require_text(attribute, 'Name')
            value = self.decode_value(self.require_text(attribute, 'Value'))
            collected.setdefault(name, []).append(value)
        return collected

    def next_token(self, element: ET.Element) -> Optional[str]:
        token = text_of(child(element, 'NextToken'))
        return token or None

    def names(self, element: ET.Element, name: str) -> List[str]:
        return [text_of(found) for found in children(element, name)]
