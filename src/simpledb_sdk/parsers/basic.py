"""
Parsers for responses that carry only metadata, and for error documents
"""

import xml.etree.ElementTree as ET

from ..exceptions import DecodingError
from .base import ResponseParser, child, children, local_name, text_of
from .types import BasicResult, ErrorResponse, ServiceErrorDetail


class BasicParser(ResponseParser):
    """
    Parser for CreateDomain, DeleteDomain, PutAttributes,
    BatchPutAttributes and DeleteAttributes responses
    """

    def parse_document(self, root: ET.Element) -> BasicResult:
        return self.metadata(root)


class ErrorResponseParser(ResponseParser):
    """
    Parser for the service's error document::

        <Response>
          <Errors><Error><Code/><Message/><BoxUsage/></Error></Errors>
          <RequestID/>
        </Response>
    """

    def parse_document(self, root: ET.Element) -> ErrorResponse:
        errors_element = child(root, 'Errors')
        if local_name(root.tag) != 'Response' or errors_element is None:
            raise DecodingError(
                f"Not an error document: <{local_name(root.tag)}>",
                "UNEXPECTED_STRUCTURE",
                {"element": local_name(root.tag)}
            )

        errors = []
        for error in children(errors_element, 'Error'):
            box_usage = text_of(child(error, 'BoxUsage'))
            errors.append(ServiceErrorDetail(
                code=self.require_text(error, 'Code'),
                message=text_of(child(error, 'Message')) or '',
                box_usage=self.to_float(box_usage, 'BoxUsage') if box_usage else None,
            ))

        request_id = text_of(child(root, 'RequestID')) or text_of(child(root, 'RequestId'))
        return ErrorResponse(request_id=request_id, errors=errors)
