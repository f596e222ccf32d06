"""
Operation request builders

Each SimpleDB operation is a pure function from typed arguments to an
``OperationRequest``: the action name, the caller parameter map and the
parser class that decodes the response. Signing and dispatch are done
once, by the client, for all of them.
"""

from typing import Any, Iterable, Mapping, Optional, Type, Union
from dataclasses import dataclass, field

from .encoding.attributes import (
    DEFAULT_NIL_STRING,
    AttributeMap,
    ItemMap,
    as_names,
    encode_attribute_names,
    encode_attributes,
    encode_batch_attributes,
    encode_named_attributes,
)
from .encoding.validation import validate_domain_name, validate_item_name
from .exceptions import ValidationError
from .parsers.base import ResponseParser
from .parsers.basic import BasicParser
from .parsers.domains import DomainMetadataParser, ListDomainsParser
from .parsers.items import GetAttributesParser, SelectParser
from .signing.types import ParameterMap

MAX_NUMBER_OF_DOMAINS = 100


@dataclass
class OperationRequest:
    """
    Unsigned description of one API call

    Attributes:
        action: Value of the Action parameter
        params: Caller parameters; ``None`` marks an absent optional parameter
        parser_class: Parser that decodes a successful response
    """
    action: str
    params: ParameterMap = field(default_factory=dict)
    parser_class: Type[ResponseParser] = BasicParser

    def parser(self, nil_string: str = DEFAULT_NIL_STRING) -> ResponseParser:
        return self.parser_class(nil_string)


def _domain(domain_name: str, validate: bool) -> str:
    if validate:
        return validate_domain_name(domain_name)
    return domain_name


def create_domain(domain_name: str, validate: bool = False) -> OperationRequest:
    return OperationRequest('CreateDomain', {'DomainName': _domain(domain_name, validate)})


def delete_domain(domain_name: str, validate: bool = False) -> OperationRequest:
    return OperationRequest('DeleteDomain', {'DomainName': _domain(domain_name, validate)})


def list_domains(max_number_of_domains: Optional[int] = None,
                 next_token: Optional[str] = None) -> OperationRequest:
    """
    Build a ListDomains request.

    Args:
        max_number_of_domains: Page size between 1 and 100, service default when None
        next_token: Pagination token from a previous page

    Raises:
        ValidationError: If the page size is not an integer or out of range
    """
    max_domains = None
    if max_number_of_domains is not None:
        try:
            max_domains = int(max_number_of_domains)
        except (TypeError, ValueError):
            raise ValidationError(
                f"max_number_of_domains must be an integer: {max_number_of_domains!r}",
                "INVALID_PARAMETER",
                {"max_number_of_domains": max_number_of_domains}
            )
        if not 1 <= max_domains <= MAX_NUMBER_OF_DOMAINS:
            raise ValidationError(
                f"max_number_of_domains must be between 1 and {MAX_NUMBER_OF_DOMAINS}",
                "INVALID_PARAMETER",
                {"max_number_of_domains": max_number_of_domains}
            )
        max_domains = str(max_domains)

    return OperationRequest(
        'ListDomains',
        {'MaxNumberOfDomains': max_domains, 'NextToken': next_token},
        ListDomainsParser,
    )


def domain_metadata(domain_name: str, validate: bool = False) -> OperationRequest:
    return OperationRequest(
        'DomainMetadata',
        {'DomainName': _domain(domain_name, validate)},
        DomainMetadataParser,
    )


def batch_put_attributes(
    domain_name: str,
    items: ItemMap,
    replace_attributes: Optional[Mapping[str, Iterable[str]]] = None,
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> OperationRequest:
    """
    Build a BatchPutAttributes request.

    Args:
        domain_name: Target domain
        items: Item name to attribute map; values may be scalars or lists
        replace_attributes: Item name to attribute names to replace
        nil_string: Sentinel sent for ``None`` values
        validate: Check names and values locally
    """
    params: ParameterMap = {'DomainName': _domain(domain_name, validate)}
    params.update(encode_batch_attributes(items, replace_attributes, nil_string, validate))
    return OperationRequest('BatchPutAttributes', params)


def put_attributes(
    domain_name: str,
    item_name: str,
    attributes: AttributeMap,
    replace_attributes: Optional[Iterable[str]] = None,
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> OperationRequest:
    """Build a single-item put, sent as a one-item BatchPutAttributes."""
    return batch_put_attributes(
        domain_name,
        {item_name: attributes},
        {item_name: as_names(replace_attributes)},
        nil_string,
        validate,
    )


def delete_attributes(
    domain_name: str,
    item_name: str,
    attributes: Optional[Union[AttributeMap, Iterable[str]]] = None,
    nil_string: str = DEFAULT_NIL_STRING,
    validate: bool = False,
) -> OperationRequest:
    """
    Build a DeleteAttributes request.

    Args:
        domain_name: Target domain
        item_name: Item to delete from
        attributes: ``None`` deletes the whole item; a mapping deletes the
            given name/value pairs; an iterable of names deletes every value
            of those attributes
        nil_string: Sentinel sent for ``None`` values
        validate: Check names and values locally
    """
    if validate:
        validate_item_name(item_name)

    params: ParameterMap = {
        'DomainName': _domain(domain_name, validate),
        'ItemName': item_name,
    }
    if isinstance(attributes, Mapping):
        params.update(encode_attributes(attributes, None, nil_string, validate))
    elif isinstance(attributes, str):
        params.update(encode_named_attributes([attributes], validate))
    else:
        params.update(encode_named_attributes(attributes, validate))

    return OperationRequest('DeleteAttributes', params)


def get_attributes(
    domain_name: str,
    item_name: str,
    attribute_names: Optional[Iterable[str]] = None,
    validate: bool = False,
) -> OperationRequest:
    """
    Build a GetAttributes request.

    Args:
        domain_name: Target domain
        item_name: Item to read
        attribute_names: Names to return, every attribute when None
        validate: Check names locally
    """
    if validate:
        validate_item_name(item_name)

    if isinstance(attribute_names, str):
        attribute_names = [attribute_names]

    params: ParameterMap = {
        'DomainName': _domain(domain_name, validate),
        'ItemName': item_name,
    }
    params.update(encode_attribute_names(attribute_names, validate))
    return OperationRequest('GetAttributes', params, GetAttributesParser)


def select(select_expression: str, next_token: Optional[str] = None) -> OperationRequest:
    """
    Build a Select request.

    Raises:
        ValidationError: If the expression is empty
    """
    if not select_expression:
        raise ValidationError("select_expression cannot be empty", "INVALID_PARAMETER")

    return OperationRequest(
        'Select',
        {'SelectExpression': select_expression, 'NextToken': next_token},
        SelectParser,
    )


def describe(request: OperationRequest) -> Mapping[str, Any]:
    """Summarize a request for logging, without parameter values."""
    return {
        'action': request.action,
        'parameters': sorted(key for key, value in request.params.items() if value is not None),
        'parser': request.parser_class.__name__,
    }
