"""
Result records produced by response parsers
"""

from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass, field

AttributeValues = Dict[str, List[Optional[str]]]


@dataclass
class BasicResult:
    """
    Fields present on every successful response

    Attributes:
        request_id: Identifier the service assigned to the request
        box_usage: Machine usage charged for the request
    """
    request_id: str
    box_usage: float


@dataclass
class ListDomainsResult(BasicResult):
    """ListDomains response"""
    domains: List[str] = field(default_factory=list)
    next_token: Optional[str] = None


@dataclass
class DomainMetadataResult(BasicResult):
    """
    DomainMetadata response

    Attributes:
        timestamp: Time the metadata was last computed
        item_count: Number of items in the domain
        attribute_value_count: Number of name/value pairs in the domain
        attribute_name_count: Number of unique attribute names
        item_names_size_bytes: Total size of item names
        attribute_values_size_bytes: Total size of attribute values
        attribute_names_size_bytes: Total size of unique attribute names
    """
    timestamp: Optional[datetime] = None
    item_count: int = 0
    attribute_value_count: int = 0
    attribute_name_count: int = 0
    item_names_size_bytes: int = 0
    attribute_values_size_bytes: int = 0
    attribute_names_size_bytes: int = 0


@dataclass
class GetAttributesResult(BasicResult):
    """GetAttributes response, attribute name to list of values"""
    attributes: AttributeValues = field(default_factory=dict)


@dataclass
class SelectResult(BasicResult):
    """Select response, item name to attribute map"""
    items: Dict[str, AttributeValues] = field(default_factory=dict)
    next_token: Optional[str] = None


@dataclass
class ServiceErrorDetail:
    """One error reported by the service"""
    code: str
    message: str
    box_usage: Optional[float] = None


@dataclass
class ErrorResponse:
    """Decoded error document"""
    request_id: Optional[str]
    errors: List[ServiceErrorDetail] = field(default_factory=list)
