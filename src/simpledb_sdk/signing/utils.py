"""
Utility functions for request signing

This module provides utility functions for SimpleDB request signing,
including timestamp formatting, query-string escaping and host
normalization.
"""

import time
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote_plus

from .types import TIMESTAMP_FORMAT

# Characters the service leaves unescaped (RFC 3986 unreserved set)
UNRESERVED_CHARACTERS = '-_.~'

DEFAULT_PORTS = {
    'https': 443,
    'http': 80,
}


def generate_timestamp() -> str:
    """
    Generate current UTC timestamp with second precision.

    Returns:
        str: Timestamp such as ``2010-01-01T00:00:00Z``
    """
    return time.strftime(TIMESTAMP_FORMAT, time.gmtime())


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as a request timestamp.

    Naive datetimes are assumed to already be in UTC.

    Args:
        value: Datetime to format

    Returns:
        str: Timestamp string with ``Z`` suffix
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


def percent_encode(value: str) -> str:
    """
    Escape a query-string key or value.

    The form encoder turns spaces into ``+``, which the service does not
    accept inside a signed string, so they are rewritten to ``%20``. Literal
    plus signs are already escaped as ``%2B`` at that point.

    Args:
        value: Raw key or value

    Returns:
        str: Escaped string
    """
    return quote_plus(value, safe=UNRESERVED_CHARACTERS).replace('+', '%20')


def drop_absent_parameters(params: Dict[str, Optional[str]]) -> Dict[str, str]:
    """
    Remove parameters whose value is ``None``.

    Args:
        params: Parameter map possibly holding absent values

    Returns:
        dict: New map with only present parameters
    """
    return {key: value for key, value in params.items() if value is not None}


def sort_parameters(params: Dict[str, str]) -> List[Tuple[str, str]]:
    """
    Sort parameters by key.

    Code point order of ``str`` matches byte order of their UTF-8 encoding.

    Args:
        params: Parameter map

    Returns:
        list: ``(key, value)`` pairs in ascending key order
    """
    return sorted(params.items(), key=lambda item: item[0])


def build_query_string(params: Dict[str, str]) -> str:
    """
    Build the canonical query string from present parameters.

    Args:
        params: Parameter map without absent values

    Returns:
        str: ``key=value`` pairs joined with ``&`` in sorted order
    """
    return '&'.join(
        f"{percent_encode(key)}={percent_encode(value)}"
        for key, value in sort_parameters(params)
    )


def canonical_host(host: str, port: int, scheme: str) -> str:
    """
    Build the host line of the string to sign.

    Args:
        host: Endpoint host name
        port: Endpoint port
        scheme: URL scheme

    Returns:
        str: Lowercase host, with ``:port`` unless it is the scheme's default
    """
    host = host.lower()
    if DEFAULT_PORTS.get(scheme.lower()) == port:
        return host
    return f"{host}:{port}"
