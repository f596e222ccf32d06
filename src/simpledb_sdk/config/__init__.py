"""
Configuration management for SimpleDB Python SDK
"""

from .client_config import (
    ClientConfig,
    DEFAULT_HOST,
    DEFAULT_NAMESPACE,
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    DEFAULT_TIMEOUT,
    ENVIRONMENT_VARIABLES,
)

__all__ = [
    'ClientConfig',
    'DEFAULT_HOST',
    'DEFAULT_NAMESPACE',
    'DEFAULT_PORT',
    'DEFAULT_SCHEME',
    'DEFAULT_TIMEOUT',
    'ENVIRONMENT_VARIABLES',
]
