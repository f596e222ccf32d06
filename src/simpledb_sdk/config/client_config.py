"""
Client configuration for the SimpleDB Python SDK

Provides the endpoint and credential settings a client is built from, and
loaders for dictionaries, JSON documents, files and environment variables.
"""

import json
import os
from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import dataclass, asdict
from pathlib import Path

from ..encoding.attributes import DEFAULT_NIL_STRING
from ..exceptions import ConfigurationError
from ..signing.types import Credentials, SignatureMethod, DEFAULT_API_VERSION

DEFAULT_HOST = 'sdb.amazonaws.com'
DEFAULT_NAMESPACE = 'http://sdb.amazonaws.com/doc/2007-11-07/'
DEFAULT_PORT = 443
DEFAULT_SCHEME = 'https'
DEFAULT_TIMEOUT = 30.0

# Environment variable -> configuration field
ENVIRONMENT_VARIABLES = {
    'AWS_ACCESS_KEY_ID': 'access_key_id',
    'AWS_SECRET_ACCESS_KEY': 'secret_access_key',
    'SIMPLEDB_HOST': 'host',
    'SIMPLEDB_PORT': 'port',
    'SIMPLEDB_SCHEME': 'scheme',
    'SIMPLEDB_NAMESPACE': 'namespace',
    'SIMPLEDB_NIL_STRING': 'nil_string',
    'SIMPLEDB_TIMEOUT': 'timeout',
}


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for a SimpleDB client.

    Only the credential pair is required; every other option falls back to
    the public endpoint defaults.

    ``namespace`` is accepted for configuration compatibility only. Response
    parsers match elements by local name and never compare it against the
    document namespace.
    """
    access_key_id: str
    secret_access_key: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    scheme: str = DEFAULT_SCHEME
    namespace: str = DEFAULT_NAMESPACE
    api_version: str = DEFAULT_API_VERSION
    nil_string: str = DEFAULT_NIL_STRING
    signature_method: SignatureMethod = SignatureMethod.HMAC_SHA256
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    validate_attributes: bool = True

    def __post_init__(self):
        """Validate client configuration."""
        # Raises ConfigurationError for a missing key or secret
        Credentials(self.access_key_id, self.secret_access_key)

        if not self.host:
            raise ConfigurationError("Host cannot be empty", details={"field": "host"})

        if self.scheme not in ('http', 'https'):
            raise ConfigurationError(
                f"Unsupported scheme: {self.scheme}",
                details={"field": "scheme", "scheme": self.scheme}
            )

        if not isinstance(self.port, int) or isinstance(self.port, bool) or not 0 < self.port < 65536:
            raise ConfigurationError(
                f"Invalid port: {self.port}",
                details={"field": "port", "port": self.port}
            )

        if self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive", details={"field": "timeout"})

        if not isinstance(self.nil_string, str) or not self.nil_string:
            raise ConfigurationError("nil_string must be a non-empty string", details={"field": "nil_string"})

        try:
            object.__setattr__(self, 'signature_method', SignatureMethod(self.signature_method))
        except ValueError:
            raise ConfigurationError(
                f"Unsupported signature method: {self.signature_method}",
                "INVALID_SIGNATURE_METHOD",
                {"available_methods": [m.value for m in SignatureMethod]}
            )

    @property
    def credentials(self) -> Credentials:
        return Credentials(self.access_key_id, self.secret_access_key)

    @property
    def endpoint_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}/"

    def to_dict(self, include_secret: bool = False) -> Dict[str, Any]:
        """Export configuration, masking the secret unless asked not to."""
        data = asdict(self)
        data['signature_method'] = self.signature_method.value
        if not include_secret:
            data['secret_access_key'] = '***'
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ClientConfig':
        """
        Build configuration from a mapping.

        Unknown keys are rejected so typos do not silently fall back to
        defaults.

        Raises:
            ConfigurationError: If keys are unknown or values invalid
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration options: {', '.join(unknown)}",
                "UNKNOWN_OPTION",
                {"unknown": unknown}
            )

        try:
            return cls(**dict(data))
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration format: {e}", "INVALID_FORMAT")

    @classmethod
    def from_json(cls, json_string: str) -> 'ClientConfig':
        """Load configuration from a JSON object string."""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")

        if not isinstance(data, dict):
            raise ConfigurationError("Configuration JSON must be an object", "INVALID_FORMAT")

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'ClientConfig':
        """Load configuration from a JSON file."""
        try:
            with open(Path(file_path), 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}", "FILE_ERROR")

        return cls.from_json(json_string)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> 'ClientConfig':
        """
        Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Explicit values that win over the environment

        Raises:
            ConfigurationError: If credentials are missing or values invalid
        """
        environ = os.environ if environ is None else environ

        data: Dict[str, Any] = {}
        for variable, field_name in ENVIRONMENT_VARIABLES.items():
            if variable in environ:
                data[field_name] = environ[variable]

        try:
            if 'port' in data:
                data['port'] = int(data['port'])
            if 'timeout' in data:
                data['timeout'] = float(data['timeout'])
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting in environment: {e}", "INVALID_FORMAT")

        data.setdefault('access_key_id', '')
        data.setdefault('secret_access_key', '')
        data.update(overrides)
        return cls.from_dict(data)
