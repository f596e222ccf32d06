"""
HMAC signature computation for SimpleDB requests

This module computes the signature version 2 HMAC over a canonical
string-to-sign using the cryptography package.
"""

import base64
from typing import Union

from cryptography.hazmat.primitives import hashes, hmac

from ..exceptions import ConfigurationError, SigningError
from .types import SignatureMethod

_HASH_ALGORITHMS = {
    SignatureMethod.HMAC_SHA256: hashes.SHA256,
    SignatureMethod.HMAC_SHA1: hashes.SHA1,
}


class HmacSigner:
    """
    Stateless HMAC signer

    The secret is held as immutable bytes; every call builds its own HMAC
    context, so one signer may be shared between threads.
    """

    def __init__(self, secret_access_key: str,
                 signature_method: Union[SignatureMethod, str] = SignatureMethod.HMAC_SHA256):
        """
        Initialize the signer.

        Args:
            secret_access_key: Secret key used as the HMAC key
            signature_method: Signature method identifier

        Raises:
            ConfigurationError: If the secret is empty or the method is unknown
        """
        if not secret_access_key:
            raise ConfigurationError(
                "secret_access_key is required",
                "MISSING_CREDENTIALS",
                {"field": "secret_access_key"}
            )

        try:
            self.signature_method = SignatureMethod(signature_method)
        except ValueError:
            raise ConfigurationError(
                f"Unsupported signature method: {signature_method}",
                "INVALID_SIGNATURE_METHOD",
                {"available_methods": [m.value for m in SignatureMethod]}
            )

        self._key = secret_access_key.encode('utf-8')

    def digest(self, string_to_sign: str) -> bytes:
        """
        Compute the raw HMAC digest.

        Args:
            string_to_sign: Canonical string

        Returns:
            bytes: HMAC digest

        Raises:
            SigningError: If the HMAC cannot be computed
        """
        try:
            mac = hmac.HMAC(self._key, _HASH_ALGORITHMS[self.signature_method]())
            mac.update(string_to_sign.encode('utf-8'))
            return mac.finalize()
        except Exception as e:
            raise SigningError(
                f"HMAC computation failed: {e}",
                details={"signature_method": self.signature_method.value, "original_error": str(e)}
            )

    def sign(self, string_to_sign: str) -> str:
        """
        Compute the base64 signature of a canonical string.

        Args:
            string_to_sign: Canonical string

        Returns:
            str: Base64-encoded digest without trailing whitespace
        """
        return base64.b64encode(self.digest(string_to_sign)).decode('ascii').strip()
