"""
Exception classes for SimpleDB Python SDK
"""

from typing import Optional, Dict, Any


class SimpleDBSDKError(Exception):
    """Base exception for all SimpleDB SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(SimpleDBSDKError):
    """Exception raised for missing or invalid client configuration"""
    
    def __init__(self, message: str, error_code: str = "INVALID_CONFIG", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ValidationError(SimpleDBSDKError):
    """Exception raised for invalid arguments passed to an operation"""
    pass


class EncodingError(SimpleDBSDKError):
    """Exception raised when an item or attribute cannot be sent to the store"""
    
    def __init__(self, message: str, error_code: str = "INVALID_ATTRIBUTE", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class SigningError(SimpleDBSDKError):
    """Exception raised when a request signature cannot be computed"""
    
    def __init__(self, message: str, error_code: str = "SIGNING_FAILED", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(SimpleDBSDKError):
    """Exception raised when no response could be obtained from the endpoint"""
    
    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class DecodingError(SimpleDBSDKError):
    """Exception raised when a response body does not match the expected shape"""
    
    def __init__(self, message: str, error_code: str = "DECODING_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ServiceError(SimpleDBSDKError):
    """Exception raised for errors reported by the SimpleDB service"""
    
    def __init__(self, message: str, error_code: str = "SERVICE_ERROR",
                 http_status: int = 0, request_id: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.http_status = http_status
        self.request_id = request_id
