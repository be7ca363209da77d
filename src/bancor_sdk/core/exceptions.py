"""Custom exceptions for the Bancor SDK."""

from typing import Optional, Any, Dict


class BancorSDKError(Exception):
    """Base exception for all Bancor SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BancorSDKError):
    """Configuration is invalid or missing."""
    pass


class ValidationError(BancorSDKError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class AdapterError(BancorSDKError):
    """A chain adapter call failed.

    Aborts the enclosing path search. Never means "no path".
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        blockchain_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.operation = operation
        self.blockchain_type = blockchain_type


class RPCError(AdapterError):
    """RPC call failed."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, operation=method, details=details)
        self.method = method
        self.status_code = status_code
        self.response_data = response_data


class NetworkError(AdapterError):
    """Network connectivity issues."""
    pass


class DecodingError(AdapterError):
    """A node returned data that could not be decoded."""
    pass


class TimeoutError(AdapterError):
    """Operation timed out."""

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)
        self.timeout_duration = timeout_duration


class RateLimitError(RPCError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)
        self.retry_after = retry_after
