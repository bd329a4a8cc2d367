"""
Custom exceptions for the Tencent Cloud API client.
"""
from typing import Optional


class TencentCloudError(Exception):
    """Base exception for Tencent Cloud client errors."""
    pass


class ConfigurationError(TencentCloudError):
    """Raised when client configuration or credentials are invalid."""
    pass


class HTTPError(TencentCloudError):
    """Raised when the HTTP exchange fails or the response cannot be parsed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class APIError(TencentCloudError):
    """
    Raised when the provider reports an error in the response envelope.

    Authentication failures such as ``AuthFailure.SignatureFailure`` are
    reported through this type as well; inspect ``code`` to tell them apart.
    """

    def __init__(self, code: str, message: str, request_id: Optional[str] = None):
        super().__init__(f"TencentCloud API Error [{code}]: {message}")
        self.code = code
        self.message = message
        self.request_id = request_id


class CommandError(TencentCloudError):
    """Raised when a remote command invocation cannot be tracked."""
    pass
