# dhl_wrapper/core/exceptions.py
# Author: dhl-wrapper

from typing import Any, Dict, Optional

class DhlError(Exception):
    """Base exception class for all dhl_wrapper exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(DhlError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(DhlError):
    """Raised when there is a logging error"""
    pass

class MissingCredentialsError(DhlError):
    """Raised when no API key is configured for the API family of a request"""
    pass

class ResponseNotOkError(DhlError):
    """Raised when the DHL API answers with its status/title/detail error body"""
    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            f"DHL API responded not ok (status {status}, title {title!r}, detail {detail!r})",
            details
        )
        self.status = status
        self.title = title
        self.detail = detail

class CommunicationError(DhlError):
    """Raised when the exchange with the API failed outright"""
    pass

class TransportError(CommunicationError):
    """Raised when the HTTP call itself fails"""
    pass

class SerializationError(CommunicationError):
    """Raised when a response body matches neither the error nor the success shape"""
    pass
