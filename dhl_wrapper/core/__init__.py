from .config import Config
from .exceptions import (
    DhlError,
    ConfigError,
    LoggerError,
    MissingCredentialsError,
    ResponseNotOkError,
    CommunicationError,
    TransportError,
    SerializationError
)
from .logger import Logger

__all__ = [
    'Config',
    'DhlError',
    'ConfigError',
    'LoggerError',
    'MissingCredentialsError',
    'ResponseNotOkError',
    'CommunicationError',
    'TransportError',
    'SerializationError',
    'Logger'
]
