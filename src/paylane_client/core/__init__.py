"""
Core primitives of the PayLane REST client.
"""

from .client import HTTP_ERROR_CODES, CallResult, RestClient
from .config import (
    DEFAULT_API_URL,
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .errors import (
    ConfigError,
    HttpCallError,
    PaylaneError,
    ServerConnectionError,
    UnknownOperationError,
)
from .operations import ALLOWED_VERBS, OPERATIONS, Operation, find_operation

__all__ = [
    "ALLOWED_VERBS",
    "CallResult",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DEFAULT_API_URL",
    "HTTP_ERROR_CODES",
    "HttpCallError",
    "OPERATIONS",
    "Operation",
    "PaylaneError",
    "RestClient",
    "ServerConnectionError",
    "UnknownOperationError",
    "find_operation",
    "load_client_config",
]
