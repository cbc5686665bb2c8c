"""
Client library for the PayLane REST API.

The most useful pieces are re-exported here so integrators can
``from paylane_client import ...`` without navigating the package.
"""

from .api import call_operation, create_rest_client
from .core import (
    ALLOWED_VERBS,
    DEFAULT_API_URL,
    HTTP_ERROR_CODES,
    OPERATIONS,
    CallResult,
    ClientConfig,
    ClientParameters,
    ConfigError,
    HttpCallError,
    Operation,
    PaylaneError,
    RestClient,
    ServerConnectionError,
    UnknownOperationError,
    find_operation,
    load_client_config,
)

__all__ = (
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
    "call_operation",
    "create_rest_client",
    "find_operation",
    "load_client_config",
)
