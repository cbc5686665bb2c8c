"""
HTTP client for the PayLane REST API.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Mapping, Optional

import requests

from .config import DEFAULT_API_URL, ClientConfig
from .errors import HttpCallError, ServerConnectionError, UnknownOperationError
from .operations import OPERATIONS, Operation, find_operation, is_allowed_verb

__all__ = [
    "CallResult",
    "HTTP_ERROR_CODES",
    "RestClient",
]

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = frozenset({400, 401, 500, 501, 502, 503, 504})

_REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept-Encoding": "gzip, deflate",
}


@dataclass(frozen=True)
class CallResult:
    success: bool
    data: Any

    @classmethod
    def from_response(cls, payload: Any) -> "CallResult":
        success = isinstance(payload, Mapping) and bool(payload.get("success"))
        return cls(success=success, data=payload)


class RestClient:
    """
    Client for the PayLane REST server.

    Every remote action from :data:`~paylane_client.core.operations.OPERATIONS`
    is available as a method taking the request parameters, e.g.::

        client = RestClient.from_credentials("user", "secret")
        sale = client.card_sale({"sale": {...}, "customer": {...}, "card": {...}})
        if client.is_success():
            print(sale["id_sale"])

    The outcome returned by :meth:`is_success` belongs to the instance and is
    overwritten by every call. Threads sharing one client should use
    :meth:`call_result` or :meth:`invoke_result` instead.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._owns_session = session is None
        self.session = session or requests.Session()
        self._ssl_verify = config.ssl_verify
        self._success = False
        self._lock = threading.Lock()

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        api_url: str = DEFAULT_API_URL,
        *,
        session: Optional[requests.Session] = None,
    ) -> "RestClient":
        config = ClientConfig(username=username, password=password, api_url=api_url)
        return cls(config, session=session)

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    @property
    def api_url(self) -> str:
        return self.config.api_url

    @property
    def ssl_verify(self) -> bool:
        return self._ssl_verify

    @ssl_verify.setter
    def ssl_verify(self, value: bool) -> None:
        self.set_ssl_verify(value)

    def set_ssl_verify(self, ssl_verify: bool) -> None:
        """
        Toggle TLS peer verification for all subsequent calls.

        Only meant for test servers with self-signed certificates.
        """
        self._ssl_verify = bool(ssl_verify)
        if not self._ssl_verify:
            logger.warning("TLS certificate verification disabled for %s", self.api_url)

    def is_success(self) -> bool:
        """Return whether the most recent call answered with a truthy ``success``."""
        with self._lock:
            return self._success

    def call(
        self,
        path: str,
        verb: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Send ``params`` as JSON to ``api_url + path`` and return the decoded body.

        Raises :class:`ServerConnectionError` when no response was obtained and
        :class:`HttpCallError` for the status codes in :data:`HTTP_ERROR_CODES`.
        A response with ``success: false`` is returned, not raised. Parameters
        that cannot be encoded as strict JSON raise :class:`ValueError` (or
        :class:`TypeError`) before any request is made.
        """
        return self.call_result(path, verb, params).data

    def call_result(
        self,
        path: str,
        verb: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> CallResult:
        """Same as :meth:`call` but returns the outcome alongside the payload."""
        with self._lock:
            self._success = False

        if is_allowed_verb(verb):
            method = verb.upper()
        else:
            method = verb
            logger.warning("Sending request with unsupported HTTP verb %s", verb)

        # Raises ValueError for NaN/Infinity before anything is sent.
        body = json.dumps(
            {} if params is None else params,
            separators=(",", ":"),
            allow_nan=False,
        )
        url = self.api_url + path
        logger.info("Calling %s %s", method, url)

        response = self._push_data(method, url, body)
        result = CallResult.from_response(self._decode(response, url))

        with self._lock:
            self._success = result.success
        logger.debug("%s %s finished with success=%s", method, url, result.success)
        return result

    def invoke(self, name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Call an operation by its remote name (``cardSale``) or method name."""
        operation = self.operation(name)
        return self.call(operation.path, operation.verb, params)

    def invoke_result(
        self, name: str, params: Optional[Mapping[str, Any]] = None
    ) -> CallResult:
        operation = self.operation(name)
        return self.call_result(operation.path, operation.verb, params)

    @staticmethod
    def operation(name: str) -> Operation:
        try:
            return find_operation(name)
        except KeyError:
            raise UnknownOperationError(name) from None

    def _push_data(self, method: str, url: str, body: str) -> requests.Response:
        try:
            response = self.session.request(
                method,
                url,
                data=body.encode("utf-8"),
                headers=_REQUEST_HEADERS,
                auth=self.config.auth,
                verify=self._ssl_verify,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("No response from %s: %s", url, exc)
            raise ServerConnectionError(self.api_url) from exc

        if response.status_code in HTTP_ERROR_CODES:
            reason = HTTPStatus(response.status_code).phrase
            logger.error("%s %s answered [%s] %s", method, url, response.status_code, reason)
            raise HttpCallError(response.status_code, reason)

        return response

    @staticmethod
    def _decode(response: requests.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError:
            logger.warning("Response from %s is not valid JSON; returning an empty result", url)
            return {}


def _bind_operation(operation: Operation):
    def method(self: RestClient, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.call(operation.path, operation.verb, params)

    method.__name__ = operation.attribute
    method.__qualname__ = f"RestClient.{operation.attribute}"
    method.__doc__ = f"``{operation.name}``: {operation.verb} ``{operation.path}``."
    return method


for _operation in OPERATIONS:
    setattr(RestClient, _operation.attribute, _bind_operation(_operation))
