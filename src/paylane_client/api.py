"""
Public, high-level helpers for talking to the PayLane REST API.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from .core.client import CallResult, RestClient
from .core.config import ClientConfig, ClientParameters, load_client_config

__all__ = [
    "call_operation",
    "create_rest_client",
]


def create_rest_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    ssl_verify: Optional[bool | str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> RestClient:
    """
    Construct a :class:`RestClient`.

    Callers either supply a ready-made :class:`ClientConfig` or let the helper
    assemble one from environment data and keyword arguments.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_url,
            username,
            password,
            ssl_verify,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_url=api_url,
            username=username,
            password=password,
            ssl_verify=ssl_verify,
            timeout_seconds=timeout_seconds,
        )
    return RestClient(cfg, session=session)


def call_operation(
    name: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
) -> CallResult:
    """
    One-shot helper: build a client, run ``name`` with ``params`` and return
    the outcome together with the decoded response.
    """
    if config is None:
        client = create_rest_client(session=session, env_file=env_file, overrides=overrides)
    else:
        client = create_rest_client(config=config, session=session)
    with client:
        return client.invoke_result(name, params)
