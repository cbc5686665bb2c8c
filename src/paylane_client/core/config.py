"""
Configuration objects and helpers for the PayLane REST client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "load_client_config",
]

DEFAULT_API_URL = "https://direct.paylane.com/rest/"
DEFAULT_TIMEOUT_SECONDS = 30

_PARAMETER_TO_ENV_KEY = {
    "api_url": "PAYLANE_API_URL",
    "username": "PAYLANE_USERNAME",
    "password": "PAYLANE_PASSWORD",
    "ssl_verify": "PAYLANE_SSL_VERIFY",
    "timeout_seconds": "PAYLANE_TIMEOUT_SECONDS",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw}'")


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"PAYLANE_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYLANE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _normalize_api_url(raw_url: str) -> str:
    url = raw_url.strip()
    if not url:
        raise ConfigError("PAYLANE_API_URL must not be empty")
    return url.rstrip("/") + "/"


def _read_env_file(path: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        values[key.strip()] = value
    return values


def _merge_sources(
    env_file: Optional[str],
    base: Optional[Mapping[str, str]],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    # base (default os.environ) < .env file for keys base lacks < overrides
    merged: Dict[str, str] = dict(os.environ if base is None else base)
    if env_file is not None:
        for key, value in _read_env_file(env_file).items():
            merged.setdefault(key, value)
    merged.update(overrides)
    return merged


def _require(values: Mapping[str, str], key: str) -> str:
    value = values.get(key)
    if value is None or not value.strip():
        raise ConfigError(f"{key} must be provided")
    return value


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for :func:`load_client_config`.

    Values set here win over both the process environment and ``.env`` files.
    """

    api_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    ssl_verify: Optional[bool | str] = None
    timeout_seconds: Optional[float | int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


@dataclass(frozen=True)
class ClientConfig:
    username: str
    password: str
    api_url: str = DEFAULT_API_URL
    ssl_verify: bool = True
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __repr__(self) -> str:
        return (
            f"ClientConfig(username={self.username!r}, password='***', "
            f"api_url={self.api_url!r}, ssl_verify={self.ssl_verify!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    @property
    def auth(self) -> tuple[str, str]:
        return self.username, self.password

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        username = _require(values, "PAYLANE_USERNAME")
        password = _require(values, "PAYLANE_PASSWORD")
        api_url = _normalize_api_url(values.get("PAYLANE_API_URL", DEFAULT_API_URL))
        ssl_verify = _parse_bool(
            values.get("PAYLANE_SSL_VERIFY", "true"), "PAYLANE_SSL_VERIFY"
        )
        timeout_seconds = _parse_timeout(
            values.get("PAYLANE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )
        return cls(
            username=username,
            password=password,
            api_url=api_url,
            ssl_verify=ssl_verify,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        ssl_verify: Optional[bool | str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        merged_overrides = dict(overrides or {})
        if parameters is not None:
            merged_overrides.update(parameters.as_overrides())
        merged_overrides.update(
            ClientParameters(
                api_url=api_url,
                username=username,
                password=password,
                ssl_verify=ssl_verify,
                timeout_seconds=timeout_seconds,
            ).as_overrides()
        )

        return cls.from_mapping(_merge_sources(env_file, base, merged_overrides))


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    ssl_verify: Optional[bool | str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings may come from environment variables, a ``.env`` file, explicit
    keyword arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
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
