from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

from .constants import PRODUCTION_BASE_URL, SANDBOX_BASE_URL


class ConfigError(ValueError):
    pass


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


@dataclass(frozen=True)
class ClientConfig:
    env_name: str = Environment.PRODUCTION.value
    sandbox_base_url: str = SANDBOX_BASE_URL
    production_base_url: str = PRODUCTION_BASE_URL
    timeout_seconds: float = 30.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        allowed = {item.value for item in Environment}
        _validate(
            self.env_name.strip().lower() in allowed,
            f"Invalid env_name: expected one of {sorted(allowed)}, got {self.env_name!r}",
        )

    @property
    def environment(self) -> Environment:
        return Environment(self.env_name.strip().lower())

    def base_url_for(self, environment: Environment) -> str:
        if environment is Environment.SANDBOX:
            return self.sandbox_base_url
        return self.production_base_url


_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


def parse_bool(value: object) -> bool | None:
    """Interpret bool-like input; ``None`` means the value is not recognized."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    return None


def _coerce_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    parsed = parse_bool(raw)
    if parsed is None:
        raise ConfigError(f"Invalid {name}: expected a boolean, got {raw!r}")
    return parsed


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_url(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().rstrip("/")
    _validate(bool(value), f"Invalid {name}: expected a URL, got an empty value")
    return value


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("BING_PLACES_ENV") or Environment.PRODUCTION.value).strip().lower()
    allowed = {item.value for item in Environment}
    _validate(
        env_name in allowed,
        f"Invalid BING_PLACES_ENV: expected one of {sorted(allowed)}, got {env_name!r}",
    )

    sandbox_base_url = _read_url("BING_PLACES_SANDBOX_URL", SANDBOX_BASE_URL)
    production_base_url = _read_url("BING_PLACES_PRODUCTION_URL", PRODUCTION_BASE_URL)

    timeout_seconds = _read_float("BING_PLACES_TIMEOUT_SECONDS", "30")
    _validate(
        timeout_seconds > 0,
        f"Invalid BING_PLACES_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    verify_ssl = _coerce_bool("BING_PLACES_VERIFY_SSL", True)

    return ClientConfig(
        env_name=env_name,
        sandbox_base_url=sandbox_base_url,
        production_base_url=production_base_url,
        timeout_seconds=timeout_seconds,
        verify_ssl=verify_ssl,
    )
