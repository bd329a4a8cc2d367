"""
Environment-driven configuration.

Credentials are read from the process environment, after loading an
optional ``.env`` file. They are never written anywhere by this package.
"""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_CONFIG
from .exceptions import ConfigurationError
from .log import set_level
from .signer import Credential

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass
class Config:
    """Validated client configuration."""

    secret_id: str
    secret_key: str = field(repr=False)
    region: str = DEFAULT_CONFIG['region']
    timeout: float = DEFAULT_CONFIG['timeout']
    token: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """
        Create a Config from environment variables.

        ``TENCENTCLOUD_SECRET_ID``/``TENCENTCLOUD_SECRET_KEY`` are preferred;
        ``SecretId``/``SecretKey`` are accepted as fallbacks. Without
        ``dotenv_path``, the nearest ``.env`` above the working directory is
        loaded. ``LOG_LEVEL`` is applied to the package loggers.

        Raises:
            ConfigurationError: If credentials are missing or a value is invalid
        """
        # Search from the working directory, not from this installed module.
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

        secret_id = _first_env("TENCENTCLOUD_SECRET_ID", "SecretId")
        secret_key = _first_env("TENCENTCLOUD_SECRET_KEY", "SecretKey")
        if not secret_id or not secret_key:
            raise ConfigurationError(
                "TENCENTCLOUD_SECRET_ID and TENCENTCLOUD_SECRET_KEY environment variables are required"
            )

        region = os.environ.get("TENCENTCLOUD_REGION", DEFAULT_CONFIG['region'])

        raw_timeout = os.environ.get("TENCENTCLOUD_TIMEOUT", str(DEFAULT_CONFIG['timeout']))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"TENCENTCLOUD_TIMEOUT must be a number, got: {raw_timeout}"
            ) from None

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, got: {log_level}"
            )
        set_level(log_level)

        return cls(
            secret_id=secret_id,
            secret_key=secret_key,
            region=region,
            timeout=timeout,
            token=os.environ.get("TENCENTCLOUD_TOKEN") or None,
            log_level=log_level,
        )

    @property
    def credential(self) -> Credential:
        return Credential(self.secret_id, self.secret_key)

    def client_options(self) -> Dict[str, Any]:
        """Keyword arguments for :class:`TencentCloudClient`."""
        return {
            'region': self.region,
            'timeout': self.timeout,
            'token': self.token,
        }
