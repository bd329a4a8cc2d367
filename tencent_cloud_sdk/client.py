"""
Tencent Cloud API 3.0 client.

This module provides the request envelope shared by every API call: it
serializes the payload once, signs it with TC3-HMAC-SHA256, sends it as a
POST to ``https://{service}.tencentcloudapi.com/`` and unwraps the
``Response`` envelope.
"""

import time
from typing import Any, Dict, Mapping, Optional

import requests

from .constants import (
    CONTENT_TYPE,
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_HOST,
    HEADER_TC_ACTION,
    HEADER_TC_LANGUAGE,
    HEADER_TC_REGION,
    HEADER_TC_TIMESTAMP,
    HEADER_TC_TOKEN,
    HEADER_TC_VERSION,
)
from .exceptions import ConfigurationError, HTTPError
from .log import get_logger
from .models import ActionError, ParsedResponse, parse_response
from .signer import Credential, SigningContext, serialize_payload, sign

logger = get_logger(__name__)


class TencentCloudClient:
    """
    Signed client for Tencent Cloud control-plane APIs.

    One client holds one credential and one HTTP session; every call is
    independent and signed with a fresh timestamp.
    """

    def __init__(self, secret_id: str, secret_key: str, **config):
        """
        Initialize the client.

        Args:
            secret_id: API key id (SecretId)
            secret_key: API key secret (SecretKey)
            **config: Configuration options (region, timeout, endpoint_suffix,
                language, token)
        """
        self.credential = Credential(secret_id, secret_key)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "TencentCloudClient":
        """Create a client from TENCENTCLOUD_* environment variables."""
        from .config import Config

        cfg = Config.from_env(dotenv_path)
        options = {**cfg.client_options(), **overrides}
        return cls(cfg.secret_id, cfg.secret_key, **options)

    def _validate_config(self):
        """Validate client configuration."""
        if not self.credential.secret_id:
            raise ConfigurationError("secret_id cannot be empty")

        if not self.credential.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        if not self.config['region']:
            raise ConfigurationError("region cannot be empty")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def region(self) -> str:
        return self.config['region']

    def endpoint_for(self, service: str) -> str:
        """Host name for a service, e.g. ``cvm.tencentcloudapi.com``."""
        return f"{service}.{self.config['endpoint_suffix']}"

    def build_headers(
        self,
        authorization: str,
        host: str,
        action: str,
        version: str,
        timestamp: int,
        region: str,
    ) -> Dict[str, str]:
        """
        Build the HTTP headers for a signed call.

        Only content-type, host and x-tc-action are covered by the signature;
        the remaining headers are sent as is.
        """
        headers = {
            HEADER_AUTHORIZATION: authorization,
            HEADER_CONTENT_TYPE: CONTENT_TYPE,
            HEADER_HOST: host,
            HEADER_TC_ACTION: action,
            HEADER_TC_TIMESTAMP: str(timestamp),
            HEADER_TC_VERSION: version,
            HEADER_TC_REGION: region,
        }
        if self.config['token']:
            headers[HEADER_TC_TOKEN] = self.config['token']
        if self.config['language']:
            headers[HEADER_TC_LANGUAGE] = self.config['language']
        return headers

    def invoke(
        self,
        service: str,
        version: str,
        action: str,
        payload: Optional[Mapping[str, Any]] = None,
        endpoint: Optional[str] = None,
        region: Optional[str] = None,
    ) -> ParsedResponse:
        """
        Send one signed API call and return the parsed envelope.

        Args:
            service: Service name, e.g. ``cvm``
            version: API version, e.g. ``2017-03-12``
            action: Action name, e.g. ``DescribeInstances``
            payload: Request parameters
            endpoint: Host override (defaults to ``{service}.tencentcloudapi.com``)
            region: Region override (defaults to the client region)

        Returns:
            ActionResult on success, ActionError when the provider reports one

        Raises:
            HTTPError: If the request fails or the body is not a response envelope
        """
        host = endpoint or self.endpoint_for(service)
        region = region or self.config['region']

        # Serialized once: the same text is hashed and transmitted.
        body = serialize_payload(payload if payload is not None else {})
        timestamp = int(time.time())

        authorization = sign(SigningContext.for_credential(
            self.credential,
            host=host,
            service=service,
            region=region,
            action=action,
            version=version,
            timestamp=timestamp,
            payload=body,
        ))
        headers = self.build_headers(authorization, host, action, version, timestamp, region)

        logger.debug(f"Calling {service}:{action} in {region}")

        try:
            response = self.session.request(
                'POST',
                f"https://{host}/",
                headers=headers,
                data=body.encode('utf-8'),
                timeout=self.config['timeout'],
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        return self._parse(response)

    def call(
        self,
        service: str,
        version: str,
        action: str,
        payload: Optional[Mapping[str, Any]] = None,
        endpoint: Optional[str] = None,
        region: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send one signed API call and return the ``Response`` object.

        Raises:
            APIError: If the provider reports an error
            HTTPError: If the request fails or the body is not a response envelope
        """
        result = self.invoke(service, version, action, payload, endpoint, region)
        if isinstance(result, ActionError):
            logger.warning(
                f"{service}:{action} failed with {result.code} (RequestId {result.request_id})"
            )
        return result.unwrap()

    def _parse(self, response: requests.Response) -> ParsedResponse:
        try:
            document = response.json()
        except ValueError as e:
            raise HTTPError(
                f"Invalid JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from e
        try:
            return parse_response(document)
        except HTTPError as e:
            raise HTTPError(
                f"{e.message} (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from e

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
