"""
Tencent Cloud API client library

A Python client for the Tencent Cloud API 3.0 control plane (CVM, VPC,
TAT and TKE) that signs every request with TC3-HMAC-SHA256.

Example usage:
    from tencent_cloud_sdk import TencentCloudClient
    from tencent_cloud_sdk.api import instance

    client = TencentCloudClient.from_env()
    result = instance.describe_instances(client, {"Limit": 10, "Offset": 0})
"""

from .client import TencentCloudClient
from .config import Config
from .exceptions import (
    TencentCloudError,
    ConfigurationError,
    HTTPError,
    APIError,
    CommandError
)
from .models import ActionResult, ActionError, parse_response
from .signer import (
    Credential,
    SigningContext,
    digest,
    hmac_sha256,
    serialize_payload,
    sign
)
from .constants import (
    ALGORITHM,
    SIGNED_HEADERS,
    DEFAULT_CONFIG,
    DEFAULT_REGION
)

__version__ = "1.0.0"
__all__ = [
    "TencentCloudClient",
    "Config",
    "TencentCloudError",
    "ConfigurationError",
    "HTTPError",
    "APIError",
    "CommandError",
    "ActionResult",
    "ActionError",
    "parse_response",
    "Credential",
    "SigningContext",
    "digest",
    "hmac_sha256",
    "serialize_payload",
    "sign",
    "ALGORITHM",
    "SIGNED_HEADERS",
    "DEFAULT_CONFIG",
    "DEFAULT_REGION"
]
