"""
Constants for the Tencent Cloud API client.
Values follow the TC3-HMAC-SHA256 signature v3 documentation.
"""

# Signature v3
ALGORITHM = "TC3-HMAC-SHA256"
SIGNING_PREFIX = "TC3"
SCOPE_TERMINATOR = "tc3_request"
CONTENT_TYPE = "application/json; charset=utf-8"
SIGNED_HEADERS = "content-type;host;x-tc-action"

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_HOST = "Host"
HEADER_TC_ACTION = "X-TC-Action"
HEADER_TC_TIMESTAMP = "X-TC-Timestamp"
HEADER_TC_VERSION = "X-TC-Version"
HEADER_TC_REGION = "X-TC-Region"
HEADER_TC_TOKEN = "X-TC-Token"
HEADER_TC_LANGUAGE = "X-TC-Language"

# Service API versions
CVM_VERSION = "2017-03-12"
VPC_VERSION = "2017-03-12"
TAT_VERSION = "2020-10-28"
TKE_VERSION = "2018-05-25"

DEFAULT_REGION = "ap-nanjing"
DEFAULT_ENDPOINT_SUFFIX = "tencentcloudapi.com"

# Default configuration values
DEFAULT_CONFIG = {
    'region': DEFAULT_REGION,
    'timeout': 30,                  # HTTP timeout in seconds
    'endpoint_suffix': DEFAULT_ENDPOINT_SUFFIX,
    'language': None,               # X-TC-Language, e.g. "en-US"
    'token': None,                  # X-TC-Token for temporary credentials
}

# TAT invocation task states
TASK_TERMINAL_STATES = frozenset({"SUCCESS", "FAILED", "TIMEOUT", "CANCELLED"})
TASK_FAILURE_STATES = frozenset({"FAILED", "TIMEOUT"})
