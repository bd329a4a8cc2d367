"""
TC3-HMAC-SHA256 request signing for Tencent Cloud API 3.0.

This module builds the canonical request, the string to sign and the
derived signing key exactly as the provider verifies them, and formats
the resulting ``Authorization`` header value. Everything here is pure:
no I/O and no shared state, so it is safe to call from any thread.

Reference: https://cloud.tencent.com/document/api/213/30654
"""

import dataclasses
import datetime
import hashlib
import hmac
import json
from typing import Any, Mapping, Union

from .constants import (
    ALGORITHM,
    CONTENT_TYPE,
    SCOPE_TERMINATOR,
    SIGNED_HEADERS,
    SIGNING_PREFIX,
)

Payload = Union[str, Mapping[str, Any]]


@dataclasses.dataclass(frozen=True)
class Credential:
    """Permanent API key pair from the CAM console."""

    secret_id: str
    secret_key: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class SigningContext:
    """
    Everything needed to sign one request.

    ``payload`` is either the JSON body already serialized (what the client
    passes, so the hashed bytes are the transmitted bytes) or a mapping that
    is serialized with :func:`serialize_payload`. ``timestamp`` must be the
    same value sent in ``X-TC-Timestamp``.
    """

    secret_id: str
    secret_key: str = dataclasses.field(repr=False)
    host: str
    service: str
    region: str
    action: str
    version: str
    timestamp: int
    payload: Payload
    method: str = "POST"

    @classmethod
    def for_credential(cls, credential: Credential, **kwargs) -> "SigningContext":
        return cls(
            secret_id=credential.secret_id,
            secret_key=credential.secret_key,
            **kwargs
        )


def digest(message: str) -> str:
    """SHA-256 of the UTF-8 encoded message, hex encoded."""
    return hashlib.sha256(message.encode('utf-8')).hexdigest()


def hmac_sha256(message: str, key: Union[str, bytes], hex_output: bool = False) -> Union[bytes, str]:
    """
    HMAC-SHA256 of ``message`` keyed by ``key``.

    Args:
        message: Text to authenticate
        key: Text key, or raw bytes from a previous derivation step
        hex_output: Return a hex string instead of raw bytes

    Returns:
        Raw digest bytes, or hex string when ``hex_output`` is set
    """
    if isinstance(key, str):
        key = key.encode('utf-8')
    mac = hmac.new(key, message.encode('utf-8'), hashlib.sha256)
    return mac.hexdigest() if hex_output else mac.digest()


def serialize_payload(payload: Mapping[str, Any]) -> str:
    """
    Serialize a request payload to the JSON text that is hashed and sent.

    Compact separators and insertion-ordered keys, non-ASCII left as is.
    """
    return json.dumps(payload, separators=(',', ':'), ensure_ascii=False)


def _payload_text(payload: Payload) -> str:
    if isinstance(payload, str):
        return payload
    return serialize_payload(payload)


def utc_date(timestamp: int) -> str:
    """Calendar date (YYYY-MM-DD) in UTC for a Unix timestamp in seconds."""
    moment = datetime.datetime.fromtimestamp(int(timestamp), tz=datetime.timezone.utc)
    return moment.strftime('%Y-%m-%d')


def build_canonical_headers(host: str, action: str) -> str:
    # Order and membership must match SIGNED_HEADERS.
    return (
        f"content-type:{CONTENT_TYPE}\n"
        f"host:{host}\n"
        f"x-tc-action:{action.lower()}\n"
    )


def build_canonical_request(ctx: SigningContext) -> str:
    """
    Build the canonical request string.

    Layout: method, URI ``/``, empty query string, the canonical header
    block (which ends in a newline), the signed header list and the payload
    hash, joined by newlines.
    """
    hashed_payload = digest(_payload_text(ctx.payload))
    return "\n".join([
        ctx.method,
        "/",
        "",
        build_canonical_headers(ctx.host, ctx.action),
        SIGNED_HEADERS,
        hashed_payload,
    ])


def build_credential_scope(date: str, service: str) -> str:
    return f"{date}/{service}/{SCOPE_TERMINATOR}"


def build_string_to_sign(ctx: SigningContext) -> str:
    scope = build_credential_scope(utc_date(ctx.timestamp), ctx.service)
    return "\n".join([
        ALGORITHM,
        str(int(ctx.timestamp)),
        scope,
        digest(build_canonical_request(ctx)),
    ])


def derive_signing_key(secret_key: str, date: str, service: str) -> bytes:
    """Derive the per-date, per-service key: TC3+secret -> date -> service -> tc3_request."""
    k_date = hmac_sha256(date, SIGNING_PREFIX + secret_key)
    k_service = hmac_sha256(service, k_date)
    return hmac_sha256(SCOPE_TERMINATOR, k_service)


def sign(ctx: SigningContext) -> str:
    """
    Compute the ``Authorization`` header value for a request.

    The function never fails on well-formed input. A wrong timestamp, a
    payload that differs from the transmitted body or a mismatched host
    still yields a well-formed value which the provider then rejects with
    ``AuthFailure.SignatureFailure``.

    Args:
        ctx: Signing inputs

    Returns:
        ``TC3-HMAC-SHA256 Credential=..., SignedHeaders=..., Signature=...``
    """
    date = utc_date(ctx.timestamp)
    scope = build_credential_scope(date, ctx.service)
    signing_key = derive_signing_key(ctx.secret_key, date, ctx.service)
    signature = hmac_sha256(build_string_to_sign(ctx), signing_key, hex_output=True)

    return (
        f"{ALGORITHM} "
        f"Credential={ctx.secret_id}/{scope}, "
        f"SignedHeaders={SIGNED_HEADERS}, "
        f"Signature={signature}"
    )
