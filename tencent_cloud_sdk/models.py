"""
Result types for the Tencent Cloud response envelope.

Every API 3.0 response has the shape ``{"Response": {...}}``. On failure
the inner object carries ``Error: {Code, Message}`` and a ``RequestId``;
on success it carries the action's fields and a ``RequestId``.
"""
import dataclasses
from typing import Any, Dict, Optional, Union

from .exceptions import APIError, HTTPError


@dataclasses.dataclass(frozen=True)
class ActionResult:
    """Successful action: the ``Response`` object and its request id."""

    data: Dict[str, Any]
    request_id: str

    def unwrap(self) -> Dict[str, Any]:
        return self.data


@dataclasses.dataclass(frozen=True)
class ActionError:
    """Provider-reported failure."""

    code: str
    message: str
    request_id: Optional[str] = None

    def unwrap(self):
        raise APIError(self.code, self.message, self.request_id)


ParsedResponse = Union[ActionResult, ActionError]


def parse_response(document: Any) -> ParsedResponse:
    """
    Split a decoded response body into a success or failure variant.

    Raises:
        HTTPError: If the body is not a Tencent Cloud response envelope
    """
    if not isinstance(document, dict) or not isinstance(document.get('Response'), dict):
        raise HTTPError("Malformed response: missing 'Response' object")

    response = document['Response']
    request_id = response.get('RequestId')
    error = response.get('Error')
    if error:
        if not isinstance(error, dict):
            raise HTTPError("Malformed response: 'Error' is not an object")
        return ActionError(
            code=str(error.get('Code', '')),
            message=str(error.get('Message', '')),
            request_id=request_id,
        )
    return ActionResult(data=response, request_id=request_id or '')
