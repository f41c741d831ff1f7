from __future__ import annotations
import json
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError



class SubscriptionSDKError(Exception):
    """Base exception for all Bhojpur Subscription SDK errors."""
    pass


class SubscriptionConfigError(SubscriptionSDKError):
    """Raised when configuration/credentials are invalid or missing."""
    pass


class SubscriptionTransportError(SubscriptionSDKError):
    """
    Network-level failure (DNS, refused connection, timeout).

    The originating httpx exception is kept on `__cause__` and `.original`.
    Never retried by the SDK.
    """

    def __init__(self, message: str, *, method: Optional[str] = None, url: Optional[str] = None,
                 original: Optional[BaseException] = None):
        self.method = method
        self.url = url
        self.original = original
        super().__init__(message)


class SubscriptionDecodeError(SubscriptionSDKError):
    """
    A 200 response whose body is not valid JSON or does not match the
    expected shape. Distinct from an API-reported failure.
    """

    def __init__(self, message: str, *, body: bytes = b"", target: Optional[str] = None):
        self.body = body
        self.target = target
        super().__init__(message)


class CardNumberError(ValueError):
    """Raised when a card number contains anything but ASCII decimal digits."""
    pass


# ------------------------------------------------------------------------------
# Error categories reported by the API
# ------------------------------------------------------------------------------

class ErrorType(str, Enum):
    CARD_ERROR = "card_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    API_ERROR = "api_error"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "ErrorType":
        return cls.UNKNOWN


class ErrorCode(str, Enum):
    INCORRECT_NUMBER = "incorrect_number"
    INVALID_NUMBER = "invalid_number"
    INVALID_EXPIRY_MONTH = "invalid_expiry_month"
    INVALID_EXPIRY_YEAR = "invalid_expiry_year"
    INVALID_CVC = "invalid_cvc"
    EXPIRED_CARD = "expired_card"
    INCORRECT_CVC = "incorrect_cvc"
    CARD_DECLINED = "card_declined"
    MISSING = "missing"
    PROCESSING_ERROR = "processing_error"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "ErrorCode":
        return cls.UNKNOWN


class ErrorDetail(BaseModel):
    """The nested `error` object of an API failure body."""
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None


class _ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    error: ErrorDetail
    request_id: Optional[str] = None


class SubscriptionAPIError(SubscriptionSDKError):
    """
    Non-200 response from the API (domain error).

    Attributes
    ----------
    status : int
        HTTP status code.
    message : str
        Human-readable message (best effort when the body was not parseable).
    detail : Optional[ErrorDetail]
        Parsed `error` object, when the body had the expected shape.
    request_id : Optional[str]
        Server correlation id, from the body or the response headers.

    Branch on `.type` / `.code` (enums), never on the message text.
    """

    def __init__(
        self,
        status: int,
        message: str,
        *,
        detail: Optional[ErrorDetail] = None,
        request_id: Optional[str] = None,
        body: bytes = b"",
    ):
        self.status = int(status)
        self.message = message
        self.detail = detail
        self.request_id = request_id
        self.body = body
        super().__init__(self._message())

    @property
    def type(self) -> ErrorType:
        raw = self.detail.type if self.detail else None
        return ErrorType(raw) if raw else ErrorType.UNKNOWN

    @property
    def code(self) -> ErrorCode:
        raw = self.detail.code if self.detail else None
        return ErrorCode(raw) if raw else ErrorCode.UNKNOWN

    @property
    def param(self) -> Optional[str]:
        return self.detail.param if self.detail else None

    def _message(self) -> str:
        rid = f" req_id={self.request_id}" if self.request_id else ""
        cat = ""
        if self.detail and (self.detail.type or self.detail.code):
            cat = f" {self.detail.type or '-'}/{self.detail.code or '-'}"
        return f"HTTP {self.status}{cat}{rid}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"SubscriptionAPIError(status={self.status}, type={self.type.value!r}, "
            f"code={self.code.value!r}, request_id={self.request_id!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Sanitized summary for logs."""
        return {
            "status": self.status,
            "type": self.type.value,
            "code": self.code.value,
            "param": self.param,
            "message": self.message,
            "request_id": self.request_id,
        }


# ------------------------------------------------------------------------------
# Error decoder
# ------------------------------------------------------------------------------

REQUEST_ID_HEADERS = ("Request-Id", "X-Request-Id")

_MAX_FALLBACK_MESSAGE = 240


def _header_request_id(headers: Optional[Mapping[str, str]]) -> Optional[str]:
    if not headers:
        return None
    for name in REQUEST_ID_HEADERS:
        v = headers.get(name)
        if v:
            return v
    return None


def _fallback_message(status: int, content: bytes) -> str:
    text = content.decode("utf-8", errors="replace").strip()
    if not text:
        return f"HTTP {status}"
    return text if len(text) <= _MAX_FALLBACK_MESSAGE else text[:_MAX_FALLBACK_MESSAGE - 3] + "..."


def decode_error_response(
    status: int,
    content: bytes,
    headers: Optional[Mapping[str, str]] = None,
) -> SubscriptionAPIError:
    """
    Turn a non-200 response into a SubscriptionAPIError.

    Always returns an error, even for an empty or malformed body; in that case
    only the message (body text or "HTTP <status>") is populated.
    """
    request_id = _header_request_id(headers)
    try:
        envelope = _ErrorEnvelope.model_validate_json(content or b"")
    except ValidationError:
        # Some failures only carry a top-level {"message": "..."}
        message = None
        try:
            raw = json.loads(content or b"")
        except ValueError:
            raw = None
        if isinstance(raw, dict) and isinstance(raw.get("message"), str):
            message = raw["message"]
        return SubscriptionAPIError(
            status,
            message or _fallback_message(status, content or b""),
            request_id=request_id,
            body=content or b"",
        )

    detail = envelope.error
    return SubscriptionAPIError(
        status,
        detail.message or f"HTTP {status}",
        detail=detail,
        request_id=envelope.request_id or request_id,
        body=content,
    )


__all__ = [
    "SubscriptionSDKError",
    "SubscriptionConfigError",
    "SubscriptionTransportError",
    "SubscriptionDecodeError",
    "SubscriptionAPIError",
    "CardNumberError",
    "ErrorType",
    "ErrorCode",
    "ErrorDetail",
    "decode_error_response",
]
